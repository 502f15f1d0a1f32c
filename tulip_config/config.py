"""
Tulip 配置中心

集中管理配置存储的可调参数，避免硬编码散落在各模块中。

用法:
    from tulip_config.config import properties_config

    # 访问配置
    encoding = properties_config.encoding

    # 覆盖配置（例如宿主要求使用系统默认编码）
    reload_config(encoding='gbk')
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class PropertiesConfig:
    """
    配置文件读写参数

    控制 .properties 文件的编码、扩展名和文件头注释。
    """
    encoding: str = "utf-8"                 # 读写编码
    file_extension: str = ".properties"     # 按 mod id 寻址时追加的扩展名
    header_comment: Optional[str] = None    # 文件头注释（None 表示不写）


# ============================================================
# 全局配置实例
# ============================================================

properties_config = PropertiesConfig()


# ============================================================
# 便捷函数
# ============================================================

def get_properties_config() -> PropertiesConfig:
    """获取当前全局配置（在调用时读取，以便 reload_config 生效）"""
    return properties_config


def reload_config(**overrides) -> PropertiesConfig:
    """
    重新生成全局配置

    未指定的字段恢复为默认值。已创建的 ConfigStore 保留其构造时拿到的配置。

    Args:
        **overrides: 需要覆盖的字段

    Returns:
        新的全局配置
    """
    global properties_config

    properties_config = replace(PropertiesConfig(), **overrides)
    return properties_config
