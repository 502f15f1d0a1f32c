"""
宿主适配模块

提供配置目录解析器的简单实现。
"""
from .config_dir import StaticConfigDirResolver, CallableConfigDirResolver

__all__ = ['StaticConfigDirResolver', 'CallableConfigDirResolver']
