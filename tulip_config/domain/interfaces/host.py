"""
宿主协作方接口

定义配置存储依赖的两个外部协作方：配置目录解析器与日志接收端。
"""

from typing import Optional, Protocol


class IConfigDirResolver(Protocol):
    """
    配置目录解析器接口

    职责:
    - 返回宿主提供的配置根目录
    - 内部实现（加载器、启动参数等）与本库无关
    """

    def resolve_config_dir(self) -> str:
        """返回配置根目录"""
        ...


class ILogSink(Protocol):
    """
    日志接收端接口

    TulipLogger 满足该接口，宿主也可以注入自己的实现。
    """

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...
