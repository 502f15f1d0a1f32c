"""
配置存储异常体系

- ConfigIOError: 文件无法创建/写入/读取
- ConfigKeyNotFoundError: 读取不存在的键
- ConfigParseError: 值的文本不符合请求的类型

后两者属于调用方编程错误，存储内部从不捕获。
"""

from typing import Optional


class TulipConfigError(Exception):
    """配置存储异常基类"""


class ConfigIOError(TulipConfigError, OSError):
    """
    配置文件 I/O 失败

    原始异常通过 __cause__ 保留。
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class ConfigKeyNotFoundError(TulipConfigError, KeyError):
    """键不存在"""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"配置项不存在: {self.key!r}"


class ConfigParseError(TulipConfigError, ValueError):
    """值无法解析为请求的类型"""

    def __init__(self, key: str, value: str, type_name: str):
        super().__init__(key, value, type_name)
        self.key = key
        self.value = value
        self.type_name = type_name

    def __str__(self) -> str:
        return f"配置项 {self.key!r} 的值 {self.value!r} 不是合法的 {self.type_name}"
