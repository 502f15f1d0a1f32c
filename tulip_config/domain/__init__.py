# Domain

"""
领域层 - 异常体系与外部协作方接口，不依赖任何基础设施实现。
"""

from .errors import (
    TulipConfigError,
    ConfigIOError,
    ConfigKeyNotFoundError,
    ConfigParseError,
)

__all__ = [
    'TulipConfigError',
    'ConfigIOError',
    'ConfigKeyNotFoundError',
    'ConfigParseError',
]
