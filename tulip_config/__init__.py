"""
Tulip Config - mod 键值配置持久化

用法:
    from tulip_config import ConfigStore, StaticConfigDirResolver

    store = ConfigStore.for_mod("tulip", StaticConfigDirResolver("config"))
    store.set_default("volume", 0.8)
    store.load()
    volume = store.get_double("volume")
"""

from .domain.errors import (
    TulipConfigError,
    ConfigIOError,
    ConfigKeyNotFoundError,
    ConfigParseError,
)
from .infrastructure.host import StaticConfigDirResolver, CallableConfigDirResolver
from .infrastructure.persistence import ConfigStore

__version__ = "1.0.0"

__all__ = [
    'ConfigStore',
    'StaticConfigDirResolver',
    'CallableConfigDirResolver',
    'TulipConfigError',
    'ConfigIOError',
    'ConfigKeyNotFoundError',
    'ConfigParseError',
]
