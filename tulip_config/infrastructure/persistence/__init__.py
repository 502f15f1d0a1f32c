"""
持久化基础设施模块

提供 .properties 编解码与配置保存/加载功能。
"""
from . import properties_codec
from .config_store import ConfigStore

__all__ = ['ConfigStore', 'properties_codec']
