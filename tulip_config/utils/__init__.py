"""
Utils 模块初始化文件
"""

from .logger import TulipLogger, get_logger, setup_logging

__all__ = [
    'TulipLogger',
    'get_logger',
    'setup_logging',
]
