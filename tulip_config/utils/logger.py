"""
Tulip 日志

ConfigStore 默认使用的日志接收端，满足 ILogSink 接口:
- info / warning / error 三个级别
- warning / error 可附带异常原因（cause），以 traceback 形式输出

宿主若没有自己的日志系统，可在启动时调用 setup_logging() 把输出接到
标准输出和日志文件；宿主已有日志系统时直接向 ConfigStore 注入即可。

用法:
    from tulip_config.utils.logger import get_logger, setup_logging

    setup_logging(log_file="logs/tulip.log")
    logger = get_logger(__name__)
    logger.error("保存失败", cause=exc)
"""

import logging
import sys
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"


class TulipLogger:
    """标准 logging 之上的薄封装，增加 cause 参数"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, cause: Optional[BaseException] = None):
        exc_info = None
        if cause is not None:
            exc_info = (type(cause), cause, cause.__traceback__)
        self.logger.log(level, message, exc_info=exc_info)

    def info(self, message: str):
        self._log(logging.INFO, message)

    def warning(self, message: str, cause: Optional[BaseException] = None):
        self._log(logging.WARNING, message, cause)

    def error(self, message: str, cause: Optional[BaseException] = None):
        self._log(logging.ERROR, message, cause)


def get_logger(name: str) -> TulipLogger:
    """获取模块日志器（通常传入 __name__）"""
    return TulipLogger(name)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """
    宿主入口：初始化根日志器

    Args:
        level: 日志级别
        log_file: 日志文件路径（可选，目录不存在时自动创建）
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )
