"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
"""

import sys
from pathlib import Path

import pytest

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================
# Log Sink Fixtures
# ============================================================

class RecordingSink:
    """记录所有日志调用的接收端，用于断言日志行为"""

    def __init__(self):
        self.records = []

    def info(self, message):
        self.records.append(('info', message, None))

    def warning(self, message, cause=None):
        self.records.append(('warning', message, cause))

    def error(self, message, cause=None):
        self.records.append(('error', message, cause))

    def levels(self):
        return [level for level, _, _ in self.records]

    def of_level(self, level):
        return [r for r in self.records if r[0] == level]


@pytest.fixture
def sink():
    """记录型日志接收端"""
    return RecordingSink()


# ============================================================
# ConfigStore Fixtures
# ============================================================

@pytest.fixture
def config_path(tmp_path):
    """临时配置文件路径（文件尚不存在）"""
    return tmp_path / "tulip.properties"


@pytest.fixture
def unwritable_path(tmp_path):
    """父目录不存在的路径，任何创建/写入都会失败"""
    return tmp_path / "no_such_dir" / "tulip.properties"


@pytest.fixture
def store(config_path, sink):
    """指向临时路径的 ConfigStore"""
    from tulip_config.infrastructure.persistence import ConfigStore
    return ConfigStore("tulip", str(config_path), logger=sink)


@pytest.fixture
def make_store(sink):
    """按路径创建 ConfigStore 的工厂"""
    from tulip_config.infrastructure.persistence import ConfigStore

    def _make(path, identifier="tulip"):
        return ConfigStore(identifier, str(path), logger=sink)
    return _make

