"""
配置持久化适配器 - 基础设施层

负责把 mod 的键值配置保存到 .properties 文件并读回，提供类型化读取。

典型流程:
    store = ConfigStore.for_mod("tulip", resolver)
    store.set_default("render_distance", 12)
    store.set_default("show_hud", True)
    store.restore_and_persist()       # 读取磁盘值并把新增默认值写回

    distance = store.get_int("render_distance")

安全入口 save() / load() 捕获 ConfigIOError 并记录日志；
不安全入口 persist() / restore() 等直接向调用方抛出。
"""
import os
from typing import Any, Dict, Iterator, List, Optional, Callable

from tulip_config.config import PropertiesConfig, get_properties_config
from tulip_config.core import value_parser
from tulip_config.domain.errors import (
    ConfigIOError,
    ConfigKeyNotFoundError,
    ConfigParseError,
)
from tulip_config.domain.interfaces import IConfigDirResolver, ILogSink
from tulip_config.infrastructure.persistence import properties_codec
from tulip_config.utils.logger import get_logger


class ConfigStore:
    """
    配置存储管理器

    持有内存中的键值集合（values），在调用 persist / restore 之前
    内存与磁盘可以不一致，调用方借此先登记默认值再落盘。
    """

    def __init__(
        self,
        identifier: str,
        path: str,
        logger: Optional[ILogSink] = None,
        config: Optional[PropertiesConfig] = None
    ):
        """
        Args:
            identifier: 配置归属的逻辑名称（仅用于日志）
            path: 配置文件路径，原样使用
            logger: 日志接收端，默认使用 TulipLogger
            config: 读写参数，默认使用全局 properties_config
        """
        self.identifier = identifier
        self._path = path
        self.logger = logger if logger is not None else get_logger(__name__)
        self.config = config if config is not None else get_properties_config()
        self.values: Dict[str, str] = {}

    @classmethod
    def for_mod(
        cls,
        mod_id: str,
        resolver: IConfigDirResolver,
        logger: Optional[ILogSink] = None,
        config: Optional[PropertiesConfig] = None
    ) -> 'ConfigStore':
        """
        按 mod id 创建存储，文件位于宿主配置目录下的 <mod_id>.properties
        """
        config = config if config is not None else get_properties_config()
        path = os.path.join(resolver.resolve_config_dir(), mod_id + config.file_extension)
        return cls(mod_id, path, logger=logger, config=config)

    @property
    def path(self) -> str:
        return self._path

    # ============================================================
    # 内存写入
    # ============================================================

    def set_default(self, key: str, value: Any):
        """仅当键不存在时写入"""
        if key not in self.values:
            self.values[key] = value_parser.stringify(value)

    def save_property(self, key: str, value: Any):
        """写入或覆盖"""
        self.values[key] = value_parser.stringify(value)

    # ============================================================
    # 持久化
    # ============================================================

    def persist(self):
        """
        把全部配置写入文件（覆盖原内容，文件不存在时创建）

        Raises:
            ConfigIOError: 文件无法创建或写入
        """
        self.logger.info(f"正在保存 {self.identifier} 的配置到 '{self._path}'...")

        if not self._file_exists():
            self.logger.warning(
                f"{self.identifier} 的配置文件不存在，将创建新文件，部分值可能为默认值"
            )

        self._write_file()
        self.logger.info(f"{self.identifier} 的配置已保存")

    def save_unsafe(self):
        """同 persist"""
        self.persist()

    def save(self) -> bool:
        """
        安全保存：失败时记录错误日志而不抛出

        Returns:
            是否保存成功
        """
        try:
            self.persist()
            return True
        except ConfigIOError as e:
            self.logger.error(f"{self.identifier} 的配置保存失败: {e}", cause=e)
            return False

    def restore(self):
        """
        从文件读取配置并合并到内存（覆盖同名键）

        文件不存在时先以当前内存内容创建文件再读取。

        Raises:
            ConfigIOError: 文件无法创建或读取
        """
        self.logger.info(f"正在从 '{self._path}' 加载 {self.identifier} 的配置...")

        if not self._file_exists():
            self.logger.error(
                f"{self.identifier} 的配置文件不存在，将创建新文件，此情况应当被反馈"
            )
            self.persist()

        self.values.update(self._read_file())

    def restore_only(self):
        """同 restore，不写回"""
        self.restore()

    def restore_and_persist(self):
        """
        读取后立即写回，使新版本登记的默认键同步到磁盘

        Raises:
            ConfigIOError: 读取或写入失败
        """
        self.restore()
        self.persist()

    def load_unsafe(self):
        """同 restore：只读取，仅在文件缺失时创建"""
        self.restore()

    def load(self) -> bool:
        """
        安全加载（只读取，不写回）：失败时记录错误日志而不抛出

        Returns:
            是否加载成功
        """
        try:
            self.restore()
            return True
        except ConfigIOError as e:
            self.logger.error(f"{self.identifier} 的配置加载失败: {e}", cause=e)
            return False

    def _file_exists(self) -> bool:
        return os.path.exists(self._path)

    def _write_file(self):
        """先完整编码，再写临时文件并替换目标，失败时原文件保持不变"""
        tmp_path = self._path + '.tmp'
        try:
            text = properties_codec.dumps(self.values, header=self.config.header_comment)
            data = text.encode(self.config.encoding)
            with open(tmp_path, 'wb') as f:
                f.write(data)
            os.replace(tmp_path, self._path)
        except (OSError, UnicodeError) as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise ConfigIOError(f"无法写入配置文件 '{self._path}': {e}", self._path) from e

    def _read_file(self) -> Dict[str, str]:
        try:
            with open(self._path, 'r', encoding=self.config.encoding) as f:
                return properties_codec.load(f)
        except (OSError, ValueError) as e:
            raise ConfigIOError(f"无法读取配置文件 '{self._path}': {e}", self._path) from e

    # ============================================================
    # 类型化读取
    # ============================================================

    def _get_parsed(self, key: str, parser: Callable[[str], Any], type_name: str) -> Any:
        text = self.get_string(key)
        try:
            return parser(text)
        except ValueError as e:
            raise ConfigParseError(key, text, type_name) from e

    def get_int(self, key: str) -> int:
        return self._get_parsed(key, value_parser.parse_int, "int")

    def get_long(self, key: str) -> int:
        return self._get_parsed(key, value_parser.parse_long, "long")

    def get_float(self, key: str) -> float:
        return self._get_parsed(key, value_parser.parse_float, "float")

    def get_double(self, key: str) -> float:
        return self._get_parsed(key, value_parser.parse_double, "double")

    def get_boolean(self, key: str) -> bool:
        return self._get_parsed(key, value_parser.parse_boolean, "boolean")

    def get_string(self, key: str) -> str:
        """
        返回原始文本

        Raises:
            ConfigKeyNotFoundError: 键不存在
        """
        try:
            return self.values[key]
        except KeyError:
            raise ConfigKeyNotFoundError(key) from None

    # ============================================================
    # 便捷查询
    # ============================================================

    def has(self, key: str) -> bool:
        return key in self.values

    def keys(self) -> List[str]:
        return list(self.values)

    def to_dict(self) -> Dict[str, str]:
        """当前内存配置的副本"""
        return dict(self.values)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.values))

    def __repr__(self) -> str:
        return f"ConfigStore(identifier={self.identifier!r}, path={self._path!r}, entries={len(self.values)})"
