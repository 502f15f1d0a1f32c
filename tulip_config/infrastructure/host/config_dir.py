"""
配置目录解析器

宿主（mod 加载器）负责给出配置根目录，这里只提供两种简单适配:
- StaticConfigDirResolver: 固定目录
- CallableConfigDirResolver: 包装宿主提供的函数，例如加载器的 get_config_dir
"""

import os
from typing import Callable, Union


class StaticConfigDirResolver:
    """固定配置目录"""

    def __init__(self, root: Union[str, 'os.PathLike[str]']):
        self.root = os.fspath(root)

    def resolve_config_dir(self) -> str:
        return self.root


class CallableConfigDirResolver:
    """把宿主函数适配为 IConfigDirResolver"""

    def __init__(self, func: Callable[[], Union[str, 'os.PathLike[str]']]):
        self.func = func

    def resolve_config_dir(self) -> str:
        return os.fspath(self.func())
