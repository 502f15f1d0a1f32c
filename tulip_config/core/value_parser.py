"""
标量值解析器 - 核心算法

负责配置值在文本与 Python 标量之间的转换:
- 整数 / 长整数: 可选符号 + 十进制数字，带位宽范围检查
- 单精度 / 双精度浮点: 十进制、指数、十六进制字面量，NaN / Infinity，
  可选 f/F/d/D 后缀
- 布尔: true / false（不区分大小写）

解析失败统一抛出 ValueError，由调用方包装成带键名的异常。
"""

import math
import re
import struct
from typing import Any


INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1
LONG_MIN, LONG_MAX = -(2 ** 63), 2 ** 63 - 1

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')

_DECIMAL_FLOAT_RE = re.compile(
    r'(?P<number>[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?'
)
_HEX_FLOAT_RE = re.compile(
    r'(?P<number>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)[fFdD]?'
)
_SPECIAL_FLOATS = {
    'NaN': math.nan,
    '+NaN': math.nan,
    '-NaN': math.nan,
    'Infinity': math.inf,
    '+Infinity': math.inf,
    '-Infinity': -math.inf,
}


def _parse_integer(text: str, low: int, high: int) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"不是合法的整数: {text!r}")
    value = int(text)
    if not low <= value <= high:
        raise ValueError(f"超出范围 [{low}, {high}]: {text!r}")
    return value


def parse_int(text: str) -> int:
    """解析 32 位整数"""
    return _parse_integer(text, INT_MIN, INT_MAX)


def parse_long(text: str) -> int:
    """解析 64 位整数"""
    return _parse_integer(text, LONG_MIN, LONG_MAX)


def parse_double(text: str) -> float:
    """
    解析双精度浮点数

    两端空白会被忽略；支持 "1.5"、"1e3"、".5"、"2."、"1.5f"、"0x1.8p1"、
    "NaN"、"-Infinity"。
    """
    stripped = text.strip()
    if stripped in _SPECIAL_FLOATS:
        return _SPECIAL_FLOATS[stripped]

    match = _DECIMAL_FLOAT_RE.fullmatch(stripped)
    if match:
        return float(match.group('number'))

    match = _HEX_FLOAT_RE.fullmatch(stripped)
    if match:
        return float.fromhex(match.group('number'))

    raise ValueError(f"不是合法的浮点数: {text!r}")


def parse_float(text: str) -> float:
    """解析单精度浮点数（先按双精度解析，再舍入到 32 位）"""
    value = parse_double(text)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_boolean(text: str) -> bool:
    """解析布尔值"""
    lowered = text.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    raise ValueError(f"不是合法的布尔值: {text!r}")


def stringify(value: Any) -> str:
    """
    转换为配置文件中的文本形式

    与上面的解析函数互逆: bool -> true/false，数字 -> 十进制，
    无穷与 NaN -> Infinity / -Infinity / NaN。None 写为 null，只能按字符串读回。
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        return repr(value)
    return str(value)
