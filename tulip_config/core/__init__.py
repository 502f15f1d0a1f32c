"""
核心算法模块
"""

from .value_parser import (
    parse_int,
    parse_long,
    parse_float,
    parse_double,
    parse_boolean,
    stringify,
)

__all__ = [
    'parse_int',
    'parse_long',
    'parse_float',
    'parse_double',
    'parse_boolean',
    'stringify',
]
