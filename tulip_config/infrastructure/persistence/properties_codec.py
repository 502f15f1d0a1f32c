"""
.properties 文本格式编解码 - 基础设施层

读取规则:
- 每个逻辑行一个 key=value；物理行以奇数个反斜杠结尾时续到下一行，
  续行的前导空白被丢弃
- 空行以及首个非空白字符为 # 或 ! 的行是注释
- 键在第一个未转义的 =、: 或空白处结束，分隔符两侧的空白被跳过
- 值两端未转义的空白被去掉
- 转义: \\t \\n \\r \\f \\uXXXX，其余 \\x 还原为 x

写出规则与之对称，保证写出的文件能被原样读回。

用法:
    from tulip_config.infrastructure.persistence import properties_codec

    values = properties_codec.loads("a=1\\nb = 2\\n")
    text = properties_codec.dumps(values, header="my mod")
"""

import re
from typing import Dict, IO, Iterator, List, Mapping, Optional, Tuple


_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')

# 键/值之间的空白字符
_WHITESPACE = ' \t\f'

_LOAD_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_DUMP_ESCAPES = {'\\': '\\\\', '\t': '\\t', '\n': '\\n', '\r': '\\r', '\f': '\\f',
                 '=': '\\=', ':': '\\:', '#': '\\#', '!': '\\!'}


# ============================================================
# 读取
# ============================================================

def _ends_with_escape(text: str) -> bool:
    """末尾是否为奇数个反斜杠（即最后一个字符被转义或为续行符）"""
    count = len(text) - len(text.rstrip('\\'))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    """把物理行合并为逻辑行，跳过空行和注释"""
    pending: Optional[str] = None

    for physical in _LINE_BREAK_RE.split(text):
        line = physical.lstrip(_WHITESPACE)

        if pending is None:
            if not line or line[0] in '#!':
                continue
        if _ends_with_escape(line):
            pending = (pending or '') + line[:-1]
            continue

        yield (pending or '') + line
        pending = None

    # 文件末尾的续行符被忽略
    if pending:
        yield pending


def _unescape(raw: str) -> str:
    """还原转义序列"""
    out: List[str] = []
    i = 0
    length = len(raw)

    while i < length:
        c = raw[i]
        i += 1
        if c != '\\':
            out.append(c)
            continue
        if i >= length:
            break
        c = raw[i]
        i += 1
        if c == 'u':
            digits = raw[i:i + 4]
            if len(digits) < 4 or not all(d in '0123456789abcdefABCDEF' for d in digits):
                raise ValueError(f"非法的 \\uXXXX 转义: {raw!r}")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_LOAD_ESCAPES.get(c, c))

    return ''.join(out)


def _rstrip_unescaped(raw: str) -> str:
    """去掉末尾未转义的空白，保留 '\\ ' 这类被转义的空白"""
    stripped = raw.rstrip(_WHITESPACE)
    if len(stripped) < len(raw) and _ends_with_escape(stripped):
        return raw[:len(stripped) + 1]
    return stripped


def _split_line(line: str) -> Tuple[str, str]:
    """把逻辑行拆成未还原转义的 (key, value)"""
    length = len(line)
    key_end = 0
    has_separator = False
    escaped = False

    while key_end < length:
        c = line[key_end]
        if escaped:
            escaped = False
        elif c == '\\':
            escaped = True
        elif c in '=:':
            has_separator = True
            break
        elif c in _WHITESPACE:
            break
        key_end += 1

    value_start = key_end + 1 if has_separator else key_end
    while value_start < length:
        c = line[value_start]
        if c not in _WHITESPACE:
            if not has_separator and c in '=:':
                has_separator = True
            else:
                break
        value_start += 1

    return line[:key_end], _rstrip_unescaped(line[value_start:])


def loads(text: str) -> Dict[str, str]:
    """
    解析 .properties 文本

    Args:
        text: 文件内容

    Returns:
        {键: 值}，同名键以后出现的为准

    Raises:
        ValueError: 存在非法的 \\uXXXX 转义
    """
    result: Dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_line(line)
        result[_unescape(raw_key)] = _unescape(raw_value)
    return result


def load(fp: IO[str]) -> Dict[str, str]:
    """从文本流解析"""
    return loads(fp.read())


# ============================================================
# 写出
# ============================================================

def _escape(text: str, is_key: bool) -> str:
    out: List[str] = []
    last = len(text) - 1

    for index, c in enumerate(text):
        if c == ' ':
            # 键中的空格全部转义；值只转义首尾空格
            out.append('\\ ' if is_key or index == 0 or index == last else ' ')
        elif c in _DUMP_ESCAPES:
            out.append(_DUMP_ESCAPES[c])
        elif ord(c) < 0x20:
            out.append(f'\\u{ord(c):04X}')
        else:
            out.append(c)

    return ''.join(out)


def dumps(values: Mapping[str, str], header: Optional[str] = None) -> str:
    """
    生成 .properties 文本

    Args:
        values: {键: 值}，按迭代顺序写出
        header: 文件头注释，可多行

    Returns:
        以换行结尾的文本（values 为空且无 header 时为空串）
    """
    lines: List[str] = []

    if header is not None:
        for comment in _LINE_BREAK_RE.split(header):
            lines.append(f'#{comment}')

    for key, value in values.items():
        lines.append(f'{_escape(key, True)}={_escape(value, False)}')

    return ''.join(line + '\n' for line in lines)


def dump(values: Mapping[str, str], fp: IO[str], header: Optional[str] = None):
    """写出到文本流"""
    fp.write(dumps(values, header))
