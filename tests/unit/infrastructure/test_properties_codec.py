"""
.properties 编解码单元测试

测试覆盖:
- 注释与空行
- 分隔符（=、:、空白）
- 转义与 \\uXXXX
- 续行
- 写出格式与特殊字符
"""

import io

import pytest
from tulip_config.infrastructure.persistence import properties_codec


# ============================================================
# 读取
# ============================================================

class TestLoadsBasics:
    """基础语法"""

    def test_simple_pairs(self):
        assert properties_codec.loads("a=1\nb=2\n") == {"a": "1", "b": "2"}

    def test_comments_and_blank_lines_are_skipped(self):
        text = "# comment\n! also comment\n\n   \n  # indented comment\na=1\n"
        assert properties_codec.loads(text) == {"a": "1"}

    def test_whitespace_around_key_and_value_is_trimmed(self):
        assert properties_codec.loads("   key   =   value   \n") == {"key": "value"}

    def test_colon_separator(self):
        assert properties_codec.loads("key:value\nother : x") == {"key": "value", "other": "x"}

    def test_whitespace_separator(self):
        assert properties_codec.loads("key value with spaces") == {"key": "value with spaces"}

    def test_whitespace_then_separator(self):
        """空白后紧跟的一个分隔符被吞掉"""
        assert properties_codec.loads("key = =x") == {"key": "=x"}

    def test_key_without_value(self):
        assert properties_codec.loads("flag\nempty=") == {"flag": "", "empty": ""}

    def test_value_keeps_separators(self):
        assert properties_codec.loads("url=http://host:8080/a=b") == {"url": "http://host:8080/a=b"}

    def test_later_duplicate_wins(self):
        assert properties_codec.loads("a=1\na=2") == {"a": "2"}

    @pytest.mark.parametrize("text", ["a=1\r\nb=2\r\n", "a=1\rb=2\r", "a=1\nb=2"])
    def test_line_terminators(self, text):
        assert properties_codec.loads(text) == {"a": "1", "b": "2"}

    def test_hash_inside_value_is_literal(self):
        assert properties_codec.loads("color=#ff0000") == {"color": "#ff0000"}


class TestLoadsEscapes:
    """转义序列"""

    def test_escaped_separator_in_key(self):
        assert properties_codec.loads(r"a\=b=c") == {"a=b": "c"}

    def test_escaped_space_in_key(self):
        assert properties_codec.loads(r"my\ key=v") == {"my key": "v"}

    def test_control_escapes(self):
        assert properties_codec.loads(r"k=a\tb\nc\rd\fe") == {"k": "a\tb\nc\rd\fe"}

    def test_unicode_escape(self):
        assert properties_codec.loads(r"k=\u00e9\u4E2D") == {"k": "é中"}

    def test_unknown_escape_drops_backslash(self):
        assert properties_codec.loads(r"k=\q\\") == {"k": "q\\"}

    def test_escaped_trailing_space_is_kept(self):
        assert properties_codec.loads("k=abc\\ \n") == {"k": "abc "}

    def test_malformed_unicode_escape(self):
        with pytest.raises(ValueError):
            properties_codec.loads(r"k=\u12G4")

    def test_truncated_unicode_escape(self):
        with pytest.raises(ValueError):
            properties_codec.loads(r"k=\u12")


class TestLoadsContinuation:
    """续行"""

    def test_continuation_joins_lines(self):
        text = "fruits=apple, \\\n        banana, \\\n        pear\n"
        assert properties_codec.loads(text) == {"fruits": "apple, banana, pear"}

    def test_even_backslashes_do_not_continue(self):
        text = "path=C:\\\\\nnext=1\n"
        assert properties_codec.loads(text) == {"path": "C:\\", "next": "1"}

    def test_comment_line_does_not_continue(self):
        text = "# comment \\\na=1\n"
        assert properties_codec.loads(text) == {"a": "1"}

    def test_continuation_at_end_of_file(self):
        assert properties_codec.loads("a=1\\") == {"a": "1"}

    def test_continuation_line_starting_with_hash_is_not_comment(self):
        text = "a=x\\\n  #y\n"
        assert properties_codec.loads(text) == {"a": "x#y"}


class TestLoadFromStream:
    """从流读取"""

    def test_load_reads_stream(self):
        assert properties_codec.load(io.StringIO("a=1\n")) == {"a": "1"}


# ============================================================
# 写出
# ============================================================

class TestDumps:
    """写出格式"""

    def test_one_line_per_entry_in_order(self):
        assert properties_codec.dumps({"b": "2", "a": "1"}) == "b=2\na=1\n"

    def test_empty_mapping(self):
        assert properties_codec.dumps({}) == ""

    def test_header_is_comment(self):
        text = properties_codec.dumps({"a": "1"}, header="Tulip\nsecond line")

        assert text == "#Tulip\n#second line\na=1\n"
        assert properties_codec.loads(text) == {"a": "1"}

    def test_key_escaping(self):
        assert properties_codec.dumps({"a b=c:d#!": "v"}) == "a\\ b\\=c\\:d\\#\\!=v\n"

    def test_value_spaces(self):
        """值只转义首尾空格"""
        assert properties_codec.dumps({"k": " a b "}) == "k=\\ a b\\ \n"

    def test_value_control_characters(self):
        assert properties_codec.dumps({"k": "a\tb\nc\\"}) == "k=a\\tb\\nc\\\\\n"

    def test_other_control_characters_use_unicode_escape(self):
        assert properties_codec.dumps({"k": "\x01"}) == "k=\\u0001\n"

    def test_non_ascii_written_literally(self):
        assert properties_codec.dumps({"名字": "郁金香"}) == "名字=郁金香\n"

    def test_dump_writes_stream(self):
        buffer = io.StringIO()
        properties_codec.dump({"a": "1"}, buffer)

        assert buffer.getvalue() == "a=1\n"


class TestRoundTrip:
    """写出后读回"""

    def test_awkward_values_survive(self):
        values = {
            "plain": "value",
            "spaces": "  padded value  ",
            "separators": "a=b:c",
            "comment chars": "#not a comment!",
            "multi\nline key": "line1\nline2\r\n",
            "backslash": "C:\\mods\\",
            "": "empty key",
            "empty value": "",
            "unicode": "é中\x07",
        }

        assert properties_codec.loads(properties_codec.dumps(values)) == values
