import pytest

from typedprops.parsers import (
    BoolParser,
    BoolsParser,
    DoubleParser,
    DoublesParser,
    FloatParser,
    FloatsParser,
    IntParser,
    IntsParser,
    LongParser,
    LongsParser,
    ShortParser,
    ShortsParser,
    StringParser,
    StringsParser
)
from typedprops.parsers.convert import split_tokens


class TestScalarParsers:
    def test_string(self):
        assert StringParser().parse('abc') == 'abc'
        assert StringParser().parse(' a b ') == ' a b '
        assert StringParser().parse(None) == ''

    @pytest.mark.parametrize('text, expected', [
        ('42', 42), (' 7 ', 7), ('-3', -3), ('+5', 5),
        ('abc', 0), ('1.5', 0), ('', 0), (None, 0),
    ])
    def test_int(self, text, expected):
        assert IntParser().parse(text) == expected

    def test_integer_widths(self):
        assert IntParser().parse('2147483647') == 2147483647
        assert IntParser().parse('2147483648') == 0
        assert LongParser().parse('2147483648') == 2147483648
        assert LongParser().parse('9223372036854775808') == 0
        assert ShortParser().parse('-32768') == -32768
        assert ShortParser().parse('40000') == 0

    def test_float(self):
        assert FloatParser().parse('1.5') == 1.5
        assert FloatParser().parse(' 2 ') == 2.0
        assert FloatParser().parse('x') == 0.0
        assert FloatParser().parse(None) == 0.0

    @pytest.mark.parametrize('text', ['true', 'TRUE', 'yes', 'On', '1', 'y'])
    def test_bool_true(self, text):
        assert BoolParser().parse(text) is True

    @pytest.mark.parametrize('text', ['false', 'no', 'off', '0', '', None])
    def test_bool_false(self, text):
        assert BoolParser().parse(text) is False


class TestArrayParsers:
    def test_comment_tokens_skipped(self):
        assert StringsParser().parse('1,#2,3') == ['1', '3']

    def test_comment_tokens_kept(self):
        assert StringsParser(skip_comments=False).parse('1,#2,3') == [
            '1', '#2', '3']

    def test_empty(self):
        assert StringsParser().parse('') == []
        assert StringsParser().parse(None) == []
        assert IntsParser().parse(None) == []

    def test_tokens_not_stripped(self):
        assert StringsParser().parse('a, b,,c') == ['a', ' b', '', 'c']

    def test_numbers(self):
        assert IntsParser().parse('1, 2,x') == [1, 2, 0]
        assert LongsParser().parse('4294967296,#1') == [4294967296]
        assert ShortsParser().parse('1,70000') == [1, 0]
        assert FloatsParser().parse('0.5,#x,2') == [0.5, 2.0]

    def test_double_aliases(self):
        assert isinstance(DoubleParser(), FloatParser)
        assert DoubleParser().parse('1e308') == 1e308
        assert DoubleParser().parse('nope') == 0.0
        assert DoublesParser().parse('0.25,#1,x') == [0.25, 0.0]

    def test_bools(self):
        assert BoolsParser().parse('true,false,#true,yes') == [
            True, False, True]


def test_split_tokens():
    assert split_tokens('a,#b') == ['a']
    assert split_tokens('a,#b', skip_comments=False) == ['a', '#b']
    assert split_tokens(' #b') == [' #b']
