# -*- encoding: utf-8 -*-
# @File   : scalar.py
# @Time   : 2024/11/03 00:31:07
# @Author : typedprops contributors

from ..abstract import ConfigValueParser
from .convert import to_bool, to_float, to_int


class StringParser(ConfigValueParser[str]):
    def parse(self, value: str | None) -> str:
        return '' if value is None else value


class LongParser(ConfigValueParser[int]):
    """Signed 64-bit integer. Bad or overflowing text yields 0."""
    bits = 64

    def parse(self, value: str | None) -> int:
        return to_int(value, self.bits)


class IntParser(LongParser):
    bits = 32


class ShortParser(LongParser):
    bits = 16


class FloatParser(ConfigValueParser[float]):
    def parse(self, value: str | None) -> float:
        return to_float(value)


class BoolParser(ConfigValueParser[bool]):
    """`true`, `yes`, `on`, `1`, `y`, `t` (any case) are True."""
    def parse(self, value: str | None) -> bool:
        return to_bool(value)


class DoubleParser(FloatParser):
    """Same as `FloatParser`, a Python float is already double precision."""
