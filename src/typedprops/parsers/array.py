# -*- encoding: utf-8 -*-
# @File   : array.py
# @Time   : 2024/11/03 00:47:22
# @Author : typedprops contributors

"""Comma separated multi-value parsers.

Each token is converted by the scalar parser named in `element`.
Tokens beginning with `#` are treated as commented out and skipped,
unless the parser was built with `skip_comments=False`.
"""

from typing import ClassVar, TypeVar

from ..abstract import ConfigValueParser
from .convert import split_tokens
from .scalar import (
    BoolParser,
    DoubleParser,
    FloatParser,
    IntParser,
    LongParser,
    ShortParser,
    StringParser
)


T = TypeVar('T')


class ArrayParser(ConfigValueParser[list[T]]):
    element: ClassVar[type[ConfigValueParser]] = StringParser

    def __init__(self, skip_comments: bool = True) -> None:
        self.skip_comments = skip_comments
        self._elem = self.element()

    def parse(self, value: str | None) -> list[T]:
        return [self._elem.parse(i)
                for i in split_tokens(value, self.skip_comments)]


class StringsParser(ArrayParser[str]):
    element = StringParser


class LongsParser(ArrayParser[int]):
    element = LongParser


class IntsParser(ArrayParser[int]):
    element = IntParser


class ShortsParser(ArrayParser[int]):
    element = ShortParser


class FloatsParser(ArrayParser[float]):
    element = FloatParser


class BoolsParser(ArrayParser[bool]):
    element = BoolParser


class DoublesParser(FloatsParser):
    element = DoubleParser
