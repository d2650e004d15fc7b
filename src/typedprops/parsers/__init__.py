# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 00:10:36
# @Author : typedprops contributors

from .array import (
    ArrayParser,
    BoolsParser,
    DoublesParser,
    FloatsParser,
    IntsParser,
    LongsParser,
    ShortsParser,
    StringsParser
)
from .scalar import (
    BoolParser,
    DoubleParser,
    FloatParser,
    IntParser,
    LongParser,
    ShortParser,
    StringParser
)

__all__ = [
    'StringParser', 'ShortParser', 'IntParser', 'LongParser',
    'FloatParser', 'DoubleParser', 'BoolParser',
    'ArrayParser', 'StringsParser', 'ShortsParser', 'IntsParser',
    'LongsParser', 'FloatsParser', 'DoublesParser', 'BoolsParser'
]
