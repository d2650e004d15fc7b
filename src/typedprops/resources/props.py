# -*- encoding: utf-8 -*-
# @File   : props.py
# @Time   : 2024/11/03 14:05:19
# @Author : typedprops contributors

"""`.properties` reader.

Supported syntax, close to what Java's `Properties.load()` accepts:

    # comment
    ! comment too
    key = value
    key: value
    key value
    multi = first,\\
            second
    escaped\\ key = tab\\there \\u00e9

Keys and values are unescaped; duplicate keys keep the last value.
"""

import logging
from collections.abc import Iterable, Iterator
from io import StringIO, TextIOBase

import chardet

from ..abstract import ResourceLoader

logger = logging.getLogger(__name__)

_BLANKS = ' \t\f'
_SEPARATORS = '=:'
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}


def _continues(line: str) -> bool:
    """Odd count of trailing backslashes means the line goes on."""
    return (len(line) - len(line.rstrip('\\'))) % 2 == 1


def _logical_lines(buf: Iterable[str]) -> Iterator[str]:
    pending: str | None = None
    for i in buf:
        line = i.rstrip('\r\n')
        if pending is None:
            line = line.lstrip(_BLANKS)
            if not line or line[0] in '#!':
                continue
        else:
            # continuation lines never count as comments.
            line = pending + line.lstrip(_BLANKS)
        if _continues(line):
            pending = line[:-1]
            continue
        pending = None
        yield line
    if pending is not None:
        yield pending


def unescape(text: str) -> str:
    ret, i = [], 0
    while i < len(text):
        c = text[i]
        i += 1
        if c != '\\':
            ret.append(c)
            continue
        if i >= len(text):  # dangling backslash
            break
        c = text[i]
        i += 1
        if c == 'u':
            code = text[i:i + 4]
            if len(code) < 4:
                raise ValueError(f'Malformed \\uXXXX escape: "\\u{code}"')
            ret.append(chr(int(code, 16)))
            i += 4
        else:
            ret.append(_ESCAPES.get(c, c))
    return ''.join(ret)


def split_pair(line: str) -> tuple[str, str]:
    """Cut one logical line into its (raw) key and value parts."""
    i = 0
    while i < len(line):
        c = line[i]
        if c == '\\':
            i += 2
            continue
        if c in _SEPARATORS or c in _BLANKS:
            break
        i += 1
    rest = line[i:].lstrip(_BLANKS)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_BLANKS)
    return line[:i], rest


class PropertiesLoader(ResourceLoader):
    @staticmethod
    def readstream(
        buf: TextIOBase, ins: dict[str, str] | None = None
    ) -> dict[str, str]:
        """Read from an already decoded text stream.

        Use `self.read()` instead unless you have a stream at hand.
        """
        if ins is None:
            ins = {}
        for line in _logical_lines(buf):
            key, val = split_pair(line)
            ins[unescape(key)] = unescape(val)
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if not codec.get('encoding') or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            # what java.util.Properties assumes anyway, never fails.
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> dict[str, str]:
        try:
            with open(self._fn, 'r', encoding=self._codec or 'utf-8') as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logger.warning(
                '"%s" is not %s encoded, guessing with chardet.',
                self._fn, self._codec or 'utf-8')
            return self.readstream(self._decode_file(self._fn))
