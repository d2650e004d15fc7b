# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:40:13
# @Author : typedprops contributors

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .keys import ConfigKey


T = TypeVar('T')


class ConfigValueParser(Generic[T], metaclass=ABCMeta):
    """Turns a rendered property string into the value a key promises.

    Parsers keep no state between calls, so `Config` holds exactly one
    instance per parser type.
    """
    @abstractmethod
    def parse(self, value: str | None) -> T:
        raise NotImplementedError


class ConfigValueRenderer(metaclass=ABCMeta):
    """Rewrites a raw property string before it gets parsed."""
    @abstractmethod
    def render(self, key: 'ConfigKey', value: str) -> str:
        raise NotImplementedError


class ResourceLoader(metaclass=ABCMeta):
    """Reads one resource file into a flat `name -> value` dict."""
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @abstractmethod
    def read(self) -> dict[str, str]:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
