# -*- encoding: utf-8 -*-
# @File   : keys.py
# @Time   : 2024/11/02 22:18:45
# @Author : typedprops contributors

"""Typed property access keys.

Keys are usually declared as class attributes of a "key namespace"::

    class AppKeys:
        HOST = ConfigKey('app.host')
        PORT = ConfigKey[int]('app.port', IntParser)
        PEERS = ConfigKey[list[str]]('app.peers', StringsParser)

A key registers itself into a `KeyRegistry` when constructed, which is
what lets `Config.key_set()` turn raw property names back into keys.
Namespaces living in modules nobody imported yet are of course unknown,
so applications should bootstrap with `register_keys(AppKeys, ...)`.
"""

import logging
from collections.abc import Iterator, Mapping
from threading import Lock
from types import ModuleType
from typing import Generic, TypeVar
from warnings import warn

from .abstract import ConfigValueParser
from .errors import MissingArgumentError
from .parsers import StringParser

__all__ = ['ConfigKey', 'KeyRegistry', 'DEFAULT_REGISTRY', 'register_keys']

logger = logging.getLogger(__name__)

T = TypeVar('T')


class KeyRegistry(Mapping[str, 'ConfigKey']):
    """`name -> ConfigKey` table. Entries are never removed.

    Only registration is locked; lookups are plain dict reads, as keys
    are expected to be declared before anyone starts reading config.
    """
    def __init__(self) -> None:
        self.__keys: dict[str, ConfigKey] = {}
        self.__lock = Lock()

    def register(self, key: 'ConfigKey') -> 'ConfigKey':
        """Add `key`, replacing any key of the same name (last one wins)."""
        with self.__lock:
            old = self.__keys.get(key.name)
            if old is not None and old.parser is not key.parser:
                warn(
                    f'Config key "{key.name}" was declared with '
                    f'{old.parser.__name__}, now overridden by '
                    f'{key.parser.__name__}.')
            self.__keys[key.name] = key
        return key

    def lookup(self, name: str) -> 'ConfigKey | None':
        return self.__keys.get(name)

    def scan(self, *namespaces: type | ModuleType) -> list['ConfigKey']:
        """Register every `ConfigKey` found on classes or modules.

        Inherited class attributes count as well.
        """
        found = []
        for ns in namespaces:
            for attr in dir(ns):
                if isinstance(i := getattr(ns, attr, None), ConfigKey):
                    found.append(self.register(i))
        logger.debug('Registered %d config keys from %d namespaces.',
                     len(found), len(namespaces))
        return found

    def __getitem__(self, name: str) -> 'ConfigKey':
        return self.__keys[name]

    def __contains__(self, name: object) -> bool:
        return name in self.__keys

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keys)

    def __len__(self) -> int:
        return len(self.__keys)

    def __repr__(self) -> str:
        return 'KeyRegistry { .cnt = %d }' % len(self.__keys)


DEFAULT_REGISTRY = KeyRegistry()


class ConfigKey(Generic[T]):
    """Property name bound to the parser producing its typed value.

    Two keys are equal when their names are.
    """
    __slots__ = ('__name', '__parser')

    def __init__(
        self,
        name: str,
        parser: type[ConfigValueParser[T]] = StringParser,
        registry: KeyRegistry | None = None
    ) -> None:
        if not name:
            raise MissingArgumentError('name')
        self.__name = name
        self.__parser = parser
        (DEFAULT_REGISTRY if registry is None else registry).register(self)

    @property
    def name(self) -> str:
        return self.__name

    @property
    def parser(self) -> type[ConfigValueParser[T]]:
        return self.__parser

    @staticmethod
    def value_of(
        name: str, registry: KeyRegistry | None = None
    ) -> 'ConfigKey | None':
        """The registered key called `name`, or `None`."""
        return (DEFAULT_REGISTRY if registry is None else registry).lookup(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigKey):
            return NotImplemented
        return self.__name == other.__name

    def __hash__(self) -> int:
        return hash(self.__name)

    def __str__(self) -> str:
        return self.__name

    def __repr__(self) -> str:
        return f'ConfigKey({self.__name!r}, {self.__parser.__name__})'


def register_keys(
    *namespaces: type | ModuleType, registry: KeyRegistry | None = None
) -> list[ConfigKey]:
    """Explicitly register the keys declared on each namespace.

    Call this once at application start-up so that every key is known
    before `Config.key_set()`, `map()` or `tree()` get used.
    """
    return (DEFAULT_REGISTRY if registry is None else registry).scan(
        *namespaces)
