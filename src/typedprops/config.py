# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/04 01:26:11
# @Author : typedprops contributors

"""Property store with typed access.

    ```python
    Config.global_config().load('conf/app.properties', 'dev')
    port = Config.global_config().get(AppKeys.PORT)   # int

    job = Config.create()   # falls back to the global one
    job.load('conf/job.xml', mode=LoadMode.REPLACE_EXISTS)
    ```

Every read goes raw string -> renderer(s) -> key's parser. Absent
properties are rendered and parsed as `""`, so they come back as the
parser's zero value (`""`, `0`, `False`, `[]`), never `None`.
"""

import logging
from enum import Enum
from os import PathLike, fspath
from threading import RLock
from typing import Any, TypeVar

from .abstract import ConfigValueParser, ConfigValueRenderer
from .errors import MissingArgumentError
from .keys import DEFAULT_REGISTRY, ConfigKey, KeyRegistry
from .resources import load_resource, overlay_path
from .tree import build_tree

__all__ = ['Config', 'LoadMode']

logger = logging.getLogger(__name__)

T = TypeVar('T')


class LoadMode(Enum):
    """How freshly loaded properties meet those already held."""
    SKIP_EXISTS = 'skip_exists'        # keep current values, add new names
    REPLACE_EXISTS = 'replace_exists'  # loaded values win, keep the rest
    REPLACE_ALL = 'replace_all'        # forget everything held before


class Config:
    """A set of loaded properties, read through `ConfigKey`s.

    There is one process wide instance (`Config.global_config()`); any
    number of others come from `Config.create()`. Those created with
    `inherit=True` read the global properties for names they don't hold
    themselves, and have the global renderer applied before their own.

    All public methods take the instance lock. The global properties
    are read without taking the global instance's lock.
    """
    def __init__(
        self, inherit: bool = False, registry: KeyRegistry | None = None
    ) -> None:
        self.__lock = RLock()
        self.__inherit = inherit
        self.__registry = DEFAULT_REGISTRY if registry is None else registry
        self.__props: dict[str, str] = {}
        self.__renderer: ConfigValueRenderer | None = None
        self.__parsers: dict[type[ConfigValueParser], ConfigValueParser] = {}

    @staticmethod
    def global_config() -> 'Config':
        return _GLOBAL

    @staticmethod
    def create(
        inherit: bool = True, registry: KeyRegistry | None = None
    ) -> 'Config':
        return Config(inherit, registry)

    @property
    def inherit(self) -> bool:
        return self.__inherit

    @property
    def renderer(self) -> ConfigValueRenderer | None:
        return self.__renderer

    # ------------------------------------------------------------------
    # mutation
    def load(
        self,
        path: str | PathLike[str],
        env_name: str | None = None,
        mode: LoadMode | None = LoadMode.REPLACE_ALL,
        *,
        encoding: str | None = None
    ) -> 'Config':
        """Read a property resource into this instance.

        Args:
            env_name: also read `<name>_<env_name>.<ext>` beside `path`,
                whose values override the base file's ones.
            mode: how to merge with what's already held. `None` is
                `REPLACE_ALL`.
            encoding: for text formats; default utf-8, then guessed.

        Raises:
            ConfigIOError: an existing resource could not be read.
                Missing resources simply read as empty.
        """
        with self.__lock:
            loaded = load_resource(path, encoding)
            if env_name:
                env_path = overlay_path(path, env_name)
                logger.debug('Overlaying "%s" onto "%s".',
                             env_path, fspath(path))
                loaded.update(load_resource(env_path, encoding))
            self.__merge(loaded, mode)
        return self

    def __merge(self, loaded: dict[str, str], mode: LoadMode | None) -> None:
        match mode:
            case LoadMode.REPLACE_EXISTS:
                self.__props.update(loaded)
            case LoadMode.SKIP_EXISTS:
                for k, v in loaded.items():
                    self.__props.setdefault(k, v)
            case _:
                self.__props.clear()
                self.__props.update(loaded)
        logger.debug('Merged %d properties (%s), now %d held.',
                     len(loaded), mode, len(self.__props))

    def put(self, key: ConfigKey | str, value: Any) -> None:
        """Set a single property, overwriting any current value."""
        if key is None:
            raise MissingArgumentError('key')
        name = key if isinstance(key, str) else key.name
        with self.__lock:
            self.__props[name] = '' if value is None else str(value)

    def destroy(self) -> None:
        """Drop every property held by *this* instance.

        Renderer and parser cache stay, and so does the global config.
        """
        with self.__lock:
            self.__props.clear()

    def set_renderer(self, renderer: ConfigValueRenderer | None) -> None:
        with self.__lock:
            self.__renderer = renderer

    # ------------------------------------------------------------------
    # reading
    def raw(self, name: str) -> str | None:
        """Unrendered value visible to this instance, or `None`."""
        with self.__lock:
            if name in self.__props:
                return self.__props[name]
        if self.__inherit:
            return _GLOBAL.__props.get(name)
        return None

    def bind(self, key: ConfigKey, value: object) -> str:
        """Render a raw value the way `get()` does before parsing."""
        ret = '' if value is None else str(value)
        if self.__inherit and _GLOBAL.__renderer is not None:
            ret = _GLOBAL.__renderer.render(key, ret)
        with self.__lock:
            renderer = self.__renderer
        if renderer is not None:
            ret = renderer.render(key, ret)
        return ret

    def parser_of(
        self, parser: type[ConfigValueParser[T]]
    ) -> ConfigValueParser[T]:
        """The cached instance of `parser`, created on first use."""
        with self.__lock:
            if parser not in self.__parsers:
                self.__parsers[parser] = parser()
            return self.__parsers[parser]

    def get(
        self,
        key: ConfigKey[T] | None,
        parser: ConfigValueParser[T] | None = None
    ) -> T | None:
        """Typed value of `key`; zero value if not defined anywhere.

        `parser` overrides the key's own parser for this call.
        """
        if key is None:
            return None
        rendered = self.bind(key, self.raw(key.name))
        if parser is None:
            parser = self.parser_of(key.parser)
        return parser.parse(rendered)

    def is_empty(self, key: ConfigKey | None) -> bool:
        """Whether `key` has no non-empty raw value visible here."""
        return key is None or not self.raw(key.name)

    def key_set(self) -> set[ConfigKey]:
        """Registered keys for the names held here (and globally, if
        inheriting). Names nobody declared a key for are left out."""
        with self.__lock:
            names = set(self.__props)
        if self.__inherit:
            names.update(list(_GLOBAL.__props))
        return {k for i in names
                if (k := self.__registry.lookup(i)) is not None}

    def map(self) -> dict[str, str]:
        """`name -> rendered value` of every key in `key_set()`."""
        return {k.name: self.bind(k, self.raw(k.name))
                for k in self.key_set()}

    def tree(self, strict: bool = False) -> dict[str, Any]:
        """`map()` nested on dots, see `typedprops.tree.build_tree`."""
        return build_tree(self.map(), strict)

    def __contains__(self, key: object) -> bool:
        name = key.name if isinstance(key, ConfigKey) else key
        with self.__lock:
            return name in self.__props

    def __len__(self) -> int:
        with self.__lock:
            return len(self.__props)

    def __repr__(self) -> str:
        return 'Config { .cnt = %d, .inherit = %s }' % (
            len(self), self.__inherit)


_GLOBAL = Config(inherit=False)
