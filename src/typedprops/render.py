# -*- encoding: utf-8 -*-
# @File   : render.py
# @Time   : 2024/11/06 19:48:30
# @Author : typedprops contributors

import os
from collections.abc import Mapping
from re import Match
from re import compile as regex
from typing import TYPE_CHECKING

from .abstract import ConfigValueRenderer

if TYPE_CHECKING:
    from .config import Config
    from .keys import ConfigKey

PLACEHOLDER = regex(r'\$\{([^}:]+)(?::([^}]*))?\}')
MAX_DEPTH = 8


class PlaceholderRenderer(ConfigValueRenderer):
    """Substitutes `${name}` and `${name:default}` in property values.

    A name is looked up in `config` first (raw values, including the
    inherited global ones), then in `environ` (`os.environ` by default).
    Unknown names without a default are left as they are.

    Values pulled in may hold placeholders themselves; those get
    resolved too, up to `MAX_DEPTH` rounds, which also stops cycles.
    """
    def __init__(
        self,
        config: 'Config | None' = None,
        environ: Mapping[str, str] | None = None
    ) -> None:
        self._config = config
        self._environ = os.environ if environ is None else environ

    def lookup(self, name: str) -> str | None:
        if self._config is not None:
            if (ret := self._config.raw(name)) is not None:
                return ret
        return self._environ.get(name)

    def __replace(self, m: Match[str]) -> str:
        ret = self.lookup(m.group(1).strip())
        if ret is None:
            ret = m.group(2)
        return m.group(0) if ret is None else ret

    def render(self, key: 'ConfigKey', value: str) -> str:
        for _ in range(MAX_DEPTH):
            rendered = PLACEHOLDER.sub(self.__replace, value)
            if rendered == value:
                break
            value = rendered
        return value
