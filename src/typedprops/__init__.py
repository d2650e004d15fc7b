# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:33:05
# @Author : typedprops contributors

from .abstract import ConfigValueParser, ConfigValueRenderer, ResourceLoader
from .config import Config, LoadMode
from .errors import (
    ConfigError,
    ConfigIOError,
    MissingArgumentError,
    TreeConflictError
)
from .keys import DEFAULT_REGISTRY, ConfigKey, KeyRegistry, register_keys
from .render import PlaceholderRenderer
from .tree import build_tree

__all__ = [
    'Config', 'LoadMode',
    'ConfigKey', 'KeyRegistry', 'DEFAULT_REGISTRY', 'register_keys',
    'ConfigValueParser', 'ConfigValueRenderer', 'ResourceLoader',
    'PlaceholderRenderer', 'build_tree',
    'ConfigError', 'ConfigIOError', 'MissingArgumentError',
    'TreeConflictError'
]
