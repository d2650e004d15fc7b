# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 14:01:33
# @Author : typedprops contributors

"""Resource files -> flat `dict[str, str]`.

The loader is picked by file suffix; anything unknown is read as
`.properties`. Paths are plain filesystem paths.
"""

import logging
from os import PathLike, fspath
from os.path import exists, splitext

from ..abstract import ResourceLoader
from ..errors import ConfigError, ConfigIOError
from .props import PropertiesLoader
from .xmlprops import XmlPropertiesLoader
from .yamlprops import YamlPropertiesLoader

__all__ = [
    'PropertiesLoader', 'XmlPropertiesLoader', 'YamlPropertiesLoader',
    'register_loader', 'loader_for', 'load_resource', 'overlay_path'
]

logger = logging.getLogger(__name__)

_LOADERS: dict[str, type[ResourceLoader]] = {
    '.xml': XmlPropertiesLoader,
    '.yaml': YamlPropertiesLoader,
    '.yml': YamlPropertiesLoader,
}


def register_loader(suffix: str, loader: type[ResourceLoader]) -> None:
    """Use `loader` for files ending with `suffix` (e.g. `'.json'`)."""
    _LOADERS[suffix.lower()] = loader


def loader_for(
    path: str | PathLike[str], encoding: str | None = None
) -> ResourceLoader:
    suffix = splitext(fspath(path))[1].lower()
    return _LOADERS.get(suffix, PropertiesLoader)(path, encoding)


def overlay_path(path: str | PathLike[str], env_name: str) -> str:
    """`conf/app.properties` + `dev` -> `conf/app_dev.properties`.

    Without a suffix the env name is just appended: `conf/app_dev`.
    """
    base, ext = splitext(fspath(path))
    return f'{base}_{env_name}{ext}'


def load_resource(
    path: str | PathLike[str], encoding: str | None = None
) -> dict[str, str]:
    """Read a resource; a missing one reads as empty.

    Raises:
        ConfigIOError: the file exists but reading or parsing failed.
    """
    path = fspath(path)
    if not exists(path):
        logger.debug('Config resource "%s" not found, skipped.', path)
        return {}
    loader = loader_for(path, encoding)
    try:
        ret = loader.read()
    except ConfigError:
        raise
    except Exception as e:
        raise ConfigIOError(path, str(e)) from e
    logger.debug('Loaded %d properties from "%s".', len(ret), path)
    return ret
