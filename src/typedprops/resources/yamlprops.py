# -*- encoding: utf-8 -*-
# @File   : yamlprops.py
# @Time   : 2024/11/04 20:37:02
# @Author : typedprops contributors

"""YAML documents as flat properties.

Nested mappings become dotted names and sequences become comma
separated values, so

    ```yaml
    db:
      hosts: [10.0.0.1, 10.0.0.2]
      pool: 8
    ```

reads as `db.hosts=10.0.0.1,10.0.0.2` and `db.pool=8`.
"""

from typing import Any

import yaml

from ..abstract import ResourceLoader
from ..errors import ConfigIOError


def _scalar(name: str, value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (dict, list, tuple)):
        raise ValueError(
            f'"{name}" lists a {type(value).__name__}, only scalars allowed')
    return str(value)


def _stringify(name: str, value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ','.join(_scalar(name, i) for i in value)
    return _scalar(name, value)


def flatten(node: dict, prefix: str = '',
            ins: dict[str, str] | None = None) -> dict[str, str]:
    if ins is None:
        ins = {}
    for k, v in node.items():
        name = f'{prefix}.{k}' if prefix else str(k)
        if isinstance(v, dict):
            flatten(v, name, ins)
        else:
            ins[name] = _stringify(name, v)
    return ins


class YamlPropertiesLoader(ResourceLoader):
    def read(self) -> dict[str, str]:
        with open(self._fn, 'r', encoding=self._codec or 'utf-8') as fp:
            data = yaml.safe_load(fp)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigIOError(
                self._fn,
                f'top level must be a mapping, got {type(data).__name__}')
        try:
            return flatten(data)
        except ValueError as e:
            raise ConfigIOError(self._fn, str(e)) from e
