# -*- encoding: utf-8 -*-
# @File   : tree.py
# @Time   : 2024/11/05 23:14:56
# @Author : typedprops contributors

"""Dotted names -> nested dicts, for template engines and the like.

    >>> build_tree({'a.b': '1', 'a.c': '2'})
    {'a': {'b': '1', 'c': '2'}}

When a name is both a value and a branch (`a=1` next to `a.b=2`), the
value moves into the branch under the empty key:

    >>> build_tree({'a': '1', 'a.b': '2'})
    {'a': {'': '1', 'b': '2'}}

so nothing is lost, though `a` no longer reads as `'1'` by dotted path.
Names ending with a dot claim that very slot too (`a.` next to `a`);
the first name in sorted order keeps it and the other one is dropped
with a warning. Pass `strict=True` to get a `TreeConflictError` instead.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .errors import TreeConflictError

__all__ = ['LEAF_KEY', 'build_tree']

logger = logging.getLogger(__name__)

LEAF_KEY = ''


def _put_leaf(node: dict[str, Any], slot: str, name: str, value: Any,
              strict: bool) -> None:
    """Bind `value` at `slot`, never overwriting another value there."""
    if slot in node:
        if strict:
            raise TreeConflictError(name)
        logger.warning(
            'Tree slot of "%s" already holds a value, "%s" dropped.',
            name, value)
        return
    node[slot] = value


def build_tree(flat: Mapping[str, Any], strict: bool = False) -> dict[str, Any]:
    ret: dict[str, Any] = {}
    for name in sorted(flat):
        tokens = name.split('.')
        node = ret
        for depth, token in enumerate(tokens[:-1]):
            child = node.setdefault(token, {})
            if not isinstance(child, dict):
                path = '.'.join(tokens[:depth + 1])
                if strict:
                    raise TreeConflictError(path)
                logger.debug('"%s" kept under "%s." in tree.', path, path)
                child = node[token] = {LEAF_KEY: child}
            node = child

        leaf = tokens[-1]
        if isinstance(node.get(leaf), dict):
            if strict:
                raise TreeConflictError(name)
            _put_leaf(node[leaf], LEAF_KEY, name, flat[name], strict)
        else:
            _put_leaf(node, leaf, name, flat[name], strict)
    return ret
