# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/11/03 00:12:51
# @Author : typedprops contributors

"""Lenient string -> primitive conversions.

Nothing here raises on bad input: an unparsable token becomes
the zero value of its type.
"""

TRUE_TOKENS = frozenset(('true', 'yes', 'on', '1', 'y', 't'))
VALUE_DELIMITER = ','
COMMENT_MARK = '#'


def to_int(value: str | None, bits: int = 64) -> int:
    """Signed integer of `bits` width, or 0 if unparsable / out of range."""
    if not value:
        return 0
    try:
        ret = int(value.strip(), 10)
    except ValueError:
        return 0
    limit = 1 << (bits - 1)
    return ret if -limit <= ret < limit else 0


def to_float(value: str | None) -> float:
    if not value:
        return 0.0
    try:
        return float(value.strip())
    except ValueError:
        return 0.0


def to_bool(value: str | None) -> bool:
    return bool(value) and value.strip().lower() in TRUE_TOKENS


def split_tokens(value: str | None, skip_comments: bool = True) -> list[str]:
    """Split a multi-value string on commas.

    Tokens are not stripped. With `skip_comments`, those starting
    with `#` are dropped, e.g. `"1,#2,3"` -> `["1", "3"]`.
    """
    if not value:
        return []
    tokens = value.split(VALUE_DELIMITER)
    if skip_comments:
        tokens = [i for i in tokens if not i.startswith(COMMENT_MARK)]
    return tokens
