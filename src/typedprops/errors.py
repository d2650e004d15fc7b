# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:52:40
# @Author : typedprops contributors


class ConfigError(Exception):
    """Base of everything `typedprops` raises on purpose."""
    pass


class ConfigIOError(ConfigError):
    """A resource exists but could not be read or parsed.

    The underlying exception is kept as `__cause__`.
    """
    def __init__(self, path: str, reason: str = '') -> None:
        self.path = path
        msg = f'Failed to load config resource "{path}"'
        super().__init__(f'{msg}: {reason}' if reason else msg)


class MissingArgumentError(ConfigError, ValueError):
    """A required argument was `None`."""
    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f'"{argument}" is required.')


class TreeConflictError(ConfigError):
    """A dotted name is both a value and a parent of other names."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f'"{path}" is bound to a value and is also a branch of longer keys.')
