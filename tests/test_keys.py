import warnings
from types import ModuleType

import pytest

from typedprops import (
    DEFAULT_REGISTRY,
    ConfigKey,
    KeyRegistry,
    MissingArgumentError,
    register_keys
)
from typedprops.parsers import IntParser, StringParser, StringsParser


def test_key_registers_on_construction(registry):
    key = ConfigKey[int]('svc.port', IntParser, registry)
    assert registry.lookup('svc.port') is key
    assert 'svc.port' in registry
    assert len(registry) == 1
    assert list(registry) == ['svc.port']
    assert registry['svc.port'] is key


def test_default_registry():
    key = ConfigKey('test_keys.default.name')
    assert DEFAULT_REGISTRY.lookup('test_keys.default.name') is key
    assert ConfigKey.value_of('test_keys.default.name') is key


def test_unknown_name(registry):
    assert registry.lookup('nope') is None
    assert ConfigKey.value_of('nope', registry) is None
    with pytest.raises(KeyError):
        registry['nope']


def test_key_attributes(registry):
    key = ConfigKey('svc.peers', StringsParser, registry)
    assert key.name == 'svc.peers'
    assert key.parser is StringsParser
    assert str(key) == 'svc.peers'
    assert repr(key) == "ConfigKey('svc.peers', StringsParser)"
    assert ConfigKey('svc.host', registry=registry).parser is StringParser


def test_key_is_immutable(registry):
    key = ConfigKey('svc.host', registry=registry)
    with pytest.raises(AttributeError):
        key.name = 'other'


def test_identity_is_the_name(registry):
    other = KeyRegistry()
    a = ConfigKey('same', registry=registry)
    b = ConfigKey('same', registry=other)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != ConfigKey('different', registry=registry)


def test_last_registration_wins(registry):
    first = ConfigKey('dup', registry=registry)
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        second = ConfigKey('dup', registry=registry)
    assert registry.lookup('dup') is second
    assert registry.lookup('dup') is not first


def test_overriding_parser_warns(registry):
    ConfigKey('dup', StringParser, registry)
    with pytest.warns(UserWarning, match='dup'):
        key = ConfigKey('dup', IntParser, registry)
    assert registry.lookup('dup') is key


def test_empty_name_rejected(registry):
    with pytest.raises(MissingArgumentError):
        ConfigKey('', registry=registry)
    with pytest.raises(MissingArgumentError):
        ConfigKey(None, registry=registry)


def test_scan_class_namespace(registry):
    elsewhere = KeyRegistry()

    class BaseKeys:
        HOST = ConfigKey('app.host', registry=elsewhere)

    class AppKeys(BaseKeys):
        PORT = ConfigKey('app.port', IntParser, elsewhere)
        NOT_A_KEY = 'app.other'

    found = registry.scan(AppKeys)
    assert set(found) == {AppKeys.HOST, AppKeys.PORT}
    assert registry.lookup('app.port') is AppKeys.PORT
    assert registry.lookup('app.host') is BaseKeys.HOST
    assert 'app.other' not in registry


def test_register_keys_from_module(registry):
    mod = ModuleType('fake_keys')
    mod.TIMEOUT = ConfigKey('job.timeout', IntParser, KeyRegistry())
    assert register_keys(mod, registry=registry) == [mod.TIMEOUT]
    assert registry.lookup('job.timeout') is mod.TIMEOUT
