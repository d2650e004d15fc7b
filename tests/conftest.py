from pathlib import Path

import pytest

from typedprops import Config, KeyRegistry


@pytest.fixture(autouse=True)
def clean_global():
    """Every test starts (and leaves) with an empty global config."""
    g = Config.global_config()
    g.destroy()
    g.set_renderer(None)
    yield g
    g.destroy()
    g.set_renderer(None)


@pytest.fixture
def registry():
    return KeyRegistry()


@pytest.fixture
def write(tmp_path: Path):
    """write(name, text_or_bytes) -> path of the created file."""
    def _write(name: str, content: str | bytes, encoding='utf-8') -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return str(path)
    return _write
