import pytest

from ssli.runtime import Runtime


@pytest.fixture
def runtime():
    """A fresh runtime with the full native library registered."""
    return Runtime()


@pytest.fixture
def write_script(tmp_path):
    """Write a source file under tmp_path and return its path."""
    def _write(name: str, source: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path
    return _write
