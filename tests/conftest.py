import pytest

from stringext.utils.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path):
    """Isolate every test from config files and STRINGEXT_* variables"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STRINGEXT_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()
