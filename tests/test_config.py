import pytest
from pydantic import ValidationError

from cipherstack.config import Settings, load_settings


@pytest.fixture
def fresh_settings():
    load_settings.cache_clear()
    yield load_settings
    load_settings.cache_clear()


def test_defaults():
    s = Settings()
    assert s.trace_separator == "\n\n"
    assert s.sdes_invert_on_decrypt is False
    assert s.global_seed == 1337


def test_env_overrides(monkeypatch, fresh_settings):
    monkeypatch.setenv("SDES_INVERT_ON_DECRYPT", "yes")
    monkeypatch.setenv("GLOBAL_SEED", "42")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = fresh_settings()
    assert s.sdes_invert_on_decrypt is True
    assert s.global_seed == 42
    assert s.log_level == "DEBUG"


def test_roundtrip_vectors_bounds():
    with pytest.raises(ValidationError):
        Settings(roundtrip_vectors=0)
