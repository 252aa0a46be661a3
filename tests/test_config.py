import pytest

from lyrical import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LRCLIB_API_URL", "LRCLIB_USER_AGENT", "LRCLIB_TIMEOUT", "LYRICAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = config.get_lrclib_config()
    assert cfg["api_url"] == "https://lrclib.net/api"
    assert cfg["user_agent"] == config.DEFAULT_USER_AGENT
    assert cfg["timeout"] == 30.0
    assert config.get_log_level() == "WARNING"


def test_overrides(monkeypatch):
    monkeypatch.setenv("LRCLIB_API_URL", "http://localhost:3000/api/")
    monkeypatch.setenv("LRCLIB_USER_AGENT", "tests/1.0")
    monkeypatch.setenv("LRCLIB_TIMEOUT", "2.5")
    monkeypatch.setenv("LYRICAL_LOG_LEVEL", "debug")

    cfg = config.get_lrclib_config()
    assert cfg == {
        "api_url": "http://localhost:3000/api",
        "user_agent": "tests/1.0",
        "timeout": 2.5,
    }
    assert config.get_log_level() == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "0", "-3", "nan"])
def test_bad_timeout(monkeypatch, value):
    monkeypatch.setenv("LRCLIB_TIMEOUT", value)
    with pytest.raises(ValueError, match="LRCLIB_TIMEOUT"):
        config.get_lrclib_config()
