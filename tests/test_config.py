import pytest

from telecom_cart import config
from telecom_cart.utils.formatters import money

ENV_KEYS = ("HOST", "PORT", "CART_PORT", "LOG_LEVEL", "CORS_ORIGINS", "CURRENCY", "DECIMALS")


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = config.load_settings()

    assert s.host == "0.0.0.0"
    assert s.port == 3000
    assert s.log_level == "INFO"
    assert s.cors_origins == ("*",)
    assert s.currency == "USD"
    assert s.decimals == 2


def test_env_overrides(clean_env):
    clean_env.setenv("CART_PORT", "8081")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test ,")
    clean_env.setenv("DECIMALS", "0")

    s = config.load_settings()

    assert s.port == 8081
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ("http://a.test", "http://b.test")
    assert s.decimals == 0


def test_blank_values_fall_back(clean_env):
    clean_env.setenv("PORT", "   ")
    clean_env.setenv("CURRENCY", "")

    s = config.load_settings()

    assert s.port == 3000
    assert s.currency == "USD"


def test_bad_int_raises(clean_env):
    clean_env.setenv("PORT", "three-thousand")
    with pytest.raises(ValueError):
        config.load_settings()


def test_money_uses_settings():
    assert money(30, "USD").endswith(" USD")
    assert money(12.5, "EUR") == f"{12.5:.{config.settings.decimals}f} EUR"
