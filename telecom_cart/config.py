from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../telecom-cart
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_list(*keys: str, default: str) -> tuple[str, ...]:
    v = _get_env(*keys, default=default) or default
    return tuple(part.strip() for part in v.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    cors_origins: tuple[str, ...]
    currency: str
    decimals: int


def load_settings() -> Settings:
    return Settings(
        host=_get_env("HOST", default="0.0.0.0") or "0.0.0.0",
        port=_get_int("PORT", "CART_PORT", default=3000) or 3000,
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
        cors_origins=_get_list("CORS_ORIGINS", default="*"),
        currency=_get_env("CURRENCY", default="USD") or "USD",
        decimals=_get_int("DECIMALS", default=2),
    )


settings = load_settings()

if not 0 < settings.port < 65536:
    raise RuntimeError(f"PORT out of range: {settings.port}. Set PORT in .env")
