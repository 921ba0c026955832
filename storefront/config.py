"""Storefront settings loaded from environment (and an optional .env file)."""
import os
from dataclasses import dataclass
from functools import cache
from pathlib import Path

from dotenv import load_dotenv

_TRUE_VALUES = ("1", "true", "yes", "on")


def _get_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_bool(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    currency: str = "USD"
    strict_cart_updates: bool = False  # raise instead of ignoring updates to absent lines
    seed_catalog: bool = True


def load_settings(env_path: Path | None = None) -> Settings:
    """Read settings from the environment, loading `.env` first if present."""
    if env_path is not None:
        if env_path.exists():
            load_dotenv(env_path)
    else:
        load_dotenv()

    return Settings(
        currency=_get_env("STOREFRONT_CURRENCY", "USD").upper(),
        strict_cart_updates=_get_bool("STOREFRONT_STRICT_CART", False),
        seed_catalog=_get_bool("STOREFRONT_SEED_CATALOG", True),
    )


@cache
def get_settings() -> Settings:
    """Get process-wide settings (loaded once)."""
    return load_settings()
