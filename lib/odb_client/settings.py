from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from .config_types import DEFAULT_BASE_URL, Option, with_api_key, with_base_url

APP_NAME = "odb-client"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "ODB_API_KEY"
ENV_BASE_URL = "ODB_BASE_URL"


@dataclass
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL

    def options(self) -> list[Option]:
        opts: list[Option] = []
        if self.api_key:
            opts.append(with_api_key(self.api_key))
        if self.base_url:
            opts.append(with_base_url(self.base_url))
        return opts


def settings_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value
    return f"https://{value}"


def to_toml(settings: Settings) -> dict[str, Any]:
    data: dict[str, Any] = {"base_url": settings.base_url}
    if settings.api_key:
        data["api_key"] = settings.api_key
    return data


def from_toml(data: dict[str, Any]) -> Settings:
    api_key = str(data.get("api_key") or "").strip()
    base_url = normalize_base_url(str(data.get("base_url") or ""))
    return Settings(api_key=api_key, base_url=base_url or DEFAULT_BASE_URL)


def load_settings() -> Settings:
    """Read the settings file, then let ``ODB_API_KEY``/``ODB_BASE_URL`` override it."""
    try:
        with open(settings_path(), "rb") as f:
            settings = from_toml(tomllib.load(f))
    except FileNotFoundError:
        settings = Settings()

    env_key = os.getenv(ENV_API_KEY, "").strip()
    if env_key:
        settings.api_key = env_key
    env_url = normalize_base_url(os.getenv(ENV_BASE_URL))
    if env_url:
        settings.base_url = env_url
    return settings


def save_settings(settings: Settings) -> str:
    path = settings_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(settings)).encode("utf-8"))
    # holds the API key
    os.chmod(path, 0o600)
    return path
