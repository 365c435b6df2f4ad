from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

import httpx

DEFAULT_BASE_URL = "https://opendatabot.com/api/v2"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    http_client: httpx.Client | None = None


Option = Callable[[ClientConfig], ClientConfig]


def with_api_key(api_key: str) -> Option:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, api_key=api_key)

    return _apply


def with_base_url(base_url: str) -> Option:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, base_url=base_url.rstrip("/"))

    return _apply


def with_http_client(http_client: httpx.Client) -> Option:
    """Use a caller-owned httpx client (its timeout, proxies and hooks apply)."""

    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, http_client=http_client)

    return _apply


def build_config(*options: Option) -> ClientConfig:
    cfg = ClientConfig()
    for option in options:
        cfg = option(cfg)
    return cfg
