from __future__ import annotations

import logging
import re

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import HTTPStatusError, NetworkError
from .query import API_KEY_PARAM

logger = logging.getLogger(__name__)

USER_AGENT = f"odb-client/{__version__}"

_API_KEY_RE = re.compile(rf"([?&]{API_KEY_PARAM}=)[^&#]*")


def redact_url(url: str) -> str:
    return _API_KEY_RE.sub(r"\1***", url)


class Transport:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._owns_client = cfg.http_client is None
        if cfg.http_client is not None:
            self._client = cfg.http_client
        else:
            # no timeout: a stalled connection blocks until the OS gives up
            self._client = httpx.Client(
                timeout=httpx.Timeout(None),
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def execute(self, url: str) -> bytes:
        logger.debug("GET %s", redact_url(url))
        try:
            r = self._client.get(url)
        except httpx.RequestError as e:
            raise NetworkError(str(e) or e.__class__.__name__) from e

        if r.status_code != httpx.codes.OK:
            details = r.text[:1000] if r.content else None
            raise HTTPStatusError(r.status_code, r.reason_phrase, details)

        return r.content
