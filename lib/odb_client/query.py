from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit

API_KEY_PARAM = "apiKey"


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_query(base_url: str, params: Mapping[str, Any], api_key: str) -> str:
    """Return ``base_url`` with ``params`` (plus ``apiKey`` when set) as its query string.

    Keys are emitted in sorted order. Empty values are kept. A configured
    ``api_key`` always replaces a caller-supplied ``apiKey`` entry.
    """
    query = {str(key): format_value(value) for key, value in params.items()}
    if api_key:
        query[API_KEY_PARAM] = api_key

    parts = urlsplit(base_url)
    encoded = urlencode(sorted(query.items()))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encoded, parts.fragment))
