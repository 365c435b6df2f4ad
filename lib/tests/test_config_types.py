import httpx

from odb_client import config_types
from odb_client.config_types import build_config, with_api_key, with_base_url, with_http_client


def test_build_config_without_options_has_empty_key() -> None:
    cfg = build_config()
    assert cfg.api_key == ""
    assert cfg.base_url == config_types.DEFAULT_BASE_URL
    assert cfg.http_client is None


def test_build_config_last_option_wins() -> None:
    cfg = build_config(with_api_key("first"), with_api_key("second"))
    assert cfg.api_key == "second"


def test_with_base_url_strips_trailing_slash() -> None:
    cfg = build_config(with_base_url("http://127.0.0.1:8080/api/v2/"))
    assert cfg.base_url == "http://127.0.0.1:8080/api/v2"


def test_options_do_not_mutate_previous_config() -> None:
    base = build_config(with_api_key("K"))
    other = with_api_key("other")(base)
    assert base.api_key == "K"
    assert other.api_key == "other"


def test_with_http_client_keeps_instance() -> None:
    client = httpx.Client()
    try:
        cfg = build_config(with_http_client(client))
        assert cfg.http_client is client
    finally:
        client.close()
