import os

from odb_client import settings
from odb_client.config_types import DEFAULT_BASE_URL, build_config


def _use_dir(monkeypatch, tmp_path) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(settings, "user_config_dir", _config_dir)
    monkeypatch.delenv(settings.ENV_API_KEY, raising=False)
    monkeypatch.delenv(settings.ENV_BASE_URL, raising=False)


def test_load_settings_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_dir(monkeypatch, tmp_path)
    loaded = settings.load_settings()
    assert loaded.api_key == ""
    assert loaded.base_url == DEFAULT_BASE_URL


def test_save_and_load_settings(tmp_path, monkeypatch) -> None:
    _use_dir(monkeypatch, tmp_path)

    path = settings.save_settings(settings.Settings(api_key="secret", base_url="https://example.test/api"))

    assert path.endswith("config.toml")
    assert os.stat(path).st_mode & 0o777 == 0o600
    loaded = settings.load_settings()
    assert loaded.api_key == "secret"
    assert loaded.base_url == "https://example.test/api"


def test_save_settings_omits_empty_key(tmp_path, monkeypatch) -> None:
    _use_dir(monkeypatch, tmp_path)
    settings.save_settings(settings.Settings())
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")
    assert "api_key" not in contents


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    _use_dir(monkeypatch, tmp_path)
    tmp_path.joinpath("config.toml").write_text('api_key = "file-key"\n', encoding="utf-8")
    monkeypatch.setenv(settings.ENV_API_KEY, "env-key")
    monkeypatch.setenv(settings.ENV_BASE_URL, "mirror.example.test/v2/")

    loaded = settings.load_settings()

    assert loaded.api_key == "env-key"
    assert loaded.base_url == "https://mirror.example.test/v2"


def test_settings_options_build_client_config() -> None:
    cfg = build_config(*settings.Settings(api_key="K", base_url="https://example.test/").options())
    assert cfg.api_key == "K"
    assert cfg.base_url == "https://example.test"


def test_normalize_base_url() -> None:
    assert settings.normalize_base_url("example.com") == "https://example.com"
    assert settings.normalize_base_url(" http://127.0.0.1:8010/ ") == "http://127.0.0.1:8010"
    assert settings.normalize_base_url(None) == ""
