import json

import pytest

from config_loader import (
    CONFIG_ENV_VAR,
    CONTENT_ROOT_ENV_VAR,
    DEFAULT_SETTINGS,
    ConfigError,
    load_config,
    resolve_runtime_settings,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(CONTENT_ROOT_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_default_config_uses_defaults(tmp_path):
    assert load_config() == {}
    settings = resolve_runtime_settings()
    assert settings["target_lang"] == "zh"
    assert settings["user_agent"] == DEFAULT_SETTINGS["user_agent"]
    assert settings["content_root"] == str(tmp_path / "content" / "articles")


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "nope.json"))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(str(path))


def test_non_object_config_raises(tmp_path):
    path = write_config(tmp_path / "list.json", ["a"])
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(str(path))


def test_path_keys_resolve_relative_to_config(tmp_path):
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    path = write_config(
        config_dir / "settings.json",
        {"content_root": "../articles", "target_lang": "ja"},
    )
    config = load_config(str(path))
    assert config["content_root"] == str(tmp_path / "articles")
    assert config["target_lang"] == "ja"


def test_default_config_name_in_working_directory(tmp_path):
    write_config(tmp_path / "config.json", {"target_lang": "en"})
    assert resolve_runtime_settings()["target_lang"] == "en"


def test_precedence(tmp_path, monkeypatch):
    path = write_config(
        tmp_path / "config.json",
        {"content_root": "from-config", "target_lang": "ja", "user_agent": "UA/1"},
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    monkeypatch.setenv(CONTENT_ROOT_ENV_VAR, str(tmp_path / "from-env"))

    settings = resolve_runtime_settings()
    assert settings["content_root"] == str(tmp_path / "from-env")
    assert settings["target_lang"] == "ja"
    assert settings["user_agent"] == "UA/1"

    settings = resolve_runtime_settings(content_root="cli-root", target_lang=" en ")
    assert settings["content_root"] == str(tmp_path / "cli-root")
    assert settings["target_lang"] == "en"


def test_blank_language_is_rejected(tmp_path):
    write_config(tmp_path / "config.json", {"target_lang": "  "})
    with pytest.raises(ConfigError, match="target_lang"):
        resolve_runtime_settings()
