"""Configuration tests."""

import json

import pytest

from wxmp.config import DEFAULT_API_BASE_URL, Config
from wxmp.errors import ConfigurationError


def test_defaults():
    cfg = Config()
    assert cfg.api_base_url == DEFAULT_API_BASE_URL
    assert cfg.encrypted is False
    assert cfg.strict_app_id is False


def test_encrypted_mode():
    assert Config(encoding_aes_key="k" * 43).encrypted is True


def test_from_env():
    cfg = Config.from_env(environ={
        "WXMP_APP_ID": "wx123",
        "WXMP_TOKEN": "tok",
        "WXMP_ENCODING_AES_KEY": "key",
        "WXMP_STRICT_APP_ID": "true",
        "UNRELATED": "x",
    })
    assert cfg.app_id == "wx123"
    assert cfg.token == "tok"
    assert cfg.encoding_aes_key == "key"
    assert cfg.strict_app_id is True
    assert cfg.app_secret == ""


def test_from_env_custom_prefix():
    cfg = Config.from_env(prefix="MP_", environ={"MP_APP_ID": "wx9"})
    assert cfg.app_id == "wx9"


def test_from_env_invalid_value():
    with pytest.raises(ConfigurationError):
        Config.from_env(environ={"WXMP_STRICT_APP_ID": "maybe"})


def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"app_id": "wx1", "token": "t"}))
    cfg = Config.from_file(path)
    assert cfg.app_id == "wx1"
    assert cfg.token == "t"


def test_from_file_missing(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        Config.from_file(tmp_path / "nope.json")


def test_from_file_bad_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{nope")
    with pytest.raises(ConfigurationError):
        Config.from_file(path)


def test_from_file_not_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        Config.from_file(path)
