"""
Developer configuration for an Official Account callback.

Set ``encoding_aes_key`` to switch the callback into encrypted (safe) mode.
"""

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from wxmp.errors import ConfigurationError

DEFAULT_API_BASE_URL = "https://api.weixin.qq.com/cgi-bin"
DEFAULT_CONFIG_FILE = Path.home() / ".wxmp" / "config.json"
ENV_PREFIX = "WXMP_"


class Config(BaseModel):
    app_id: str = ""
    app_secret: str = ""
    token: str = ""
    encoding_aes_key: Optional[str] = None
    api_base_url: str = DEFAULT_API_BASE_URL
    strict_app_id: bool = False

    @property
    def encrypted(self) -> bool:
        return bool(self.encoding_aes_key)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``WXMP_APP_ID``, ``WXMP_TOKEN``, ... variables."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for name in cls.model_fields:
            value = env.get(prefix + name.upper())
            if value is not None:
                data[name] = value
        return cls.from_mapping(data)

    @classmethod
    def from_file(cls, path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> "Config":
        try:
            data = json.loads(Path(path).read_text())
        except FileNotFoundError:
            raise ConfigurationError(f"Config file not found: {path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {path} is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must hold a JSON object")
        return cls.from_mapping(data)
