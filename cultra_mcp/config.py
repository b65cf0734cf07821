"""Server configuration loaded from a JSON file or the environment."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CULTRA_MCP_CONFIG"
DEFAULT_CONFIG_PATH = Path(".config") / "cultra" / "mcp.json"
DEFAULT_BASE_URL = "http://localhost:8080"


@dataclass(repr=False)
class APIConfig:
    """Where the API lives and the key used to reach it."""

    base_url: str
    key: str

    def __repr__(self) -> str:
        shown = "<empty>" if not self.key else "<redacted>"
        return f"APIConfig(base_url={self.base_url!r}, key={shown})"


@dataclass
class Config:
    """Top-level configuration."""

    api: APIConfig

    @classmethod
    def load(cls) -> Config:
        """Load from ``$CULTRA_MCP_CONFIG``, then the default file, then the environment.

        A file named by the environment variable must load; a broken or
        missing default file is skipped.
        """
        explicit = os.environ.get(CONFIG_ENV_VAR)
        if explicit is not None:
            return cls.load_from_file(explicit)

        try:
            home: Path | None = Path.home()
        except RuntimeError:
            home = None
        if home is not None:
            try:
                return cls.load_from_file(home / DEFAULT_CONFIG_PATH)
            except (OSError, ValueError):
                pass

        key = os.environ.get("CULTRA_API_KEY", "")
        if not key:
            logger.warning("CULTRA_API_KEY not set — API requests will fail with 401")
        base_url = os.environ.get("CULTRA_API_URL", DEFAULT_BASE_URL)
        return cls(APIConfig(base_url=base_url, key=key))

    @classmethod
    def load_from_file(cls, path: str | os.PathLike[str]) -> Config:
        """Read a configuration file; raises OSError or ValueError on failure."""
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise OSError(f"Failed to read config file: {path}: {exc}") from exc
        try:
            return cls._from_json(json.loads(content))
        except ValueError as exc:
            raise ValueError(f"Failed to parse config file: {path}: {exc}") from exc

    @classmethod
    def _from_json(cls, data: Any) -> Config:
        if not isinstance(data, dict) or "api" not in data:
            raise ValueError("missing field `api`")
        api = data["api"]
        if not isinstance(api, dict):
            raise ValueError("field `api` must be an object")
        values = {}
        for name in ("base_url", "key"):
            if name not in api:
                raise ValueError(f"missing field `{name}`")
            if not isinstance(api[name], str):
                raise ValueError(f"field `{name}` must be a string")
            values[name] = api[name]
        return cls(APIConfig(**values))