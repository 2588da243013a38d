"""Backend connection settings.

Settings are resolved per key, first match wins:

1. config.toml ``[pocketbase]`` table (url, admin_email, admin_password)
2. Environment variables (VITE_POCKETBASE_URL / POCKETBASE_URL,
   PB_ADMIN_EMAIL, PB_ADMIN_PASSWORD)
3. .env file at the project root
4. Default URL http://localhost:8090
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping
from urllib.parse import urlparse

import tomlkit

from .errors import ConfigError
from .paths import CONFIG_TOML, ENV_FILE

DEFAULT_URL = "http://localhost:8090"

# Settings key -> environment variable names, in priority order
ENV_KEYS = {
    "url": ("VITE_POCKETBASE_URL", "POCKETBASE_URL"),
    "admin_email": ("PB_ADMIN_EMAIL",),
    "admin_password": ("PB_ADMIN_PASSWORD",),
}


@dataclass
class BackendSettings:
    """Where the PocketBase backend lives and how to authenticate."""

    url: str = DEFAULT_URL
    admin_email: str | None = None
    admin_password: str | None = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.admin_email and self.admin_password)


def read_config_toml(config_path: Path = CONFIG_TOML) -> dict[str, str]:
    """Read the ``[pocketbase]`` table from config.toml (empty if absent)."""
    if not config_path.exists():
        return {}

    with open(config_path, "rb") as f:
        try:
            config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    section = config.get("pocketbase", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[pocketbase] in {config_path} must be a table")
    return {k: str(v) for k, v in section.items() if v is not None}


def read_env_file(env_path: Path = ENV_FILE) -> dict[str, str]:
    """Parse KEY=value lines from a .env file (empty if absent)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    with open(env_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip().removeprefix("export ").strip()
            values[key] = value.strip().strip('"').strip("'")
    return values


def validate_url(url: str) -> str:
    """Check that a backend URL is http(s) with a host; returns it without trailing slash."""
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid PocketBase URL: {url!r} (expected http(s)://host[:port])")
    return url.strip().rstrip("/")


def load_settings(
    config_path: Path = CONFIG_TOML,
    env_path: Path = ENV_FILE,
    environ: Mapping[str, str] | None = None,
) -> BackendSettings:
    """Resolve backend settings from config.toml, environment and .env."""
    environ = os.environ if environ is None else environ
    toml_values = read_config_toml(config_path)
    dotenv_values = read_env_file(env_path)

    resolved: dict[str, str | None] = {}
    for key, env_names in ENV_KEYS.items():
        value = toml_values.get(key)
        if not value:
            value = next((environ[n] for n in env_names if environ.get(n)), None)
        if not value:
            value = next((dotenv_values[n] for n in env_names if dotenv_values.get(n)), None)
        resolved[key] = value

    return BackendSettings(
        url=validate_url(resolved["url"] or DEFAULT_URL),
        admin_email=resolved["admin_email"],
        admin_password=resolved["admin_password"],
    )


def set_backend_url(url: str, config_path: Path = CONFIG_TOML) -> str:
    """Point the seeder at another backend by writing config.toml.

    Existing comments and other tables in config.toml are preserved.
    """
    url = validate_url(url)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config = tomlkit.load(f)
    else:
        config = tomlkit.document()

    if "pocketbase" not in config:
        config["pocketbase"] = tomlkit.table()
    config["pocketbase"]["url"] = url

    with open(config_path, "w", encoding="utf-8") as f:
        tomlkit.dump(config, f)
    return url


def clear_backend_url(config_path: Path = CONFIG_TOML) -> bool:
    """Remove the URL override from config.toml. Returns True if one was removed."""
    if not config_path.exists():
        return False

    with open(config_path, "r", encoding="utf-8") as f:
        config = tomlkit.load(f)

    section = config.get("pocketbase")
    if section is None or "url" not in section:
        return False

    del section["url"]
    if not section:
        del config["pocketbase"]

    with open(config_path, "w", encoding="utf-8") as f:
        tomlkit.dump(config, f)
    return True
