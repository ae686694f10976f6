"""
Accessor configuration.

Options come from an optional YAML file and from environment variables;
environment variables win. Every option is required.

YAML layout:

    storage:
      end_point: minio.local
      port: 9000
      use_ssl: false
      access_key: minioadmin
      secret_key: minioadmin
      bucket: pod-data
      base_url: /
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from podstore.identifiers.single_root import SingleRootIdentifierStrategy
from podstore.interfaces.identifier_strategy import IdentifierStrategy

logger = logging.getLogger("podstore.config")

# Maps option names to the env vars that override them
ENV_KEYS = {
    "end_point": "PODSTORE_S3_ENDPOINT",
    "port": "PODSTORE_S3_PORT",
    "use_ssl": "PODSTORE_S3_USE_SSL",
    "access_key": "PODSTORE_S3_ACCESS_KEY",
    "secret_key": "PODSTORE_S3_SECRET_KEY",
    "bucket": "PODSTORE_S3_BUCKET",
    "base_url": "PODSTORE_BASE_URL",
}

_TRUE = {"1", "true", "yes", "y"}
_FALSE = {"0", "false", "no", "n"}


class ConfigError(ValueError):
    """Raised when accessor options are missing or malformed."""
    pass


@dataclass
class MinioAccessorOptions:
    """Everything needed to build a MinioDataAccessor."""

    end_point: str
    port: int
    use_ssl: bool
    access_key: str
    secret_key: str
    bucket: str
    identifier_strategy: IdentifierStrategy

    @property
    def endpoint_url(self) -> str:
        scheme = "https" if self.use_ssl else "http"
        return f"{scheme}://{self.end_point}:{self.port}"


def _parse_bool(name: str, value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"port must be an integer, got {value!r}")
    if not 1 <= port <= 65535:
        raise ConfigError(f"port must be between 1 and 65535, got {port}")
    return port


def _read_yaml(path: Path) -> dict:
    with open(path) as f:
        config = yaml.safe_load(f) or {}
    section = config.get("storage", {}) if isinstance(config, dict) else None
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'storage' must be a mapping")
    return section


def load_options(
    path: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> MinioAccessorOptions:
    """
    Build accessor options from a YAML file and the environment.

    Args:
        path: Optional YAML file with a top-level ``storage`` mapping
        env: Environment to read overrides from (defaults to os.environ)

    Raises:
        ConfigError: If any option is missing or malformed
    """
    env = os.environ if env is None else env
    raw: dict = {}

    if path:
        raw.update(_read_yaml(Path(path)))
        logger.info(f"Loaded storage options from {path}")

    for option, env_var in ENV_KEYS.items():
        value = env.get(env_var, "")
        if value.strip():
            raw[option] = value.strip()

    missing = [
        option for option in ENV_KEYS
        if raw.get(option) is None or str(raw.get(option)).strip() == ""
    ]
    if missing:
        raise ConfigError(
            f"Missing storage options: {', '.join(missing)}. "
            f"Set them in the config file or via {[ENV_KEYS[m] for m in missing]}"
        )

    return MinioAccessorOptions(
        end_point=str(raw["end_point"]),
        port=_parse_port(raw["port"]),
        use_ssl=_parse_bool("use_ssl", raw["use_ssl"]),
        access_key=str(raw["access_key"]),
        secret_key=str(raw["secret_key"]),
        bucket=str(raw["bucket"]),
        identifier_strategy=SingleRootIdentifierStrategy(str(raw["base_url"])),
    )
