"""Configuration loader for the barcode server"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from barcode_server.domain import ServerConfig
from barcode_server.logging import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_port(value: str) -> str:
    # PORT may be given in listen-address form, e.g. ":8080"
    return value.strip().lstrip(":")


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """
    Load server configuration from environment variables.

    Environment variables (all optional):
    - PORT: TCP port, optionally prefixed with ':' (default: 8080)
    - HOST: Interface to bind (default: 0.0.0.0)
    - LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default: INFO)
    - LOG_JSON: Emit JSON log lines (default: false)
    - LOG_FILE: Also write JSON log lines to this file (default: unset)
    - BARCODE_MAX_DIMENSION: Largest accepted width/height (default: 4096)

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        ServerConfig

    Raises:
        ValueError: If a variable is set to an invalid value
    """
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    if env.get("PORT"):
        values["port"] = _parse_port(env["PORT"])
    if env.get("HOST"):
        values["host"] = env["HOST"]
    if env.get("LOG_LEVEL"):
        values["log_level"] = env["LOG_LEVEL"]
    if "LOG_JSON" in env:
        values["log_json"] = _parse_bool("LOG_JSON", env["LOG_JSON"])
    if env.get("LOG_FILE"):
        values["log_file"] = env["LOG_FILE"]
    if env.get("BARCODE_MAX_DIMENSION"):
        values["max_dimension"] = env["BARCODE_MAX_DIMENSION"]

    try:
        return ServerConfig(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid server configuration: {e}") from e


def create_default_config() -> ServerConfig:
    """Configuration with every setting at its default"""
    return ServerConfig()


def load_or_create_config() -> ServerConfig:
    """
    Load configuration from environment, falling back to defaults.

    Invalid values are logged and replaced by the default configuration.

    Returns:
        ServerConfig
    """
    try:
        config = load_config_from_env()
    except ValueError as e:
        logger.warning("Ignoring environment configuration: %s", e)
        return create_default_config()

    logger.info("Loaded configuration: port=%d max_dimension=%d", config.port, config.max_dimension)
    return config
