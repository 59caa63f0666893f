"""Configuration module"""

from barcode_server.config.loader import (
    create_default_config,
    load_config_from_env,
    load_or_create_config,
)

__all__ = ["load_config_from_env", "create_default_config", "load_or_create_config"]
