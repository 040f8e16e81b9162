"""
bootstrap/ - Process-wide configuration

Owns the configuration object the renderer reads when no explicit
configuration is passed.
"""

from .config import (
    DEFAULT_GROUP_ERROR_TEXT,
    BurritoConfig,
    ConfigError,
    load_config,
    get_config,
    set_config,
    reset_config,
    set_stack_trace,
    config_override,
)

__all__ = [
    "DEFAULT_GROUP_ERROR_TEXT",
    "BurritoConfig",
    "ConfigError",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "set_stack_trace",
    "config_override",
]
