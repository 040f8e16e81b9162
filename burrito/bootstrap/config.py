"""
bootstrap/config.py - Rendering configuration

Provides the process-wide configuration read at render time: stack trace
visibility, color output and the error group banner. Values come from
defaults, environment variables, or a JSON file.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Iterator, Optional
from pathlib import Path
import os
import sys
import json
import logging

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger("burrito.bootstrap.config")


DEFAULT_GROUP_ERROR_TEXT = "Additionally the following errors occurred:"

_TRUE_VALUES = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class _ConfigFile(BaseModel):
    """Schema of the JSON configuration file."""

    model_config = ConfigDict(extra="forbid")

    show_stack_trace: Optional[bool] = None
    color: Optional[bool] = None
    group_error_text: Optional[str] = None


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip().lower() in _TRUE_VALUES


def _stdout_supports_color() -> bool:
    """Auto-detect ANSI color support the way most terminal tools do."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM") == "dumb":
        return False
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


@dataclass(frozen=True)
class BurritoConfig:
    """Configuration consumed by the renderer."""

    # Print "[function] file:line" under every rendered node
    show_stack_trace: bool = False

    # None auto-detects from the environment and stdout
    color: Optional[bool] = None

    # Banner between the primary error of a group and the others
    group_error_text: str = DEFAULT_GROUP_ERROR_TEXT

    @property
    def use_color(self) -> bool:
        """Resolve the color setting, auto-detecting when unset."""
        if self.color is None:
            return _stdout_supports_color()
        return self.color

    def with_changes(self, **changes: Any) -> "BurritoConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "BurritoConfig":
        """Create configuration from environment variables."""
        color = _env_flag("BURRITO_COLOR")
        if color is None and os.getenv("NO_COLOR") is not None:
            color = False
        return cls(
            show_stack_trace=bool(_env_flag("BURRITO_STACK_TRACE")),
            color=color,
            group_error_text=os.getenv("BURRITO_GROUP_TEXT", DEFAULT_GROUP_ERROR_TEXT),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "BurritoConfig":
        """Load configuration from a JSON file, on top of the environment."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        try:
            with open(path) as f:
                data = json.load(f)
            parsed = _ConfigFile.model_validate(data)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file is not valid JSON: {filepath}", e) from e
        except ValidationError as e:
            raise ConfigError(f"Invalid config file: {filepath}", e) from e

        return cls._from_dict(parsed.model_dump(exclude_none=True))

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "BurritoConfig":
        """Create config from dictionary, falling back to the environment."""
        return cls.from_env().with_changes(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return asdict(self)


# Global config instance
_config: Optional[BurritoConfig] = None


def load_config(filepath: Optional[str] = None) -> BurritoConfig:
    """
    Load configuration from file or environment and make it current.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        BurritoConfig instance
    """
    global _config

    if filepath:
        _config = BurritoConfig.from_file(filepath)
    else:
        _config = BurritoConfig.from_env()

    logger.info(
        f"Configuration loaded: show_stack_trace={_config.show_stack_trace}, "
        f"color={_config.color}"
    )
    return _config


def get_config() -> BurritoConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: BurritoConfig) -> None:
    """Replace the current configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Drop the current configuration; the next read reloads it."""
    global _config
    _config = None


def set_stack_trace(enabled: bool) -> None:
    """Toggle stack trace output for all subsequent renders."""
    set_config(get_config().with_changes(show_stack_trace=enabled))


@contextmanager
def config_override(**changes: Any) -> Iterator[BurritoConfig]:
    """
    Temporarily replace fields of the current configuration.

    Usage:
        with config_override(show_stack_trace=True):
            print(err)
    """
    global _config
    previous = _config
    _config = get_config().with_changes(**changes)
    try:
        yield _config
    finally:
        _config = previous
