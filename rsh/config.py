"""
rsh Configuration Loader

Provides:
- The ShellConfig dataclass with defaults matching the stock interpreter
- JSON configuration file loading
- Configuration validation
"""

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .allowlist import Allowlist, DEFAULT_ALLOWED_COMMANDS
from .exceptions import ConfigValidationError
from .tokenizer import MAX_ARGS

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "rsh>"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ShellConfig:
    """Interpreter configuration, built once at startup."""
    prompt: str = DEFAULT_PROMPT
    allowed_commands: Tuple[str, ...] = DEFAULT_ALLOWED_COMMANDS
    max_args: int = MAX_ARGS
    strict_args: bool = False
    ignore_interrupt: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        # Accept any sequence from callers, store a tuple
        object.__setattr__(self, 'allowed_commands', tuple(self.allowed_commands))
        self.validate()

    def validate(self) -> None:
        """
        Check field values.

        Raises:
            ConfigValidationError: On the first invalid value
        """
        if not isinstance(self.prompt, str):
            raise ConfigValidationError("prompt must be a string")

        if not self.allowed_commands:
            raise ConfigValidationError("allowed_commands must not be empty")
        for name in self.allowed_commands:
            if not isinstance(name, str) or not name:
                raise ConfigValidationError(f"invalid command name in allowed_commands: {name!r}")
            if any(ch.isspace() for ch in name):
                raise ConfigValidationError(f"command name contains whitespace: {name!r}")

        if isinstance(self.max_args, bool) or not isinstance(self.max_args, int):
            raise ConfigValidationError("max_args must be an integer")
        if self.max_args < 1:
            raise ConfigValidationError("max_args must be at least 1")

        for flag in ('strict_args', 'ignore_interrupt'):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigValidationError(f"{flag} must be true or false")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )

        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigValidationError("log_file must be a string")

    def build_allowlist(self) -> Allowlist:
        return Allowlist(self.allowed_commands)

    def with_overrides(self, **overrides: Any) -> 'ShellConfig':
        """Return a copy with the non-None overrides applied"""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['allowed_commands'] = list(self.allowed_commands)
        return data


def config_from_dict(data: Dict[str, Any]) -> ShellConfig:
    """
    Build a ShellConfig from a parsed JSON object.

    Raises:
        ConfigValidationError: On unknown keys or invalid values
    """
    if not isinstance(data, dict):
        raise ConfigValidationError("configuration must be a JSON object")

    known = {f.name for f in fields(ShellConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigValidationError(f"unknown configuration key(s): {', '.join(unknown)}")

    if 'allowed_commands' in data and not isinstance(data['allowed_commands'], list):
        raise ConfigValidationError("allowed_commands must be a list of names")

    return ShellConfig(**data)


def load_config(path: Union[str, Path]) -> ShellConfig:
    """
    Load a ShellConfig from a JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If the file cannot be read or is invalid
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigValidationError(f"cannot read {path}: {e.strerror or e}")
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"invalid JSON in {path}: {e}")

    config = config_from_dict(data)
    logger.debug("Loaded configuration from %s", path)
    return config
