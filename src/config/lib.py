"""Centralized environment configuration management for event-emitter-codegen.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> strict = get_environment(EnvVar.CODEGEN_STRICT_NAMES)  # Returns bool
    >>> library = get_environment(EnvVar.CODEGEN_LIBRARY_NAME)  # str | None
    >>>
    >>> # Override at runtime
    >>> strict = get_environment(EnvVar.CODEGEN_STRICT_NAMES, override=True)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

DEFAULT_OUTPUT_DIRNAME = "generated"

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "CODEGEN_OUTPUT_DIR").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by event-emitter-codegen.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - generation: Options passed through to the generator
        - output: Where generated files are written
        - logging: Log verbosity
    """

    # -------------------------------------------------------------------------
    # Generation Options
    # -------------------------------------------------------------------------
    CODEGEN_LIBRARY_NAME = EnvConfig(
        name="CODEGEN_LIBRARY_NAME",
        default=None,
        var_type=str,
        description="Library identifier passed to the generator",
        category="generation",
    )
    CODEGEN_PACKAGE_NAME = EnvConfig(
        name="CODEGEN_PACKAGE_NAME",
        default=None,
        var_type=str,
        description="Optional package identifier passed to the generator",
        category="generation",
    )
    CODEGEN_ASSUME_NONNULL = EnvConfig(
        name="CODEGEN_ASSUME_NONNULL",
        default=False,
        var_type=bool,
        description="Treat primitive fields as non-nullable",
        category="generation",
    )
    CODEGEN_STRICT_NAMES = EnvConfig(
        name="CODEGEN_STRICT_NAMES",
        default=False,
        var_type=bool,
        description="Fail when two declarations resolve to the same name",
        category="generation",
    )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    CODEGEN_OUTPUT_DIR = EnvConfig(
        name="CODEGEN_OUTPUT_DIR",
        default=None,  # Computed from cwd if not set
        var_type=Path,
        description="Directory generated headers are written to",
        category="output",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    CODEGEN_LOG_LEVEL = EnvConfig(
        name="CODEGEN_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    if var_type is Path:
        return Path(value)

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, bool, or Path).

    Example:
        >>> get_environment(EnvVar.CODEGEN_LOG_LEVEL)
        'INFO'
        >>> get_environment(EnvVar.CODEGEN_STRICT_NAMES, override=True)
        True
    """
    config: EnvConfig = env_var.value

    # Override takes highest priority
    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_output_dir(override: Path | str | None = None) -> Path:
    """Get the directory generated files are written to.

    Resolution: override > CODEGEN_OUTPUT_DIR > {cwd}/generated
    """
    if override is not None:
        return Path(override)

    env_path = get_environment(EnvVar.CODEGEN_OUTPUT_DIR)
    if env_path:
        return env_path

    return Path.cwd() / DEFAULT_OUTPUT_DIRNAME


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name, upper-cased."""
    return str(get_environment(EnvVar.CODEGEN_LOG_LEVEL, override=override)).upper()


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (generation, output, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_output_dir",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
