"""Centralized configuration management for event-emitter-codegen.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> strict = get_environment(EnvVar.CODEGEN_STRICT_NAMES)  # Returns bool
    >>> out_dir = get_environment(EnvVar.CODEGEN_OUTPUT_DIR)  # Path | None
    >>>
    >>> # Override at runtime
    >>> strict = get_environment(EnvVar.CODEGEN_STRICT_NAMES, override=True)
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("generation"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    generation: Options passed through to the generator
    output: Where generated files are written
    logging: Log verbosity
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    get_output_dir,
    # Introspection
    list_environment_variables,
)

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
