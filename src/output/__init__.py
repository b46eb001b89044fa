"""Output module for generated files.

Writes generated headers to disk (with a check-only mode) and formats
human-readable summaries of schema components.
"""

from src.output.lib import format_schema_tree, write_files

__all__ = [
    "format_schema_tree",
    "write_files",
]
