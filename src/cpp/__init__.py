"""C++ helpers: type mapping, naming and formatting for generated headers."""

from .lib import (
    generate_event_struct_name,
    get_cpp_type_for_annotation,
    get_include_for_annotation,
    indent,
    to_cpp_string_literal,
    to_safe_cpp_string,
    upper_case_first,
)

__all__ = [
    "get_cpp_type_for_annotation",
    "get_include_for_annotation",
    "upper_case_first",
    "to_safe_cpp_string",
    "generate_event_struct_name",
    "to_cpp_string_literal",
    "indent",
]
