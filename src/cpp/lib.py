"""C++ naming and type helpers for generated headers.

Pure functions shared by the emitter: primitive type mapping, identifier
sanitization, declaration naming, include resolution and text indentation.
"""

import re

from src.schema import AnnotationKind, InvalidEventPropertyTypeError

_CPP_PRIMITIVE_TYPES: dict[AnnotationKind, str] = {
    AnnotationKind.BOOLEAN: "bool",
    AnnotationKind.STRING: "std::string",
    AnnotationKind.INT32: "int",
    AnnotationKind.DOUBLE: "double",
    AnnotationKind.FLOAT: "Float",
    AnnotationKind.MIXED: "folly::dynamic",
}

_ANNOTATION_INCLUDES: dict[AnnotationKind, str] = {
    AnnotationKind.MIXED: "#include <folly/dynamic.h>",
}

_IDENTIFIER_SEPARATOR = re.compile(r"[^0-9A-Za-z_]+")


def get_cpp_type_for_annotation(kind: str) -> str:
    """Map a primitive annotation kind to its C++ type.

    Args:
        kind: One of the six primitive annotation kinds.

    Returns:
        str: The C++ type token (e.g. "std::string").

    Raises:
        InvalidEventPropertyTypeError: If kind is not a primitive kind.

    Example:
        >>> get_cpp_type_for_annotation("Int32TypeAnnotation")
        'int'
    """
    try:
        return _CPP_PRIMITIVE_TYPES[AnnotationKind(kind)]
    except (KeyError, ValueError):
        raise InvalidEventPropertyTypeError(kind) from None


def get_include_for_annotation(kind: str) -> str | None:
    """Get the extra include directive a kind needs, if any."""
    try:
        return _ANNOTATION_INCLUDES.get(AnnotationKind(kind))
    except ValueError:
        raise InvalidEventPropertyTypeError(kind) from None


def upper_case_first(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]


def to_safe_cpp_string(value: str) -> str:
    """Turn an arbitrary string into a C++ identifier.

    Non-identifier characters split the input into pieces; each piece has
    its first letter capitalized and the pieces are joined. A leading digit
    gets an underscore prefix, and an input with no usable characters
    becomes "_".

    Example:
        >>> to_safe_cpp_string("left-to-right")
        'LeftToRight'
    """
    result = "".join(
        upper_case_first(piece) for piece in _IDENTIFIER_SEPARATOR.split(value)
    )
    if not result:
        return "_"
    if result[0].isdigit():
        return f"_{result}"
    return result


def generate_event_struct_name(parts: list[str] | tuple[str, ...] = ()) -> str:
    """Derive a declaration name from a path of field names.

    Example:
        >>> generate_event_struct_name(["onChange", "target"])
        'OnChangeTarget'
    """
    return "".join(to_safe_cpp_string(part) for part in parts)


def to_cpp_string_literal(value: str) -> str:
    """Quote a string as a C++ string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def indent(text: str, spaces: int) -> str:
    """Indent every non-empty line of text except the first.

    The first line is expected to sit after existing indentation in the
    enclosing template.
    """
    prefix = " " * spaces
    return "\n".join(
        line if index == 0 or not line else prefix + line
        for index, line in enumerate(text.split("\n"))
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
