"""event-emitter-codegen: C++ event emitter headers from component schemas."""

from src.emitter import (
    DeclarationNameCollisionError,
    EnumCaseCollisionError,
    generate,
    generate_component,
)
from src.schema import (
    InvalidEventPropertyTypeError,
    SchemaContractError,
    SchemaType,
    load_schema,
    parse_schema,
    validate_schema_dict,
)

__all__ = [
    # Schema
    "SchemaType",
    "load_schema",
    "parse_schema",
    "validate_schema_dict",
    # Generation
    "generate",
    "generate_component",
    # Errors
    "SchemaContractError",
    "InvalidEventPropertyTypeError",
    "DeclarationNameCollisionError",
    "EnumCaseCollisionError",
]
