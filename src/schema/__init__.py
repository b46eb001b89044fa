"""Schema module - authoritative source for component event definitions.

This module provides:
- Pydantic models for modules, components, events and payloads
- The closed AnnotationKind union for payload properties
- Schema loading and non-raising validation

Example usage:
    >>> from src.schema import load_schema, get_components
    >>> schema = load_schema("schema.json")
    >>> for name, component in get_components(schema).items():
    ...     print(name, [event.name for event in component.events])
"""

from .lib import (
    PRIMITIVE_KINDS,
    AnnotationKind,
    BooleanTypeAnnotation,
    ComponentShape,
    DoubleTypeAnnotation,
    EventTypeAnnotation,
    EventTypeAnnotationShape,
    EventTypeShape,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    InvalidEventPropertyTypeError,
    MixedTypeAnnotation,
    NamedEventProperty,
    ObjectTypeAnnotation,
    SchemaContractError,
    SchemaModule,
    SchemaType,
    SchemaValidationError,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
    get_components,
    is_valid_schema_dict,
    load_schema,
    parse_schema,
    validate_schema_dict,
)

__all__ = [
    # Kinds
    "AnnotationKind",
    "PRIMITIVE_KINDS",
    # Errors
    "SchemaContractError",
    "InvalidEventPropertyTypeError",
    # Annotation models
    "BooleanTypeAnnotation",
    "StringTypeAnnotation",
    "Int32TypeAnnotation",
    "DoubleTypeAnnotation",
    "FloatTypeAnnotation",
    "MixedTypeAnnotation",
    "StringEnumTypeAnnotation",
    "ObjectTypeAnnotation",
    "EventTypeAnnotation",
    "NamedEventProperty",
    # Event / component / module models
    "EventTypeAnnotationShape",
    "EventTypeShape",
    "ComponentShape",
    "SchemaModule",
    "SchemaType",
    # Lookup
    "get_components",
    # Loading
    "parse_schema",
    "load_schema",
    # Validation
    "SchemaValidationError",
    "validate_schema_dict",
    "is_valid_schema_dict",
]
