"""Authoritative Schema Module for component event definitions.

This module is the single source of truth for the shape of the codegen
input. It provides:
- Pydantic models for modules, components, events and payload properties
- The closed set of event payload annotation kinds
- Loading helpers that validate raw JSON into typed models
- A non-raising validation report for tooling

The annotation union is discriminated on the ``type`` key. Anything outside
it is rejected at load time, and the emitter re-checks the kind at runtime
so hand-built models cannot slip an unknown kind through.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from src.core import get_logger

logger = get_logger("schema")


# === ANNOTATION KINDS ===


class AnnotationKind(str, Enum):
    """Discriminant of an event payload property type."""

    BOOLEAN = "BooleanTypeAnnotation"
    STRING = "StringTypeAnnotation"
    INT32 = "Int32TypeAnnotation"
    DOUBLE = "DoubleTypeAnnotation"
    FLOAT = "FloatTypeAnnotation"
    MIXED = "MixedTypeAnnotation"
    STRING_ENUM = "StringEnumTypeAnnotation"
    OBJECT = "ObjectTypeAnnotation"


PRIMITIVE_KINDS: frozenset[AnnotationKind] = frozenset(
    {
        AnnotationKind.BOOLEAN,
        AnnotationKind.STRING,
        AnnotationKind.INT32,
        AnnotationKind.DOUBLE,
        AnnotationKind.FLOAT,
        AnnotationKind.MIXED,
    }
)


# === ERRORS ===


class SchemaContractError(Exception):
    """Base exception for schema contract violations found during generation."""


class InvalidEventPropertyTypeError(SchemaContractError):
    """Raised when a payload property carries a kind outside the closed union.

    Attributes:
        type_name: The offending annotation kind.
    """

    def __init__(self, type_name: Any):
        super().__init__(f"Received invalid event property type {type_name}")
        self.type_name = type_name


# === ANNOTATION MODELS ===


class BooleanTypeAnnotation(BaseModel):
    type: Literal["BooleanTypeAnnotation"] = "BooleanTypeAnnotation"


class StringTypeAnnotation(BaseModel):
    type: Literal["StringTypeAnnotation"] = "StringTypeAnnotation"


class Int32TypeAnnotation(BaseModel):
    type: Literal["Int32TypeAnnotation"] = "Int32TypeAnnotation"


class DoubleTypeAnnotation(BaseModel):
    type: Literal["DoubleTypeAnnotation"] = "DoubleTypeAnnotation"


class FloatTypeAnnotation(BaseModel):
    type: Literal["FloatTypeAnnotation"] = "FloatTypeAnnotation"


class MixedTypeAnnotation(BaseModel):
    type: Literal["MixedTypeAnnotation"] = "MixedTypeAnnotation"


class StringEnumTypeAnnotation(BaseModel):
    """A string property restricted to a fixed, ordered list of literals."""

    type: Literal["StringEnumTypeAnnotation"] = "StringEnumTypeAnnotation"
    options: list[str] = Field(default_factory=list)


class ObjectTypeAnnotation(BaseModel):
    """A nested object made of ordered, named properties."""

    type: Literal["ObjectTypeAnnotation"] = "ObjectTypeAnnotation"
    properties: list["NamedEventProperty"] = Field(default_factory=list)


EventTypeAnnotation = Annotated[
    Union[
        BooleanTypeAnnotation,
        StringTypeAnnotation,
        Int32TypeAnnotation,
        DoubleTypeAnnotation,
        FloatTypeAnnotation,
        MixedTypeAnnotation,
        StringEnumTypeAnnotation,
        ObjectTypeAnnotation,
    ],
    Field(discriminator="type"),
]


class NamedEventProperty(BaseModel):
    """A single named property of an event payload.

    Attributes:
        name: Field name, used verbatim in the generated struct.
        optional: Whether the property may be omitted by the emitter.
        type_annotation: The property's type (JSON key ``typeAnnotation``).
    """

    name: str
    optional: bool = False
    type_annotation: EventTypeAnnotation = Field(..., alias="typeAnnotation")

    model_config = {"populate_by_name": True}


ObjectTypeAnnotation.model_rebuild()
NamedEventProperty.model_rebuild()


# === EVENT / COMPONENT / MODULE MODELS ===


class EventTypeAnnotationShape(BaseModel):
    """Annotation of an event: either no payload or one object payload."""

    type: Literal["EventTypeAnnotation"] = "EventTypeAnnotation"
    argument: ObjectTypeAnnotation | None = None


class EventTypeShape(BaseModel):
    """A named event a component may emit.

    Attributes:
        name: Event name, also the name of the generated method.
        optional: Whether the event handler is optional.
        bubbling_type: ``direct`` or ``bubble`` (JSON key ``bubblingType``).
        type_annotation: Payload description (JSON key ``typeAnnotation``).
    """

    name: str
    optional: bool = False
    bubbling_type: Literal["direct", "bubble"] = Field(
        default="direct", alias="bubblingType"
    )
    type_annotation: EventTypeAnnotationShape = Field(
        default_factory=EventTypeAnnotationShape, alias="typeAnnotation"
    )

    model_config = {"populate_by_name": True}

    @property
    def payload(self) -> ObjectTypeAnnotation | None:
        """The event's object payload, if any."""
        return self.type_annotation.argument


class ComponentShape(BaseModel):
    """A UI component. Only its events matter to the emitter generator."""

    events: list[EventTypeShape] = Field(default_factory=list)


class SchemaModule(BaseModel):
    """A schema module. Only ``Component`` modules contribute components."""

    type: str
    components: dict[str, ComponentShape] | None = None

    @property
    def is_component_module(self) -> bool:
        return self.type == "Component"


class SchemaType(BaseModel):
    """Top-level codegen schema: module name to module, in declared order."""

    modules: dict[str, SchemaModule] = Field(default_factory=dict)


# === LOOKUP ===


def get_components(schema: SchemaType) -> dict[str, ComponentShape]:
    """Merge the components of every component module, in schema order.

    A component name declared by a later module replaces the earlier
    definition but keeps its original position.

    Args:
        schema: The validated schema.

    Returns:
        dict mapping component name to its shape.
    """
    components: dict[str, ComponentShape] = {}
    for module_name, module in schema.modules.items():
        if not module.is_component_module:
            continue
        if module.components is None:
            logger.debug(f"Module '{module_name}' declares no components")
            continue
        components.update(module.components)
    return components


# === LOADING ===


def parse_schema(data: dict[str, Any]) -> SchemaType:
    """Validate a raw schema dictionary into a SchemaType.

    Raises:
        pydantic.ValidationError: If the data does not match the schema.
    """
    return SchemaType.model_validate(data)


def load_schema(path: Path | str) -> SchemaType:
    """Read and validate a JSON schema file.

    Args:
        path: Path to the JSON schema.

    Returns:
        SchemaType: The validated schema.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the JSON does not match the schema.
    """
    path = Path(path)
    logger.debug(f"Loading schema from {path}")
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_schema(data)


# === SCHEMA VALIDATION ===


@dataclass
class SchemaValidationError:
    """Represents a schema validation error."""

    path: str
    message: str
    error_type: str


def validate_schema_dict(data: Any) -> list[SchemaValidationError]:
    """Validate a raw schema dictionary without raising.

    Args:
        data: Dictionary representing a whole schema.

    Returns:
        List of validation errors found (empty if valid).
    """
    try:
        SchemaType.model_validate(data)
    except PydanticValidationError as e:
        return [
            SchemaValidationError(
                path=".".join(["root", *(str(part) for part in err["loc"])]),
                message=err["msg"],
                error_type=err["type"],
            )
            for err in e.errors()
        ]
    return []


def is_valid_schema_dict(data: Any) -> bool:
    """Check if a raw schema dictionary is valid."""
    return len(validate_schema_dict(data)) == 0


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
