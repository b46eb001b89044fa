"""Event emitter header generation.

Turns the events declared by schema components into a single C++ header
(``EventEmitters.h``). Each component becomes a ``<Name>EventEmitter`` class
deriving from ``ViewEventEmitter`` that declares:

- one struct per object payload (nested objects become nested structs),
- one ``enum class`` plus ``toString`` lookup per string enum property,
- one ``void <event>(...) const;`` method per event.

Example output:
    ```cpp
    class MyViewEventEmitter : public ViewEventEmitter {
     public:
      using ViewEventEmitter::ViewEventEmitter;

      struct OnChange {
        std::string value;
      };

      void onChange(OnChange value) const;
    };
    ```

The whole pass is a pure function of the schema. Any annotation kind
outside the closed union aborts the pass before an artifact exists.
"""

from dataclasses import dataclass
from typing import Sequence

from src.core import get_logger
from src.cpp import (
    generate_event_struct_name,
    get_cpp_type_for_annotation,
    get_include_for_annotation,
    indent,
    to_safe_cpp_string,
)
from src.schema import (
    AnnotationKind,
    ComponentShape,
    EventTypeShape,
    InvalidEventPropertyTypeError,
    NamedEventProperty,
    SchemaType,
    get_components,
)

from .registry import (
    Declaration,
    DeclarationRegistry,
    EnumCaseCollisionError,
    EnumDecl,
    StructDecl,
)

logger = get_logger("emitter")

OUTPUT_FILENAME = "EventEmitters.h"
EVENT_EMITTER_BASE = "ViewEventEmitter"
EVENT_EMITTER_BASE_INCLUDE = (
    "#include <react/renderer/components/view/ViewEventEmitter.h>"
)

GENERATOR_NAME = "event-emitter-codegen"

# Split so tools scanning for the marker do not flag this module itself.
GENERATED_MARKER = "@" + "generated"

FILE_HEADER = f"""/**
 * This code was generated by {GENERATOR_NAME}.
 *
 * Do not edit this file as changes may cause incorrect behavior and will be lost
 * once the code is regenerated.
 *
 * {GENERATED_MARKER} by {GENERATOR_NAME}
 */
#pragma once"""

NAMESPACE_OPEN = "namespace facebook {\nnamespace react {"
NAMESPACE_CLOSE = "} // namespace react\n} // namespace facebook"


# =============================================================================
# Declaration Synthesis
# =============================================================================


def generate_enum(
    registry: DeclarationRegistry,
    options: Sequence[str],
    name_parts: Sequence[str],
) -> str:
    """Register an enum for a string enum property.

    Case labels are the sanitized options, in option order; the rendered
    ``toString`` maps each case back to its original literal. Options that
    sanitize to the same label would yield duplicate enumerators, so they
    are rejected.

    Args:
        registry: The component's declaration registry.
        options: String literal options.
        name_parts: Path from the event name down to the property.

    Returns:
        str: The enum name.

    Raises:
        EnumCaseCollisionError: If two options share a case label.
    """
    enum_name = generate_event_struct_name(list(name_parts))
    cases = tuple((to_safe_cpp_string(option), option) for option in options)

    by_label: dict[str, list[str]] = {}
    for case_name, option in cases:
        by_label.setdefault(case_name, []).append(option)
    for case_name, literals in by_label.items():
        if len(literals) > 1:
            logger.error(
                f"{enum_name}: options {literals} collide on case {case_name}"
            )
            raise EnumCaseCollisionError(enum_name, case_name, tuple(literals))

    registry.register(EnumDecl(name=enum_name, cases=cases))
    return enum_name


def generate_struct(
    registry: DeclarationRegistry,
    component_name: str,
    name_parts: Sequence[str],
    properties: Sequence[NamedEventProperty],
) -> str:
    """Register a struct for an object payload, nested types first.

    Nested objects and string enums are registered while their field type
    is resolved, so they always precede this struct in the registry.

    Args:
        registry: The component's declaration registry.
        component_name: Owning component, used for log context only.
        name_parts: Path from the event name down to this object.
        properties: The object's properties in declaration order.

    Returns:
        str: The struct name.

    Raises:
        InvalidEventPropertyTypeError: If a property kind is outside the union.
    """
    struct_name = generate_event_struct_name(list(name_parts))
    fields = tuple(
        (prop.name, _resolve_field_type(registry, component_name, name_parts, prop))
        for prop in properties
    )
    registry.register(StructDecl(name=struct_name, fields=fields))
    return struct_name


def _resolve_field_type(
    registry: DeclarationRegistry,
    component_name: str,
    name_parts: Sequence[str],
    prop: NamedEventProperty,
) -> str:
    """Resolve a property's C++ type, synthesizing nested declarations."""
    annotation = prop.type_annotation
    kind = getattr(annotation, "type", None)

    match kind:
        case (
            AnnotationKind.BOOLEAN
            | AnnotationKind.STRING
            | AnnotationKind.INT32
            | AnnotationKind.DOUBLE
            | AnnotationKind.FLOAT
            | AnnotationKind.MIXED
        ):
            return get_cpp_type_for_annotation(kind)
        case AnnotationKind.OBJECT:
            return generate_struct(
                registry,
                component_name,
                [*name_parts, prop.name],
                annotation.properties,
            )
        case AnnotationKind.STRING_ENUM:
            return generate_enum(registry, annotation.options, [*name_parts, prop.name])
        case _:
            logger.error(
                f"{component_name}: property '{prop.name}' has invalid type {kind}"
            )
            raise InvalidEventPropertyTypeError(kind)


# =============================================================================
# Include Collection
# =============================================================================


def collect_includes(properties: Sequence[NamedEventProperty]) -> set[str]:
    """Collect the include directives a payload's property tree needs.

    Args:
        properties: Payload properties, searched recursively.

    Returns:
        set[str]: Include directives (e.g. "#include <folly/dynamic.h>").

    Raises:
        InvalidEventPropertyTypeError: If a property kind is outside the union.
    """
    includes: set[str] = set()
    for prop in properties:
        annotation = prop.type_annotation
        kind = getattr(annotation, "type", None)
        if kind == AnnotationKind.OBJECT:
            includes |= collect_includes(annotation.properties)
            continue
        include = get_include_for_annotation(kind)
        if include:
            includes.add(include)
    return includes


# =============================================================================
# Component Emission
# =============================================================================


@dataclass(frozen=True)
class ComponentEmitterUnit:
    """One component's generated emitter class.

    Attributes:
        component_name: Schema component name.
        declarations: Structs and enums in emission order.
        methods: Event method declarations in event order.
    """

    component_name: str
    declarations: tuple[Declaration, ...] = ()
    methods: tuple[str, ...] = ()

    @property
    def class_name(self) -> str:
        return f"{self.component_name}EventEmitter"

    def render(self) -> str:
        lines = [
            f"class {self.class_name} : public {EVENT_EMITTER_BASE} {{",
            " public:",
            f"  using {EVENT_EMITTER_BASE}::{EVENT_EMITTER_BASE};",
        ]
        sections = (
            "\n\n".join(declaration.render() for declaration in self.declarations),
            "\n\n".join(self.methods),
        )
        for section in sections:
            if section:
                lines.append("")
                lines.append("  " + indent(section, 2))
        lines.append("};")
        return "\n".join(lines)


def generate_event_method(event: EventTypeShape) -> str:
    """Declare the emitter method for one event."""
    if event.payload is not None:
        struct_name = generate_event_struct_name([event.name])
        return f"void {event.name}({struct_name} value) const;"
    return f"void {event.name}() const;"


def generate_component(
    component_name: str,
    component: ComponentShape,
    strict_names: bool = False,
) -> ComponentEmitterUnit:
    """Synthesize one component's declarations and event methods.

    Args:
        component_name: Schema component name.
        component: The component shape.
        strict_names: Raise on declaration name collisions instead of
            overwriting.

    Returns:
        ComponentEmitterUnit ready to render.
    """
    registry = DeclarationRegistry(strict=strict_names)

    for event in component.events:
        if event.payload is not None:
            generate_struct(
                registry, component_name, [event.name], event.payload.properties
            )

    methods = tuple(generate_event_method(event) for event in component.events)
    logger.debug(
        f"{component_name}: {len(registry)} declarations, {len(methods)} events"
    )
    return ComponentEmitterUnit(
        component_name=component_name,
        declarations=tuple(registry.values()),
        methods=methods,
    )


# =============================================================================
# File Assembly
# =============================================================================


def assemble_file(
    units: Sequence[ComponentEmitterUnit],
    includes: set[str] | frozenset[str] = frozenset(),
) -> str:
    """Render the complete header.

    Extra includes are sorted so the output does not depend on set order.
    """
    include_lines = [EVENT_EMITTER_BASE_INCLUDE, *sorted(includes)]
    parts = [
        FILE_HEADER,
        "\n".join(include_lines),
        NAMESPACE_OPEN,
        *(unit.render() for unit in units),
        NAMESPACE_CLOSE,
    ]
    return "\n\n".join(parts) + "\n"


def generate(
    library_name: str,
    schema: SchemaType,
    package_name: str | None = None,
    assume_nonnull: bool = False,
    *,
    strict_names: bool = False,
) -> dict[str, str]:
    """Generate the event emitter header for every component in a schema.

    Args:
        library_name: Library identifier (informational).
        schema: The validated schema.
        package_name: Optional package identifier (informational).
        assume_nonnull: Non-nullable primitives flag (informational).
        strict_names: Raise DeclarationNameCollisionError on name collisions.

    Returns:
        dict mapping the output file name to its contents.

    Raises:
        InvalidEventPropertyTypeError: On any kind outside the closed union.
        DeclarationNameCollisionError: On collisions when strict_names is set.

    Example:
        >>> files = generate("MyLibrary", schema)
        >>> list(files)
        ['EventEmitters.h']
    """
    logger.debug(
        f"Generating event emitters for library={library_name} "
        f"package={package_name} assume_nonnull={assume_nonnull}"
    )
    components = get_components(schema)

    includes: set[str] = set()
    units: list[ComponentEmitterUnit] = []
    for component_name, component in components.items():
        for event in component.events:
            if event.payload is not None:
                includes |= collect_includes(event.payload.properties)
        units.append(generate_component(component_name, component, strict_names))

    logger.info(
        f"Generated {OUTPUT_FILENAME} for {len(units)} components of {library_name}"
    )
    return {OUTPUT_FILENAME: assemble_file(units, includes)}


__all__ = [
    "GENERATED_MARKER",
    "GENERATOR_NAME",
    "OUTPUT_FILENAME",
    "ComponentEmitterUnit",
    "assemble_file",
    "collect_includes",
    "generate",
    "generate_component",
    "generate_enum",
    "generate_event_method",
    "generate_struct",
]
