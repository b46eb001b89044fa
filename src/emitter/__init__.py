"""Event emitter header generation for schema components.

Example:
    >>> from src.emitter import generate
    >>> from src.schema import load_schema
    >>> files = generate("MyLibrary", load_schema("schema.json"))
    >>> print(files["EventEmitters.h"])
"""

from .lib import (
    GENERATED_MARKER,
    GENERATOR_NAME,
    OUTPUT_FILENAME,
    ComponentEmitterUnit,
    assemble_file,
    collect_includes,
    generate,
    generate_component,
    generate_enum,
    generate_event_method,
    generate_struct,
)
from .registry import (
    Declaration,
    DeclarationNameCollisionError,
    DeclarationRegistry,
    EnumCaseCollisionError,
    EnumDecl,
    StructDecl,
)

__all__ = [
    # Generation
    "GENERATED_MARKER",
    "GENERATOR_NAME",
    "OUTPUT_FILENAME",
    "generate",
    "assemble_file",
    "generate_component",
    "generate_event_method",
    "ComponentEmitterUnit",
    # Synthesis
    "generate_struct",
    "generate_enum",
    "collect_includes",
    # Declarations
    "Declaration",
    "DeclarationRegistry",
    "DeclarationNameCollisionError",
    "EnumCaseCollisionError",
    "EnumDecl",
    "StructDecl",
]
