"""Generated declarations and the per-component declaration registry."""

from dataclasses import dataclass, field

from src.core import get_logger
from src.cpp import to_cpp_string_literal
from src.schema import SchemaContractError

logger = get_logger("emitter.registry")


class DeclarationNameCollisionError(SchemaContractError):
    """Raised in strict mode when two different declarations share a name.

    Attributes:
        name: The contested declaration name.
    """

    def __init__(self, name: str):
        super().__init__(
            f"Declaration '{name}' was generated twice with different contents"
        )
        self.name = name


class EnumCaseCollisionError(SchemaContractError):
    """Raised when two options of one string enum sanitize to the same case.

    Attributes:
        enum_name: The enum being generated.
        case_name: The shared case label.
        options: The original literals that produced it.
    """

    def __init__(self, enum_name: str, case_name: str, options: tuple[str, ...]):
        literals = ", ".join(repr(option) for option in options)
        super().__init__(
            f"Enum '{enum_name}' options {literals} all map to case '{case_name}'"
        )
        self.enum_name = enum_name
        self.case_name = case_name
        self.options = options


@dataclass(frozen=True)
class StructDecl:
    """A generated C++ struct.

    Attributes:
        name: Struct name.
        fields: (field_name, field_type_name) pairs in declaration order.
    """

    name: str
    fields: tuple[tuple[str, str], ...] = ()

    @property
    def referenced_types(self) -> tuple[str, ...]:
        return tuple(type_name for _, type_name in self.fields)

    def render(self) -> str:
        lines = [f"struct {self.name} {{"]
        for field_name, type_name in self.fields:
            lines.append(f"  {type_name} {field_name};")
        lines.append("};")
        return "\n".join(lines)


@dataclass(frozen=True)
class EnumDecl:
    """A generated C++ enum class with its reverse string lookup.

    Attributes:
        name: Enum name.
        cases: (case_name, original_literal) pairs in option order.
    """

    name: str
    cases: tuple[tuple[str, str], ...] = ()

    @property
    def referenced_types(self) -> tuple[str, ...]:
        return ()

    def to_string(self, case_name: str) -> str:
        """Resolve a case back to its original literal, like the C++ toString."""
        for name, original in self.cases:
            if name == case_name:
                return original
        raise KeyError(f"{self.name} has no case '{case_name}'")

    def render(self) -> str:
        lines = [f"enum class {self.name} {{"]
        if self.cases:
            lines.append(",\n".join(f"  {case_name}" for case_name, _ in self.cases))
        lines.append("};")
        lines.append("")
        lines.append(f"static char const *toString(const {self.name} value) {{")
        lines.append("  switch (value) {")
        for case_name, original in self.cases:
            lines.append(
                f"    case {self.name}::{case_name}: "
                f"return {to_cpp_string_literal(original)};"
            )
        lines.append("  }")
        lines.append("}")
        return "\n".join(lines)


Declaration = StructDecl | EnumDecl


@dataclass
class DeclarationRegistry:
    """Insertion-ordered store of one component's generated declarations.

    Registration order is emission order: synthesizers register nested
    types before the struct that references them. Registering a name again
    replaces the declaration in place (last write wins). A replacement with
    different contents logs a warning, or raises in strict mode.

    Example:
        >>> registry = DeclarationRegistry()
        >>> registry.register(StructDecl("OnLoad"))
        >>> registry.names()
        ['OnLoad']
    """

    strict: bool = False
    _declarations: dict[str, Declaration] = field(default_factory=dict)

    def register(self, declaration: Declaration) -> None:
        existing = self._declarations.get(declaration.name)
        if existing is not None and existing != declaration:
            if self.strict:
                raise DeclarationNameCollisionError(declaration.name)
            logger.warning(
                f"Declaration '{declaration.name}' overwritten by a different "
                "declaration with the same name; it keeps its original position "
                "and may now precede declarations it references"
            )
        self._declarations[declaration.name] = declaration
        logger.debug(f"Registered {type(declaration).__name__} {declaration.name}")

    def get(self, name: str) -> Declaration | None:
        return self._declarations.get(name)

    def names(self) -> list[str]:
        return list(self._declarations)

    def values(self) -> list[Declaration]:
        return list(self._declarations.values())

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)


__all__ = [
    "Declaration",
    "DeclarationNameCollisionError",
    "DeclarationRegistry",
    "EnumCaseCollisionError",
    "EnumDecl",
    "StructDecl",
]
