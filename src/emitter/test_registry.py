"""Unit tests for generated declarations and the declaration registry."""

import pytest

from src.emitter.registry import (
    DeclarationNameCollisionError,
    DeclarationRegistry,
    EnumDecl,
    StructDecl,
)
from src.schema import SchemaContractError


class TestStructDecl:
    """Tests for struct rendering."""

    @pytest.mark.unit
    def test_render(self):
        """Fields render as `type name;` in order."""
        decl = StructDecl("OnChange", (("value", "std::string"), ("count", "int")))
        assert decl.render() == (
            "struct OnChange {\n  std::string value;\n  int count;\n};"
        )

    @pytest.mark.unit
    def test_referenced_types(self):
        """Referenced types follow field order."""
        decl = StructDecl("P", (("a", "int"), ("b", "PB")))
        assert decl.referenced_types == ("int", "PB")


class TestEnumDecl:
    """Tests for enum lookups."""

    @pytest.mark.unit
    def test_to_string(self):
        """Cases map back to original literals."""
        decl = EnumDecl("Mode", (("Single", "single"), ("Multiple", "multiple")))
        assert decl.to_string("Multiple") == "multiple"

    @pytest.mark.unit
    def test_to_string_unknown_case(self):
        """Unknown cases raise KeyError."""
        with pytest.raises(KeyError):
            EnumDecl("Mode").to_string("Single")


class TestDeclarationRegistry:
    """Tests for the ordered declaration registry."""

    @pytest.mark.unit
    def test_preserves_insertion_order(self):
        """Values come back in registration order."""
        registry = DeclarationRegistry()
        registry.register(StructDecl("B"))
        registry.register(EnumDecl("A"))
        assert registry.names() == ["B", "A"]
        assert len(registry) == 2
        assert "A" in registry

    @pytest.mark.unit
    def test_overwrite_keeps_position(self):
        """Re-registering replaces in place."""
        registry = DeclarationRegistry()
        registry.register(StructDecl("A", (("x", "int"),)))
        registry.register(StructDecl("B"))
        registry.register(StructDecl("A", (("y", "bool"),)))

        assert registry.names() == ["A", "B"]
        assert registry.get("A").fields == (("y", "bool"),)

    @pytest.mark.unit
    def test_overwrite_warning_mentions_position(self, caplog):
        """The overwrite warning says the old position is kept."""
        registry = DeclarationRegistry()
        registry.register(StructDecl("A", (("x", "int"),)))
        registry.register(StructDecl("A", (("y", "B"),)))
        assert "overwritten" in caplog.text
        assert "keeps its original position" in caplog.text

    @pytest.mark.unit
    def test_identical_reregistration_is_silent(self, caplog):
        """Registering an equal declaration again is not a collision."""
        registry = DeclarationRegistry(strict=True)
        registry.register(StructDecl("A", (("x", "int"),)))
        registry.register(StructDecl("A", (("x", "int"),)))
        assert "overwritten" not in caplog.text

    @pytest.mark.unit
    def test_strict_collision(self):
        """Strict registries reject conflicting declarations."""
        registry = DeclarationRegistry(strict=True)
        registry.register(StructDecl("A"))
        with pytest.raises(DeclarationNameCollisionError) as exc_info:
            registry.register(EnumDecl("A"))
        assert exc_info.value.name == "A"
        assert isinstance(exc_info.value, SchemaContractError)

    @pytest.mark.unit
    def test_get_missing(self):
        """Missing names return None."""
        assert DeclarationRegistry().get("Nope") is None
