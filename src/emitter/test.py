"""Unit tests for event emitter header generation."""

import re
from types import SimpleNamespace

import pytest

from src.emitter import (
    GENERATED_MARKER,
    GENERATOR_NAME,
    OUTPUT_FILENAME,
    ComponentEmitterUnit,
    DeclarationNameCollisionError,
    DeclarationRegistry,
    EnumCaseCollisionError,
    EnumDecl,
    StructDecl,
    assemble_file,
    collect_includes,
    generate,
    generate_component,
    generate_enum,
    generate_event_method,
    generate_struct,
)
from src.schema import (
    ComponentShape,
    EventTypeAnnotationShape,
    EventTypeShape,
    InvalidEventPropertyTypeError,
    MixedTypeAnnotation,
    NamedEventProperty,
    ObjectTypeAnnotation,
    SchemaContractError,
    SchemaModule,
    SchemaType,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
    parse_schema,
)


def _prop(name, annotation):
    return NamedEventProperty(name=name, type_annotation=annotation)


def _event(name, properties=None):
    argument = None if properties is None else ObjectTypeAnnotation(properties=properties)
    return EventTypeShape(
        name=name, type_annotation=EventTypeAnnotationShape(argument=argument)
    )


def _bogus_prop(name="broken", kind="Int64TypeAnnotation"):
    """A property whose annotation kind is outside the closed union."""
    prop = _prop(name, StringTypeAnnotation())
    prop.type_annotation = SimpleNamespace(type=kind)
    return prop


def _declaration_index(text, keyword, name):
    match = re.search(rf"^\s*{keyword} {name} {{", text, re.MULTILINE)
    assert match is not None, f"{keyword} {name} not declared"
    return match.start()


# =============================================================================
# Enum synthesis
# =============================================================================


class TestGenerateEnum:
    """Tests for string enum synthesis."""

    @pytest.mark.unit
    def test_registers_enum(self):
        """Enum is named from the path and registered."""
        registry = DeclarationRegistry()
        name = generate_enum(registry, ["single", "multiple"], ["onSelect", "mode"])

        assert name == "OnSelectMode"
        assert registry.get(name) == EnumDecl(
            name="OnSelectMode",
            cases=(("Single", "single"), ("Multiple", "multiple")),
        )

    @pytest.mark.unit
    def test_round_trip(self):
        """Every sanitized case maps back to its original literal."""
        options = ["single", "left-to-right", "4k", "with space"]
        registry = DeclarationRegistry()
        decl = registry.get(generate_enum(registry, options, ["onPick", "value"]))

        for (case_name, _), option in zip(decl.cases, options):
            assert decl.to_string(case_name) == option

    @pytest.mark.unit
    def test_rendered_lookup_covers_every_case_in_order(self):
        """The toString switch has one branch per case, in option order."""
        registry = DeclarationRegistry()
        name = generate_enum(registry, ["single", "multiple"], ["onSelect", "mode"])
        text = registry.get(name).render()

        assert text == (
            "enum class OnSelectMode {\n"
            "  Single,\n"
            "  Multiple\n"
            "};\n"
            "\n"
            "static char const *toString(const OnSelectMode value) {\n"
            "  switch (value) {\n"
            '    case OnSelectMode::Single: return "single";\n'
            '    case OnSelectMode::Multiple: return "multiple";\n'
            "  }\n"
            "}"
        )

    @pytest.mark.unit
    def test_empty_options(self):
        """No options yields an enum without cases and a switch without branches."""
        registry = DeclarationRegistry()
        text = registry.get(generate_enum(registry, [], ["onPick", "kind"])).render()

        assert "enum class OnPickKind {\n};" in text
        assert "case" not in text
        assert "switch (value) {\n  }" in text

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "options, case_name",
        [
            (["a-b", "a b"], "AB"),
            (["x", "a.b", "a-b"], "AB"),
            (["1", "_1"], "_1"),
            (["same", "same"], "Same"),
        ],
    )
    def test_colliding_cases_rejected(self, options, case_name):
        """Options sharing a case label abort instead of emitting duplicates."""
        registry = DeclarationRegistry()
        with pytest.raises(EnumCaseCollisionError) as exc_info:
            generate_enum(registry, options, ["onX", "m"])

        assert exc_info.value.enum_name == "OnXM"
        assert exc_info.value.case_name == case_name
        assert isinstance(exc_info.value, SchemaContractError)
        assert "OnXM" not in registry

    @pytest.mark.unit
    def test_colliding_cases_abort_generation(self):
        """A collision anywhere in the schema aborts the whole pass."""
        mode = StringEnumTypeAnnotation(options=["a-b", "a b"])
        component = ComponentShape(events=[_event("onPick", [_prop("mode", mode)])])
        schema = SchemaType(
            modules={
                "M": SchemaModule(type="Component", components={"Picker": component})
            }
        )
        with pytest.raises(EnumCaseCollisionError, match="OnPickMode"):
            generate("Lib", schema)

    @pytest.mark.unit
    def test_literal_is_escaped(self):
        """Quotes in options stay valid C++ literals."""
        registry = DeclarationRegistry()
        text = registry.get(generate_enum(registry, ['a"b'], ["onX", "y"])).render()
        assert 'return "a\\"b";' in text


# =============================================================================
# Struct synthesis
# =============================================================================


class TestGenerateStruct:
    """Tests for recursive struct synthesis."""

    @pytest.mark.unit
    def test_primitive_fields(self):
        """Primitive fields map through the C++ type table, in order."""
        registry = DeclarationRegistry()
        name = generate_struct(
            registry,
            "MyView",
            ["onChange"],
            [
                _prop("value", StringTypeAnnotation()),
                _prop("extra", MixedTypeAnnotation()),
            ],
        )

        assert name == "OnChange"
        assert registry.get(name) == StructDecl(
            name="OnChange",
            fields=(("value", "std::string"), ("extra", "folly::dynamic")),
        )

    @pytest.mark.unit
    def test_children_registered_before_parent(self):
        """Nested objects and enums precede the struct that uses them."""
        registry = DeclarationRegistry()
        generate_struct(
            registry,
            "Slider",
            ["onSlide"],
            [
                _prop(
                    "meta",
                    ObjectTypeAnnotation(
                        properties=[
                            _prop(
                                "direction",
                                StringEnumTypeAnnotation(options=["up", "down"]),
                            )
                        ]
                    ),
                ),
                _prop("unit", StringEnumTypeAnnotation(options=["px"])),
            ],
        )

        assert registry.names() == [
            "OnSlideMetaDirection",
            "OnSlideMeta",
            "OnSlideUnit",
            "OnSlide",
        ]
        assert registry.get("OnSlide").fields == (
            ("meta", "OnSlideMeta"),
            ("unit", "OnSlideUnit"),
        )

    @pytest.mark.unit
    def test_empty_payload(self):
        """An object with no properties becomes an empty struct."""
        registry = DeclarationRegistry()
        generate_struct(registry, "MyView", ["onPing"], [])
        assert registry.get("OnPing").render() == "struct OnPing {\n};"

    @pytest.mark.unit
    def test_invalid_kind_fails_fast(self):
        """Unknown kinds abort synthesis with the kind in the message."""
        registry = DeclarationRegistry()
        with pytest.raises(InvalidEventPropertyTypeError, match="Int64TypeAnnotation"):
            generate_struct(registry, "MyView", ["onChange"], [_bogus_prop()])
        assert "OnChange" not in registry

    @pytest.mark.unit
    def test_invalid_nested_kind_fails_fast(self):
        """Unknown kinds deep in the tree also abort."""
        nested = ObjectTypeAnnotation(properties=[_bogus_prop()])
        with pytest.raises(InvalidEventPropertyTypeError):
            generate_struct(
                DeclarationRegistry(), "MyView", ["onChange"], [_prop("inner", nested)]
            )


# =============================================================================
# Include collection
# =============================================================================


class TestCollectIncludes:
    """Tests for include collection."""

    @pytest.mark.unit
    def test_no_includes_for_builtins(self):
        """Built-in types need no includes."""
        assert collect_includes([_prop("value", StringTypeAnnotation())]) == set()

    @pytest.mark.unit
    def test_nested_mixed_deduplicated(self):
        """Mixed fields at any depth collapse to one include."""
        properties = [
            _prop("a", MixedTypeAnnotation()),
            _prop(
                "b",
                ObjectTypeAnnotation(properties=[_prop("c", MixedTypeAnnotation())]),
            ),
        ]
        assert collect_includes(properties) == {"#include <folly/dynamic.h>"}

    @pytest.mark.unit
    def test_invalid_kind_raises(self):
        """Unknown kinds are rejected while collecting includes."""
        with pytest.raises(InvalidEventPropertyTypeError):
            collect_includes([_bogus_prop(kind="ColorPrimitive")])


# =============================================================================
# Component emission
# =============================================================================


class TestGenerateComponent:
    """Tests for per-component emission."""

    @pytest.mark.unit
    def test_zero_events(self):
        """A component without events declares nothing."""
        unit = generate_component("EmptyView", ComponentShape())

        assert unit.declarations == ()
        assert unit.methods == ()
        assert unit.render() == (
            "class EmptyViewEventEmitter : public ViewEventEmitter {\n"
            " public:\n"
            "  using ViewEventEmitter::ViewEventEmitter;\n"
            "};"
        )

    @pytest.mark.unit
    def test_event_without_payload(self):
        """Events without payload take no parameters."""
        assert generate_event_method(_event("onLoad")) == "void onLoad() const;"

    @pytest.mark.unit
    def test_event_with_payload(self):
        """Events with payload take exactly the top-level struct."""
        event = _event("onChange", [_prop("value", StringTypeAnnotation())])
        assert generate_event_method(event) == "void onChange(OnChange value) const;"

    @pytest.mark.unit
    def test_example_component(self, sample_schema):
        """MyView renders structs, enums and methods in order."""
        component = sample_schema.modules["MyViewNativeComponent"].components["MyView"]
        unit = generate_component("MyView", component)

        assert [decl.name for decl in unit.declarations] == [
            "OnChange",
            "OnSelectMode",
            "OnSelect",
        ]
        assert unit.render() == (
            "class MyViewEventEmitter : public ViewEventEmitter {\n"
            " public:\n"
            "  using ViewEventEmitter::ViewEventEmitter;\n"
            "\n"
            "  struct OnChange {\n"
            "    std::string value;\n"
            "  };\n"
            "\n"
            "  enum class OnSelectMode {\n"
            "    Single,\n"
            "    Multiple\n"
            "  };\n"
            "\n"
            "  static char const *toString(const OnSelectMode value) {\n"
            "    switch (value) {\n"
            '      case OnSelectMode::Single: return "single";\n'
            '      case OnSelectMode::Multiple: return "multiple";\n'
            "    }\n"
            "  }\n"
            "\n"
            "  struct OnSelect {\n"
            "    OnSelectMode mode;\n"
            "  };\n"
            "\n"
            "  void onLoad() const;\n"
            "\n"
            "  void onChange(OnChange value) const;\n"
            "\n"
            "  void onSelect(OnSelect value) const;\n"
            "};"
        )

    @pytest.mark.unit
    def test_registry_is_per_component(self):
        """Equal names in different components do not interfere."""
        component = ComponentShape(
            events=[_event("onChange", [_prop("value", StringTypeAnnotation())])]
        )
        first = generate_component("A", component)
        second = generate_component("B", component)
        assert first.declarations == second.declarations

    @pytest.mark.unit
    def test_collision_overwrites_by_default(self, caplog):
        """Colliding names keep the first position and the last declaration."""
        component = ComponentShape(
            events=[
                _event("on-change", [_prop("value", StringTypeAnnotation())]),
                _event("onChange", [_prop("count", MixedTypeAnnotation())]),
            ]
        )
        unit = generate_component("MyView", component)

        assert [decl.name for decl in unit.declarations] == ["OnChange"]
        assert unit.declarations[0].fields == (("count", "folly::dynamic"),)
        assert "overwritten" in caplog.text

    @pytest.mark.unit
    def test_collision_raises_in_strict_mode(self):
        """Strict naming turns collisions into errors."""
        component = ComponentShape(
            events=[
                _event("on-change", [_prop("value", StringTypeAnnotation())]),
                _event("onChange", [_prop("count", MixedTypeAnnotation())]),
            ]
        )
        with pytest.raises(DeclarationNameCollisionError, match="OnChange"):
            generate_component("MyView", component, strict_names=True)

    @pytest.mark.unit
    def test_collision_overwrite_can_precede_its_references(self, caplog):
        """An in-place overwrite may land before a type it now references."""
        component = ComponentShape(
            events=[
                _event("onA", [_prop("b", ObjectTypeAnnotation())]),
                _event(
                    "onAB", [_prop("c", StringEnumTypeAnnotation(options=["x"]))]
                ),
            ]
        )
        unit = generate_component("MyView", component)
        names = [decl.name for decl in unit.declarations]

        assert names == ["OnAB", "OnA", "OnABC"]
        assert unit.declarations[0].fields == (("c", "OnABC"),)
        assert "keeps its original position" in caplog.text

        with pytest.raises(DeclarationNameCollisionError, match="OnAB"):
            generate_component("MyView", component, strict_names=True)


# =============================================================================
# File assembly
# =============================================================================


class TestGenerate:
    """Tests for whole-file generation."""

    @pytest.mark.unit
    def test_single_output_file(self, sample_schema):
        """Output maps exactly one fixed file name."""
        files = generate("SampleLibrary", sample_schema)
        assert list(files) == [OUTPUT_FILENAME]

    @pytest.mark.unit
    def test_components_in_schema_order(self, sample_schema):
        """Emitter classes follow module and component order."""
        text = generate("SampleLibrary", sample_schema)[OUTPUT_FILENAME]
        positions = [
            text.index(f"class {name}EventEmitter")
            for name in ("MyView", "Slider", "EmptyView")
        ]
        assert positions == sorted(positions)

    @pytest.mark.unit
    def test_includes_collected_once(self, sample_schema):
        """Extra includes appear once, after the base include."""
        text = generate("SampleLibrary", sample_schema)[OUTPUT_FILENAME]
        assert text.count("#include <folly/dynamic.h>") == 1
        assert text.index("ViewEventEmitter.h>") < text.index("folly/dynamic.h>")

    @pytest.mark.unit
    def test_referenced_types_declared_first(self, sample_schema):
        """Every struct field type is declared before the struct."""
        text = generate("SampleLibrary", sample_schema)[OUTPUT_FILENAME]
        slider = sample_schema.modules["SliderNativeComponent"].components["Slider"]
        unit = generate_component("Slider", slider)
        declared = {decl.name: decl for decl in unit.declarations}

        for decl in unit.declarations:
            if not isinstance(decl, StructDecl):
                continue
            parent_at = _declaration_index(text, "struct", decl.name)
            for type_name in decl.referenced_types:
                if type_name in declared:
                    keyword = (
                        "enum class"
                        if isinstance(declared[type_name], EnumDecl)
                        else "struct"
                    )
                    assert _declaration_index(text, keyword, type_name) < parent_at

    @pytest.mark.unit
    def test_deterministic(self, sample_schema_dict):
        """Two runs over the same schema are byte-identical."""
        first = generate("SampleLibrary", parse_schema(sample_schema_dict))
        second = generate("SampleLibrary", parse_schema(sample_schema_dict))
        assert first == second

    @pytest.mark.unit
    def test_pass_through_options_do_not_change_output(self, sample_schema):
        """Package name and nullability leave the output unchanged."""
        plain = generate("SampleLibrary", sample_schema)
        tuned = generate(
            "SampleLibrary", sample_schema, package_name="com.sample", assume_nonnull=True
        )
        assert plain == tuned

    @pytest.mark.unit
    def test_invalid_kind_aborts_whole_pass(self, sample_schema):
        """No artifact is produced when any property is invalid."""
        view = sample_schema.modules["MyViewNativeComponent"].components["MyView"]
        view.events[1].payload.properties[0].type_annotation = SimpleNamespace(
            type="Int64TypeAnnotation"
        )
        with pytest.raises(InvalidEventPropertyTypeError):
            generate("SampleLibrary", sample_schema)

    @pytest.mark.unit
    def test_empty_schema(self):
        """A schema without components still yields a well-formed header."""
        text = generate("Empty", parse_schema({"modules": {}}))[OUTPUT_FILENAME]
        assert text.startswith("/**\n")
        assert "#pragma once" in text
        assert "namespace react {\n\n} // namespace react" in text
        assert text.endswith("} // namespace facebook\n")


class TestAssembleFile:
    """Tests for header assembly."""

    @pytest.mark.unit
    def test_layout(self):
        """Header, includes, namespaces and units appear in order."""
        text = assemble_file(
            [ComponentEmitterUnit("A"), ComponentEmitterUnit("B")],
            {"#include <z.h>", "#include <a.h>"},
        )
        assert text.index("#pragma once") < text.index("#include <react/")
        assert text.index("#include <a.h>") < text.index("#include <z.h>")
        assert text.index("namespace facebook {") < text.index("class AEventEmitter")
        assert text.index("class AEventEmitter") < text.index("class BEventEmitter")
        assert text.index("class BEventEmitter") < text.index("} // namespace react")

    @pytest.mark.unit
    def test_header_names_generator(self):
        """The banner carries the generated marker and the generator name."""
        text = assemble_file([])
        assert f"{GENERATED_MARKER} by {GENERATOR_NAME}\n" in text
        assert GENERATED_MARKER == "\x40generated"
