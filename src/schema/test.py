"""Unit tests for the Schema module."""

import json

import pytest
from pydantic import ValidationError

from src.schema import (
    PRIMITIVE_KINDS,
    AnnotationKind,
    EventTypeShape,
    InvalidEventPropertyTypeError,
    NamedEventProperty,
    ObjectTypeAnnotation,
    SchemaContractError,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
    get_components,
    is_valid_schema_dict,
    load_schema,
    parse_schema,
    validate_schema_dict,
)


class TestAnnotationKind:
    """Tests for the closed annotation kind union."""

    @pytest.mark.unit
    def test_has_eight_kinds(self):
        """Six primitives plus string enum and object."""
        assert len(AnnotationKind) == 8

    @pytest.mark.unit
    def test_primitive_kinds(self):
        """String enums and objects are not primitives."""
        assert len(PRIMITIVE_KINDS) == 6
        assert AnnotationKind.STRING_ENUM not in PRIMITIVE_KINDS
        assert AnnotationKind.OBJECT not in PRIMITIVE_KINDS

    @pytest.mark.unit
    def test_kind_compares_equal_to_raw_type(self):
        """Kinds compare equal to the raw ``type`` strings of the models."""
        assert StringTypeAnnotation().type == AnnotationKind.STRING


class TestParseSchema:
    """Tests for schema parsing."""

    @pytest.mark.unit
    def test_parses_sample(self, sample_schema):
        """Sample schema parses with modules in declared order."""
        assert list(sample_schema.modules) == [
            "MyViewNativeComponent",
            "NativeSampleTurboModule",
            "SliderNativeComponent",
        ]

    @pytest.mark.unit
    def test_camel_case_keys(self, sample_schema):
        """typeAnnotation and bubblingType map to snake_case attributes."""
        view = sample_schema.modules["MyViewNativeComponent"].components["MyView"]
        on_change = view.events[1]
        assert on_change.bubbling_type == "bubble"
        assert on_change.payload is not None
        prop = on_change.payload.properties[0]
        assert prop.name == "value"
        assert isinstance(prop.type_annotation, StringTypeAnnotation)

    @pytest.mark.unit
    def test_event_without_argument_has_no_payload(self, sample_schema):
        """Events without an argument expose payload None."""
        view = sample_schema.modules["MyViewNativeComponent"].components["MyView"]
        assert view.events[0].payload is None

    @pytest.mark.unit
    def test_nested_objects_parse(self, sample_schema):
        """Objects nest to arbitrary depth."""
        slider = sample_schema.modules["SliderNativeComponent"].components["Slider"]
        meta = slider.events[0].payload.properties[2]
        assert isinstance(meta.type_annotation, ObjectTypeAnnotation)
        direction = meta.type_annotation.properties[1]
        assert isinstance(direction.type_annotation, StringEnumTypeAnnotation)
        assert direction.type_annotation.options == ["left-to-right", "right-to-left"]

    @pytest.mark.unit
    def test_unknown_annotation_kind_rejected(self, sample_schema_dict):
        """Kinds outside the closed union fail validation."""
        view = sample_schema_dict["modules"]["MyViewNativeComponent"]
        prop = view["components"]["MyView"]["events"][1]["typeAnnotation"][
            "argument"
        ]["properties"][0]
        prop["typeAnnotation"]["type"] = "Int64TypeAnnotation"

        with pytest.raises(ValidationError):
            parse_schema(sample_schema_dict)

    @pytest.mark.unit
    def test_snake_case_construction(self):
        """Models can be built in Python with attribute names."""
        prop = NamedEventProperty(name="value", type_annotation=StringTypeAnnotation())
        event = EventTypeShape(name="onLoad")
        assert prop.type_annotation.type == "StringTypeAnnotation"
        assert event.payload is None
        assert event.bubbling_type == "direct"


class TestGetComponents:
    """Tests for component collection across modules."""

    @pytest.mark.unit
    def test_only_component_modules_contribute(self, sample_schema):
        """NativeModule entries are skipped."""
        assert list(get_components(sample_schema)) == ["MyView", "Slider", "EmptyView"]

    @pytest.mark.unit
    def test_component_module_without_components(self):
        """A component module with no components contributes nothing."""
        schema = parse_schema({"modules": {"Empty": {"type": "Component"}}})
        assert get_components(schema) == {}

    @pytest.mark.unit
    def test_later_module_replaces_in_place(self):
        """Duplicate component names keep the first position, last definition."""
        schema = parse_schema(
            {
                "modules": {
                    "A": {
                        "type": "Component",
                        "components": {"First": {}, "Second": {}},
                    },
                    "B": {
                        "type": "Component",
                        "components": {"First": {"events": [{"name": "onTap"}]}},
                    },
                }
            }
        )
        components = get_components(schema)
        assert list(components) == ["First", "Second"]
        assert components["First"].events[0].name == "onTap"


class TestLoadSchema:
    """Tests for loading schemas from disk."""

    @pytest.mark.integration
    def test_load_from_file(self, schema_file):
        """load_schema reads and validates JSON."""
        schema = load_schema(schema_file)
        assert "MyViewNativeComponent" in schema.modules

    @pytest.mark.integration
    def test_invalid_json_raises(self, tmp_path):
        """Malformed JSON surfaces as a decode error."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_schema(path)


class TestValidateSchemaDict:
    """Tests for the non-raising validation report."""

    @pytest.mark.unit
    def test_valid_schema_has_no_errors(self, sample_schema_dict):
        """Valid schema yields an empty report."""
        assert validate_schema_dict(sample_schema_dict) == []
        assert is_valid_schema_dict(sample_schema_dict)

    @pytest.mark.unit
    def test_missing_module_type(self):
        """Missing required fields are reported with a path."""
        errors = validate_schema_dict({"modules": {"Broken": {}}})
        assert len(errors) == 1
        assert errors[0].path == "root.modules.Broken.type"
        assert errors[0].error_type == "missing"

    @pytest.mark.unit
    def test_non_dict_input(self):
        """Non-mapping input is reported, not raised."""
        assert not is_valid_schema_dict(["not", "a", "schema"])


class TestErrors:
    """Tests for contract error types."""

    @pytest.mark.unit
    def test_invalid_property_type_message(self):
        """Error message names the offending kind."""
        err = InvalidEventPropertyTypeError("Int64TypeAnnotation")
        assert err.type_name == "Int64TypeAnnotation"
        assert "Int64TypeAnnotation" in str(err)
        assert isinstance(err, SchemaContractError)
