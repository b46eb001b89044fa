"""Unit tests for the C++ helper functions."""

import pytest

from src.cpp import (
    generate_event_struct_name,
    get_cpp_type_for_annotation,
    get_include_for_annotation,
    indent,
    to_cpp_string_literal,
    to_safe_cpp_string,
    upper_case_first,
)
from src.schema import AnnotationKind, InvalidEventPropertyTypeError


class TestGetCppTypeForAnnotation:
    """Tests for primitive type mapping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("BooleanTypeAnnotation", "bool"),
            ("StringTypeAnnotation", "std::string"),
            ("Int32TypeAnnotation", "int"),
            ("DoubleTypeAnnotation", "double"),
            ("FloatTypeAnnotation", "Float"),
            ("MixedTypeAnnotation", "folly::dynamic"),
        ],
    )
    def test_primitive_mapping(self, kind, expected):
        """Every primitive kind maps to a C++ type."""
        assert get_cpp_type_for_annotation(kind) == expected

    @pytest.mark.unit
    def test_accepts_enum_members(self):
        """AnnotationKind members are accepted as well as raw strings."""
        assert get_cpp_type_for_annotation(AnnotationKind.INT32) == "int"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind",
        ["ObjectTypeAnnotation", "StringEnumTypeAnnotation", "Int64TypeAnnotation"],
    )
    def test_non_primitive_raises(self, kind):
        """Non-primitive and unknown kinds are contract violations."""
        with pytest.raises(InvalidEventPropertyTypeError, match=kind):
            get_cpp_type_for_annotation(kind)


class TestGetIncludeForAnnotation:
    """Tests for include resolution."""

    @pytest.mark.unit
    def test_mixed_needs_folly(self):
        """Mixed payloads need folly::dynamic."""
        assert (
            get_include_for_annotation("MixedTypeAnnotation")
            == "#include <folly/dynamic.h>"
        )

    @pytest.mark.unit
    def test_other_kinds_need_nothing(self):
        """Built-in types need no extra include."""
        for kind in AnnotationKind:
            if kind is not AnnotationKind.MIXED:
                assert get_include_for_annotation(kind) is None

    @pytest.mark.unit
    def test_unknown_kind_raises(self):
        """Unknown kinds are rejected."""
        with pytest.raises(InvalidEventPropertyTypeError):
            get_include_for_annotation("ColorPrimitive")


class TestNaming:
    """Tests for identifier sanitization and declaration naming."""

    @pytest.mark.unit
    def test_upper_case_first(self):
        """Only the first character changes."""
        assert upper_case_first("onChange") == "OnChange"
        assert upper_case_first("") == ""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("single", "Single"),
            ("left-to-right", "LeftToRight"),
            ("already_safe", "Already_safe"),
            ("with space", "WithSpace"),
            ("4k", "_4k"),
            ("", "_"),
            ("---", "_"),
        ],
    )
    def test_to_safe_cpp_string(self, value, expected):
        """Strings become valid identifiers."""
        assert to_safe_cpp_string(value) == expected

    @pytest.mark.unit
    def test_struct_name_from_path(self):
        """Path segments are capitalized and concatenated."""
        assert generate_event_struct_name(["onChange"]) == "OnChange"
        assert (
            generate_event_struct_name(["onSlidingComplete", "meta", "direction"])
            == "OnSlidingCompleteMetaDirection"
        )

    @pytest.mark.unit
    def test_struct_name_empty_path(self):
        """An empty path yields an empty name."""
        assert generate_event_struct_name() == ""

    @pytest.mark.unit
    def test_distinct_paths_may_collide(self):
        """Naming performs no collision detection."""
        assert generate_event_struct_name(["onA", "bC"]) == generate_event_struct_name(
            ["onAB", "c"]
        )


class TestFormatting:
    """Tests for literal quoting and indentation."""

    @pytest.mark.unit
    def test_string_literal_plain(self):
        """Plain strings are wrapped in quotes."""
        assert to_cpp_string_literal("single") == '"single"'

    @pytest.mark.unit
    def test_string_literal_escapes(self):
        """Quotes and backslashes are escaped."""
        assert to_cpp_string_literal('say "hi"\\') == '"say \\"hi\\"\\\\"'

    @pytest.mark.unit
    def test_indent_skips_first_and_empty_lines(self):
        """First line and blank lines are left untouched."""
        assert indent("a\nb\n\nc", 2) == "a\n  b\n\n  c"
