"""Tests for output module."""

import pytest

from src.output import format_schema_tree, write_files
from src.schema import get_components


class TestFormatSchemaTree:
    """Tests for format_schema_tree function."""

    @pytest.mark.unit
    def test_sample_tree(self, sample_schema):
        """Components, events and nested properties are drawn as a tree."""
        result = format_schema_tree(get_components(sample_schema))
        assert result == "\n".join(
            [
                "MyView",
                "├── onLoad()",
                "├── onChange",
                "│   └── value: string",
                "└── onSelect",
                "    └── mode: enum[single, multiple]",
                "Slider",
                "└── onSlidingComplete",
                "    ├── value: double",
                "    ├── target: int32",
                "    └── meta: object",
                "        ├── source: mixed",
                "        └── direction: enum[left-to-right, right-to-left]",
                "EmptyView",
            ]
        )

    @pytest.mark.unit
    def test_empty(self):
        """No components yields an empty string."""
        assert format_schema_tree({}) == ""


class TestWriteFiles:
    """Tests for write_files."""

    @pytest.mark.integration
    def test_writes_and_creates_directory(self, tmp_path):
        """Files are written under a freshly created directory."""
        target = tmp_path / "out" / "nested"
        paths = write_files({"EventEmitters.h": "// header\n"}, target)

        assert paths == [target / "EventEmitters.h"]
        assert (target / "EventEmitters.h").read_text(encoding="utf-8") == "// header\n"

    @pytest.mark.integration
    def test_check_reports_missing(self, tmp_path):
        """Check mode reports missing files and writes nothing."""
        stale = write_files({"EventEmitters.h": "x"}, tmp_path, check=True)
        assert stale == [tmp_path / "EventEmitters.h"]
        assert not (tmp_path / "EventEmitters.h").exists()

    @pytest.mark.integration
    def test_check_reports_changed(self, tmp_path):
        """Check mode reports files whose contents differ."""
        write_files({"EventEmitters.h": "old"}, tmp_path)
        assert write_files({"EventEmitters.h": "new"}, tmp_path, check=True) == [
            tmp_path / "EventEmitters.h"
        ]

    @pytest.mark.integration
    def test_check_up_to_date(self, tmp_path):
        """Check mode is empty when everything matches."""
        write_files({"EventEmitters.h": "same"}, tmp_path)
        assert write_files({"EventEmitters.h": "same"}, tmp_path, check=True) == []
