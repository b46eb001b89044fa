"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample codegen schemas shared by the package test suites
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from src.schema import SchemaType

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Sample Schema
# =============================================================================

SAMPLE_SCHEMA: dict[str, Any] = {
    "modules": {
        "MyViewNativeComponent": {
            "type": "Component",
            "components": {
                "MyView": {
                    "events": [
                        {
                            "name": "onLoad",
                            "bubblingType": "direct",
                            "typeAnnotation": {"type": "EventTypeAnnotation"},
                        },
                        {
                            "name": "onChange",
                            "bubblingType": "bubble",
                            "typeAnnotation": {
                                "type": "EventTypeAnnotation",
                                "argument": {
                                    "type": "ObjectTypeAnnotation",
                                    "properties": [
                                        {
                                            "name": "value",
                                            "typeAnnotation": {
                                                "type": "StringTypeAnnotation"
                                            },
                                        }
                                    ],
                                },
                            },
                        },
                        {
                            "name": "onSelect",
                            "typeAnnotation": {
                                "type": "EventTypeAnnotation",
                                "argument": {
                                    "type": "ObjectTypeAnnotation",
                                    "properties": [
                                        {
                                            "name": "mode",
                                            "typeAnnotation": {
                                                "type": "StringEnumTypeAnnotation",
                                                "options": ["single", "multiple"],
                                            },
                                        }
                                    ],
                                },
                            },
                        },
                    ]
                }
            },
        },
        "NativeSampleTurboModule": {
            "type": "NativeModule",
            "aliasMap": {},
            "spec": {"properties": []},
            "moduleName": "SampleTurboModule",
        },
        "SliderNativeComponent": {
            "type": "Component",
            "components": {
                "Slider": {
                    "events": [
                        {
                            "name": "onSlidingComplete",
                            "optional": True,
                            "typeAnnotation": {
                                "type": "EventTypeAnnotation",
                                "argument": {
                                    "type": "ObjectTypeAnnotation",
                                    "properties": [
                                        {
                                            "name": "value",
                                            "typeAnnotation": {
                                                "type": "DoubleTypeAnnotation"
                                            },
                                        },
                                        {
                                            "name": "target",
                                            "typeAnnotation": {
                                                "type": "Int32TypeAnnotation"
                                            },
                                        },
                                        {
                                            "name": "meta",
                                            "typeAnnotation": {
                                                "type": "ObjectTypeAnnotation",
                                                "properties": [
                                                    {
                                                        "name": "source",
                                                        "typeAnnotation": {
                                                            "type": "MixedTypeAnnotation"
                                                        },
                                                    },
                                                    {
                                                        "name": "direction",
                                                        "typeAnnotation": {
                                                            "type": "StringEnumTypeAnnotation",
                                                            "options": [
                                                                "left-to-right",
                                                                "right-to-left",
                                                            ],
                                                        },
                                                    },
                                                ],
                                            },
                                        },
                                    ],
                                },
                            },
                        }
                    ]
                },
                "EmptyView": {"events": []},
            },
        },
    }
}


@pytest.fixture
def sample_schema_dict() -> dict[str, Any]:
    """A raw schema with two component modules and one native module.

    Returns:
        A fresh deep copy, safe to mutate.
    """
    return copy.deepcopy(SAMPLE_SCHEMA)


@pytest.fixture
def sample_schema(sample_schema_dict: dict[str, Any]) -> SchemaType:
    """The sample schema validated into models."""
    from src.schema import parse_schema

    return parse_schema(sample_schema_dict)


@pytest.fixture
def schema_file(tmp_path: Path, sample_schema_dict: dict[str, Any]) -> Path:
    """The sample schema written to a JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(sample_schema_dict), encoding="utf-8")
    return path
