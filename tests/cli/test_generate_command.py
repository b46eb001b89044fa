"""Tests for the generate and describe CLI commands."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str, env_overrides: dict[str, str] | None = None):
    env = {
        key: value for key, value in os.environ.items() if not key.startswith("CODEGEN_")
    }
    env.update(env_overrides or {})
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env=env,
        timeout=60,
    )


@pytest.mark.integration
def test_generate_writes_header(schema_file, tmp_path):
    """generate writes EventEmitters.h to the output directory."""
    out_dir = tmp_path / "generated"
    result = _run("generate", str(schema_file), "-l", "Sample", "-o", str(out_dir))

    assert result.returncode == 0, result.stderr
    header = (out_dir / "EventEmitters.h").read_text(encoding="utf-8")
    assert "class MyViewEventEmitter : public ViewEventEmitter {" in header
    assert "void onChange(OnChange value) const;" in header


@pytest.mark.integration
def test_generate_output_dir_from_environment(schema_file, tmp_path):
    """CODEGEN_OUTPUT_DIR is used when no --output-dir is given."""
    out_dir = tmp_path / "from_env"
    result = _run(
        "generate",
        str(schema_file),
        env_overrides={"CODEGEN_OUTPUT_DIR": str(out_dir)},
    )

    assert result.returncode == 0, result.stderr
    assert (out_dir / "EventEmitters.h").exists()


@pytest.mark.integration
def test_generate_check_mode(schema_file, tmp_path):
    """--check fails before generation and passes after it."""
    out_dir = tmp_path / "generated"

    assert _run("generate", str(schema_file), "-o", str(out_dir), "--check").returncode == 1
    assert not out_dir.exists()

    assert _run("generate", str(schema_file), "-o", str(out_dir)).returncode == 0
    assert _run("generate", str(schema_file), "-o", str(out_dir), "--check").returncode == 0


@pytest.mark.integration
def test_generate_rejects_invalid_schema(tmp_path):
    """Invalid annotation kinds abort with exit code 1 and no output."""
    schema = {
        "modules": {
            "Bad": {
                "type": "Component",
                "components": {
                    "BadView": {
                        "events": [
                            {
                                "name": "onBad",
                                "typeAnnotation": {
                                    "type": "EventTypeAnnotation",
                                    "argument": {
                                        "type": "ObjectTypeAnnotation",
                                        "properties": [
                                            {
                                                "name": "value",
                                                "typeAnnotation": {
                                                    "type": "Int64TypeAnnotation"
                                                },
                                            }
                                        ],
                                    },
                                },
                            }
                        ]
                    }
                },
            }
        }
    }
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(schema), encoding="utf-8")
    out_dir = tmp_path / "generated"

    result = _run("generate", str(path), "-o", str(out_dir))

    assert result.returncode == 1
    assert "is invalid" in result.stderr
    assert not out_dir.exists()


@pytest.mark.integration
def test_generate_missing_schema(tmp_path):
    """A missing schema file is reported, not raised."""
    result = _run("generate", str(tmp_path / "missing.json"))
    assert result.returncode == 1
    assert "Cannot read schema" in result.stderr


@pytest.mark.integration
def test_describe_prints_tree(schema_file):
    """describe prints the schema tree to stdout."""
    result = _run("describe", str(schema_file))

    assert result.returncode == 0, result.stderr
    assert "MyView" in result.stdout
    assert "└── onSelect" in result.stdout


@pytest.mark.integration
def test_env_lists_variables():
    """env shows every configuration variable."""
    result = _run("env", env_overrides={"CODEGEN_LIBRARY_NAME": "FromEnv"})

    assert result.returncode == 0, result.stderr
    assert "CODEGEN_LIBRARY_NAME=FromEnv" in result.stdout
    assert "CODEGEN_OUTPUT_DIR=" in result.stdout


@pytest.mark.integration
def test_unknown_command():
    """Unknown commands exit with 1."""
    assert _run("frobnicate").returncode == 1
