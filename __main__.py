"""CLI entry point for event-emitter-codegen.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from src.config import (
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_output_dir,
    list_environment_variables,
)
from src.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _load_schema_or_log(path: Path):
    """Load a schema file, logging the failure reason instead of raising."""
    from src.schema import load_schema

    try:
        return load_schema(path)
    except OSError as e:
        logger.error(f"Cannot read schema {path}: {e}")
    except json.JSONDecodeError as e:
        logger.error(f"Schema {path} is not valid JSON: {e}")
    except PydanticValidationError as e:
        logger.error(f"Schema {path} is invalid:\n{e}")
    return None


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    from src.emitter import generate
    from src.output import write_files
    from src.schema import SchemaContractError

    library_name = get_environment(EnvVar.CODEGEN_LIBRARY_NAME, override=args.library_name)
    if not library_name:
        library_name = args.schema.stem
    package_name = get_environment(EnvVar.CODEGEN_PACKAGE_NAME, override=args.package_name)
    assume_nonnull = get_environment(
        EnvVar.CODEGEN_ASSUME_NONNULL, override=args.assume_nonnull or None
    )
    strict_names = get_environment(
        EnvVar.CODEGEN_STRICT_NAMES, override=args.strict_names or None
    )
    output_dir = get_output_dir(args.output_dir)

    schema = _load_schema_or_log(args.schema)
    if schema is None:
        return 1

    try:
        files = generate(
            library_name,
            schema,
            package_name,
            assume_nonnull,
            strict_names=strict_names,
        )
    except SchemaContractError as e:
        logger.error(f"Generation aborted: {e}")
        return 1

    if args.check:
        stale = write_files(files, output_dir, check=True)
        if stale:
            logger.error(f"{len(stale)} generated file(s) out of date in {output_dir}")
            return 1
        logger.info(f"Generated files in {output_dir} are up to date")
        return 0

    write_files(files, output_dir)
    return 0


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate EventEmitters.h from a component schema",
    )
    parser.add_argument(
        "schema",
        type=Path,
        help="Path to the JSON component schema",
    )
    parser.add_argument(
        "--library-name",
        "-l",
        type=str,
        default=None,
        help="Library identifier (default: CODEGEN_LIBRARY_NAME or schema file stem)",
    )
    parser.add_argument(
        "--package-name",
        "-p",
        type=str,
        default=None,
        help="Optional package identifier",
    )
    parser.add_argument(
        "--assume-nonnull",
        action="store_true",
        help="Treat primitive fields as non-nullable",
    )
    parser.add_argument(
        "--strict-names",
        action="store_true",
        help="Fail when two declarations resolve to the same name",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Output directory (default: CODEGEN_OUTPUT_DIR or ./generated)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only verify that generated files on disk are up to date",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_generate(args)


# =============================================================================
# Describe Command
# =============================================================================


def cmd_describe(args: argparse.Namespace) -> int:
    """Handle the describe command."""
    from src.output import format_schema_tree
    from src.schema import get_components

    schema = _load_schema_or_log(args.schema)
    if schema is None:
        return 1

    print(format_schema_tree(get_components(schema)))
    return 0


def handle_describe_command(argv: list[str]) -> int:
    """Handle describe-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . describe",
        description="Print the components, events and payloads of a schema",
    )
    parser.add_argument(
        "schema",
        type=Path,
        help="Path to the JSON component schema",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_describe(args)


# =============================================================================
# Env Command
# =============================================================================


def cmd_env(args: argparse.Namespace) -> int:
    """Handle the env command."""
    variables = list_environment_variables(args.category)
    if not variables:
        logger.error(f"Unknown category: {args.category}")
        return 1

    for var in variables:
        info = get_environment_info(var)
        value = get_environment(var)
        print(f"{info.name}={'' if value is None else value}")
        print(f"    [{info.category}] {info.description}")
    return 0


def handle_env_command(argv: list[str]) -> int:
    """Handle env-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . env",
        description="Show configuration variables and their resolved values",
    )
    parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        help="Only show one category (generation, output, logging)",
    )
    args = parser.parse_args(argv)
    return cmd_env(args)


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests (no I/O)
        python . test --integration  # Run tests touching the file system
        python . test -v             # Run with verbose output
        python . test -k "emitter"   # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Generation ===")
    print("  generate   Generate EventEmitters.h from a component schema")
    print("  describe   Print the components and events of a schema")
    print("\n=== Configuration ===")
    print("  env        Show configuration variables")
    print("\n=== Development ===")
    print("  test       Run the test suite")
    print("\nExamples:")
    print("  python . generate schema.json -l MyLibrary -o build/generated")
    print("  python . generate schema.json --check")
    print("  python . describe schema.json")
    print("  python . test --unit")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "generate": lambda: handle_generate_command(rest_args),
        "describe": lambda: handle_describe_command(rest_args),
        "env": lambda: handle_env_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        setup_logging(level=get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
