"""Output writing and schema summaries.

Persists generated files and renders human-readable trees of the
components, events and payloads in a schema for review.
"""

from pathlib import Path

from src.core import get_logger
from src.schema import (
    AnnotationKind,
    ComponentShape,
    NamedEventProperty,
)

logger = get_logger("output")


def write_files(
    files: dict[str, str],
    output_dir: Path | str,
    check: bool = False,
) -> list[Path]:
    """Write generated files, or report which ones are out of date.

    Args:
        files: Mapping of file name to contents.
        output_dir: Target directory (created if missing).
        check: Only compare; nothing is written.

    Returns:
        list[Path]: Written paths, or in check mode the paths whose
        on-disk contents are missing or differ.
    """
    output_dir = Path(output_dir)
    paths: list[Path] = []

    if check:
        for name, contents in files.items():
            path = output_dir / name
            if not path.exists() or path.read_text(encoding="utf-8") != contents:
                logger.warning(f"{path} is out of date")
                paths.append(path)
        return paths

    output_dir.mkdir(parents=True, exist_ok=True)
    for name, contents in files.items():
        path = output_dir / name
        path.write_text(contents, encoding="utf-8")
        logger.info(f"Wrote {path}")
        paths.append(path)
    return paths


def format_schema_tree(components: dict[str, ComponentShape]) -> str:
    """Format schema components as a human-readable tree.

    Example output:
        MyView
        ├── onLoad()
        └── onChange
            └── value: string
        Slider
        └── onSlidingComplete
            ├── value: double
            └── meta: object
                └── direction: enum[up, down]

    Args:
        components: Component name to shape, in schema order.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    for component_name, component in components.items():
        lines.append(component_name)
        for i, event in enumerate(component.events):
            is_last = i == len(component.events) - 1
            connector = "└── " if is_last else "├── "
            child_prefix = "    " if is_last else "│   "
            if event.payload is None:
                lines.append(f"{connector}{event.name}()")
                continue
            lines.append(f"{connector}{event.name}")
            _format_properties(event.payload.properties, lines, child_prefix)
    return "\n".join(lines)


def _format_properties(
    properties: list[NamedEventProperty],
    lines: list[str],
    prefix: str,
) -> None:
    """Recursively format payload properties."""
    for i, prop in enumerate(properties):
        is_last = i == len(properties) - 1
        connector = "└── " if is_last else "├── "
        annotation = prop.type_annotation
        lines.append(f"{prefix}{connector}{prop.name}: {_describe(annotation)}")
        if annotation.type == AnnotationKind.OBJECT:
            child_prefix = prefix + ("    " if is_last else "│   ")
            _format_properties(annotation.properties, lines, child_prefix)


def _describe(annotation) -> str:
    """Short label for an annotation."""
    if annotation.type == AnnotationKind.STRING_ENUM:
        return f"enum[{', '.join(annotation.options)}]"
    if annotation.type == AnnotationKind.OBJECT:
        return "object"
    return annotation.type.removesuffix("TypeAnnotation").lower()


__all__ = [
    "format_schema_tree",
    "write_files",
]
