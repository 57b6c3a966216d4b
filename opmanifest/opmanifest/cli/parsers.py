"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import PurePath

import typer


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_template_names(values: list[str]) -> list[str]:
    """Validate template names, which are relative to the templates directory."""
    for value in values:
        if not value.strip():
            raise typer.BadParameter("Template name must not be empty")
        if PurePath(value).is_absolute():
            raise typer.BadParameter(
                f"Template name must be relative to --templates-dir, got: {value!r}"
            )
    return values
