"""Output handling functions for the fingerbox CLI.

This module writes a generated layout either to a single file whose format
is picked from the file suffix, or to several formats at once in an output
directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from fingerbox.infrastructure.exporters import ExporterRegistry, ExportManager

if TYPE_CHECKING:
    from fingerbox.domain import BoxLayout

__all__ = [
    "handle_multi_format_export",
    "handle_single_file_export",
    "parse_formats",
]


def parse_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list, or "all", into format names.

    Exits with code 1 if any format is not registered.
    """
    if output_formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str | None,
    layout: BoxLayout,
    exporter_options: Mapping[str, Mapping[str, Any]] | None = None,
) -> dict[str, Path]:
    """Export the layout to every format in ``formats``.

    Args:
        formats: Registered format names.
        output_dir: Output directory, defaults to the working directory.
        project_name: Base name for output files, defaults to the box size tag.
        layout: The layout to export.
        exporter_options: Constructor arguments per format.

    Returns:
        Mapping of format name to written file path.
    """
    manager = ExportManager(output_dir or Path("."), exporter_options)
    try:
        files = manager.export_all(formats, layout, project_name)
    except (KeyError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
    return files


def _format_for_suffix(suffix: str) -> str | None:
    extension = suffix.lstrip(".").lower()
    for format_name in ExporterRegistry.available_formats():
        if ExporterRegistry.get(format_name).file_extension == extension:
            return format_name
    return None


def handle_single_file_export(
    output_file: Path,
    layout: BoxLayout,
    exporter_options: Mapping[str, Mapping[str, Any]] | None = None,
) -> Path:
    """Write the layout to ``output_file`` in the format named by its suffix."""
    format_name = _format_for_suffix(output_file.suffix)
    if format_name is None:
        extensions = ", ".join(
            f".{ExporterRegistry.get(f).file_extension}"
            for f in ExporterRegistry.available_formats()
        )
        typer.echo(
            f"Error: Cannot infer export format from '{output_file.name}'. "
            f"Use one of: {extensions}",
            err=True,
        )
        raise typer.Exit(code=1)

    options = (exporter_options or {}).get(format_name, {})
    exporter = ExporterRegistry.get(format_name)(**options)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    try:
        exporter.export(layout, output_file)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{format_name.upper()} exported to: {output_file}")
    return output_file
