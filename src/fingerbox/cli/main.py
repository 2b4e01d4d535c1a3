"""Typer CLI for finger-jointed box generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from fingerbox.application import GenerateBoxCommand
from fingerbox.application.config import (
    BoxConfiguration,
    ConfigError,
    config_to_exporter_options,
    config_to_input,
    load_config,
    merge_config_with_cli,
)
from fingerbox.cli.commands import (
    handle_multi_format_export,
    handle_single_file_export,
    parse_formats,
)
from fingerbox.domain import BoxLayout
from fingerbox.infrastructure import (
    PanelSummaryFormatter,
    SpacingInfoFormatter,
    format_edge_types,
)

app = typer.Typer(
    name="fingerbox",
    help="Generate laser-cut finger-jointed boxes as SVG, DXF or JSON.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Outer width in mm")
]
DepthOption = Annotated[
    float | None, typer.Option("--depth", "-d", help="Outer depth in mm")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Outer height in mm")
]
ThicknessOption = Annotated[
    float | None,
    typer.Option("--thickness", "-t", help="Material thickness in mm"),
]
FingerWidthOption = Annotated[
    float | None,
    typer.Option("--finger-width", "-f", help="Desired finger width in mm"),
]
KerfOption = Annotated[
    float | None,
    typer.Option("--kerf", help="Laser kerf in mm (recorded, not applied)"),
]
EdgeWidthOption = Annotated[
    float | None,
    typer.Option("--edge-width", help="Hole inset from the edge, in thicknesses"),
]
SurroundingSpacesOption = Annotated[
    float | None,
    typer.Option(
        "--surrounding-spaces",
        help="Flat margin at each end of a jointed edge, in finger pitches",
    ),
]
PlayOption = Annotated[
    float | None,
    typer.Option("--play", help="Joint clearance in mm (recorded, not applied)"),
]
TopEdgeOption = Annotated[
    str | None,
    typer.Option("--top-edge", help="Top joint: finger, hole, flush_hole, open"),
]
BottomEdgeOption = Annotated[
    str | None,
    typer.Option(
        "--bottom-edge", help="Bottom joint: finger, hole, flush_hole, open"
    ),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable debug logging")
]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _resolve_config(
    config_file: Path | None,
    formats: list[str] | None = None,
    output_dir: Path | None = None,
    project_name: str | None = None,
    **overrides: float | str | None,
) -> BoxConfiguration:
    """Load the config file (or defaults) and apply CLI overrides.

    Exits with code 1 on any configuration error.
    """
    try:
        if config_file is not None:
            config = load_config(config_file)
        else:
            config = BoxConfiguration(schema_version="1.0")
        return merge_config_with_cli(
            config,
            formats=formats,
            output_dir=str(output_dir) if output_dir is not None else None,
            project_name=project_name,
            **overrides,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _generate_layout(config: BoxConfiguration) -> BoxLayout:
    result = GenerateBoxCommand().execute(config_to_input(config))
    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)
    return result.layout


@app.command()
def generate(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    height: HeightOption = None,
    thickness: ThicknessOption = None,
    finger_width: FingerWidthOption = None,
    kerf: KerfOption = None,
    edge_width: EdgeWidthOption = None,
    surrounding_spaces: SurroundingSpacesOption = None,
    play: PlayOption = None,
    top_edge: TopEdgeOption = None,
    bottom_edge: BottomEdgeOption = None,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Output file; the format follows the suffix"
        ),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,dxf,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate the six-panel layout of a finger-jointed box.

    Dimensions come from CLI options, a JSON configuration file, or the
    built-in defaults. When using --config, CLI options override config file
    values. Without any output option a panel summary is printed.

    Examples:
        fingerbox generate --width 100 --depth 80 --height 60 -o box.svg
        fingerbox generate --config my-box.json
        fingerbox generate --config my-box.json --output-formats all --output-dir ./out
    """
    _configure_logging(verbose)

    formats = parse_formats(output_formats) if output_formats else None
    config = _resolve_config(
        config_file,
        formats=formats,
        output_dir=output_dir,
        project_name=project_name,
        width=width,
        depth=depth,
        height=height,
        thickness=thickness,
        kerf=kerf,
        finger_width=finger_width,
        surrounding_spaces=surrounding_spaces,
        play=play,
        edge_width=edge_width,
        top_edge=top_edge,
        bottom_edge=bottom_edge,
    )
    layout = _generate_layout(config)
    exporter_options = config_to_exporter_options(config)

    if output_file is not None:
        handle_single_file_export(output_file, layout, exporter_options)
        return

    if output_formats or config.output.output_dir is not None:
        handle_multi_format_export(
            config.output.formats,
            Path(config.output.output_dir) if config.output.output_dir else None,
            config.output.project_name,
            layout,
            exporter_options,
        )
        return

    typer.echo(PanelSummaryFormatter().format(layout))


@app.command()
def info(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    height: HeightOption = None,
    thickness: ThicknessOption = None,
    finger_width: FingerWidthOption = None,
    kerf: KerfOption = None,
    edge_width: EdgeWidthOption = None,
    surrounding_spaces: SurroundingSpacesOption = None,
    play: PlayOption = None,
    top_edge: TopEdgeOption = None,
    bottom_edge: BottomEdgeOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show finger counts, pitches, margins and hole inset for a box.

    Example:
        fingerbox info --height 60 --finger-width 10
    """
    _configure_logging(verbose)

    config = _resolve_config(
        config_file,
        width=width,
        depth=depth,
        height=height,
        thickness=thickness,
        kerf=kerf,
        finger_width=finger_width,
        surrounding_spaces=surrounding_spaces,
        play=play,
        edge_width=edge_width,
        top_edge=top_edge,
        bottom_edge=bottom_edge,
    )
    box_input = config_to_input(config)
    errors = box_input.validate()
    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(SpacingInfoFormatter().format(box_input.to_parameters()))


@app.command(name="edge-types")
def edge_types() -> None:
    """List the top and bottom edge selectors."""
    typer.echo(format_edge_types())


if __name__ == "__main__":
    app()
