"""Adapters from BoxConfiguration to application DTOs and domain objects."""

from fingerbox.application.config.schema import BoxConfiguration
from fingerbox.application.dtos import BoxInput
from fingerbox.domain.value_objects import BoxParameters


def config_to_input(config: BoxConfiguration) -> BoxInput:
    """Flatten a configuration into the BoxInput DTO used by GenerateBoxCommand."""
    return BoxInput(
        width=config.box.width,
        depth=config.box.depth,
        height=config.box.height,
        thickness=config.material.thickness,
        finger_width=config.joints.finger_width,
        kerf=config.material.kerf,
        edge_width=config.joints.edge_width,
        surrounding_spaces=config.joints.surrounding_spaces,
        play=config.joints.play,
        top_edge=config.joints.top_edge.value,
        bottom_edge=config.joints.bottom_edge.value,
    )


def config_to_parameters(config: BoxConfiguration) -> BoxParameters:
    """Convert a configuration straight to BoxParameters.

    Raises:
        ValueError: If the combination is geometrically impossible (for
            example depth not larger than twice the thickness).
    """
    return config_to_input(config).to_parameters()


def config_to_exporter_options(config: BoxConfiguration) -> dict[str, dict]:
    """Per-format keyword arguments for exporter constructors."""
    return {
        "svg": {
            "stroke_width": config.output.svg.stroke_width,
            "stroke_color": config.output.svg.stroke_color,
        },
        "dxf": {"include_labels": config.output.dxf.include_labels},
    }
