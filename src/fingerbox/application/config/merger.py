"""Merge CLI overrides into a loaded configuration.

Precedence is CLI args > config values > defaults. Only arguments that are
not None override the configuration.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fingerbox.application.config.loader import config_error_from_validation
from fingerbox.application.config.schema import BoxConfiguration


def _apply(section: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(section)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def merge_config_with_cli(
    config: BoxConfiguration,
    *,
    width: float | None = None,
    depth: float | None = None,
    height: float | None = None,
    thickness: float | None = None,
    kerf: float | None = None,
    finger_width: float | None = None,
    surrounding_spaces: float | None = None,
    play: float | None = None,
    edge_width: float | None = None,
    top_edge: str | None = None,
    bottom_edge: str | None = None,
    formats: list[str] | None = None,
    output_dir: str | None = None,
    project_name: str | None = None,
) -> BoxConfiguration:
    """Return a new configuration with the given overrides applied.

    The merged data is validated again, so an out-of-range override is
    reported the same way as a bad value in a config file.

    Raises:
        ConfigError: If an override fails validation.

    Example:
        >>> config = load_config(Path("my-box.json"))
        >>> merge_config_with_cli(config, width=150.0).box.width
        150.0
    """
    data = config.model_dump(mode="json")
    data["box"] = _apply(
        data["box"], {"width": width, "depth": depth, "height": height}
    )
    data["material"] = _apply(
        data["material"], {"thickness": thickness, "kerf": kerf}
    )
    data["joints"] = _apply(
        data["joints"],
        {
            "finger_width": finger_width,
            "surrounding_spaces": surrounding_spaces,
            "play": play,
            "edge_width": edge_width,
            "top_edge": top_edge,
            "bottom_edge": bottom_edge,
        },
    )
    data["output"] = _apply(
        data["output"],
        {"formats": formats, "output_dir": output_dir, "project_name": project_name},
    )
    try:
        return BoxConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise config_error_from_validation(e)
