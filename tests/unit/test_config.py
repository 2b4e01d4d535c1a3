"""Unit tests for configuration schema, loading, merging and adapting.

These tests verify:
- Schema defaults, ranges and edge selector aliases
- Loader error categories and messages
- CLI overrides apply only when provided
- Adapters produce DTOs, domain parameters and exporter options
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from fingerbox.application.config import (
    BoxConfig,
    BoxConfiguration,
    ConfigError,
    JointConfig,
    OutputConfig,
    config_to_exporter_options,
    config_to_input,
    config_to_parameters,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
    validation_details,
)
from fingerbox.domain import EdgeSelector


class TestBoxConfiguration:
    """Tests for the Pydantic configuration models."""

    def test_minimal_config_uses_defaults(self) -> None:
        config = BoxConfiguration(schema_version="1.0")

        assert config.box.width == 100.0
        assert config.material.thickness == 3.0
        assert config.joints.bottom_edge is EdgeSelector.HOLE
        assert config.output.formats == ["svg"]

    def test_edge_aliases(self) -> None:
        joints = JointConfig(top_edge="F", bottom_edge="stackable")
        assert joints.top_edge is EdgeSelector.FINGER
        assert joints.bottom_edge is EdgeSelector.FLUSH_HOLE

    @pytest.mark.parametrize(
        "field,value",
        [("width", 29.0), ("width", 501.0), ("depth", 10.0), ("height", 301.0)],
    )
    def test_box_ranges(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            BoxConfig(**{field: value})

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BoxConfig(width=100.0, length=50.0)

    def test_formats_normalized(self) -> None:
        output = OutputConfig(formats=[" SVG", "dxf ", ""])
        assert output.formats == ["svg", "dxf"]

    def test_newer_minor_version_accepted(self) -> None:
        assert BoxConfiguration(schema_version="1.3").schema_version == "1.3"

    def test_unsupported_major_version_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            BoxConfiguration(schema_version="2.0")


class TestValidationDetails:
    """Tests for validation_details()."""

    def test_dotted_paths_and_indices(self) -> None:
        details = validation_details(
            [
                {"loc": ("box", "width"), "msg": "too small", "input": 5, "type": "ge"},
                {"loc": ["output", "formats", 0], "msg": "bad", "type": "literal"},
            ]
        )

        assert details == [
            {
                "path": "box.width",
                "message": "too small",
                "value": 5,
                "error_type": "ge",
            },
            {
                "path": "output.formats[0]",
                "message": "bad",
                "value": None,
                "error_type": "literal",
            },
        ]


class TestLoadConfig:
    """Tests for load_config and load_config_from_dict."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "box.json"
        path.write_text(
            json.dumps(
                {
                    "schema_version": "1.0",
                    "box": {"width": 150, "depth": 90, "height": 40},
                    "joints": {"top_edge": "finger"},
                }
            )
        )

        config = load_config(path)

        assert config.box.width == 150.0
        assert config.joints.top_edge is EdgeSelector.FINGER

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "Config file not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",\n  "box": }')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2
        assert error.path == path

    def test_validation_error_paths(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps({"schema_version": "1.0", "material": {"thickness": 20}})
        )

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "material.thickness"
        assert "material.thickness" in error.message
        assert "(got: 20)" in error.message

    def test_list_index_in_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "output": {"formats": [1]}})
        assert exc_info.value.details[0]["path"] == "output.formats[0]"

    def test_missing_schema_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"box": {"width": 100}})
        assert exc_info.value.details[0]["path"] == "schema_version"


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self) -> BoxConfiguration:
        """Create a base configuration for testing."""
        return load_config_from_dict(
            {
                "schema_version": "1.0",
                "box": {"width": 120, "depth": 90, "height": 50},
                "material": {"thickness": 4},
                "output": {"formats": ["dxf"], "project_name": "tray"},
            }
        )

    def test_none_overrides_keep_config(self, base_config: BoxConfiguration) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged == base_config

    def test_overrides_apply(self, base_config: BoxConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config,
            width=200.0,
            thickness=6.0,
            top_edge="h",
            formats=["svg", "json"],
            output_dir="out",
        )

        assert merged.box.width == 200.0
        assert merged.box.depth == 90.0
        assert merged.material.thickness == 6.0
        assert merged.joints.top_edge is EdgeSelector.HOLE
        assert merged.output.formats == ["svg", "json"]
        assert merged.output.output_dir == "out"
        assert merged.output.project_name == "tray"

    def test_original_unchanged(self, base_config: BoxConfiguration) -> None:
        merge_config_with_cli(base_config, width=200.0)
        assert base_config.box.width == 120.0

    def test_out_of_range_override_raises_config_error(
        self, base_config: BoxConfiguration
    ) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, height=1000.0)
        assert exc_info.value.details[0]["path"] == "box.height"

    def test_unknown_edge_override(self, base_config: BoxConfiguration) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, bottom_edge="glue")
        assert exc_info.value.details[0]["path"] == "joints.bottom_edge"


class TestConfigAdapters:
    """Tests for config_to_input, config_to_parameters and exporter options."""

    def test_config_to_input(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "box": {"width": 140},
                "material": {"kerf": 0.2},
                "joints": {"surrounding_spaces": 2, "bottom_edge": "finger"},
            }
        )

        box_input = config_to_input(config)

        assert box_input.width == 140.0
        assert box_input.kerf == 0.2
        assert box_input.surrounding_spaces == 2.0
        assert box_input.bottom_edge == "finger"
        assert box_input.validate() == []

    def test_config_to_parameters(self) -> None:
        params = config_to_parameters(BoxConfiguration(schema_version="1.0"))
        assert params.slug == "box-100x80x60"
        assert params.bottom_edge is EdgeSelector.HOLE

    def test_exporter_options(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "output": {
                    "svg": {"stroke_width": 0.2, "stroke_color": "#f00"},
                    "dxf": {"include_labels": False},
                },
            }
        )

        assert config_to_exporter_options(config) == {
            "svg": {"stroke_width": 0.2, "stroke_color": "#f00"},
            "dxf": {"include_labels": False},
        }
