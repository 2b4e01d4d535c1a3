"""Configuration schema and loading system for box configurations.

Public API:
    - BoxConfiguration: Root configuration model
    - BoxConfig, MaterialConfig, JointConfig, OutputConfig: Section models
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command line overrides
    - config_to_input / config_to_parameters: Convert to DTOs and domain objects

Example:
    >>> from pathlib import Path
    >>> from fingerbox.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-box.json"))
    ...     print(f"Box: {config.box.width}x{config.box.depth}x{config.box.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from fingerbox.application.config.adapter import (
    config_to_exporter_options,
    config_to_input,
    config_to_parameters,
)
from fingerbox.application.config.loader import (
    ConfigError,
    config_error_from_validation,
    load_config,
    load_config_from_dict,
    validation_details,
)
from fingerbox.application.config.merger import merge_config_with_cli
from fingerbox.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoxConfig,
    BoxConfiguration,
    DxfOutputConfigSchema,
    JointConfig,
    MaterialConfig,
    OutputConfig,
    SvgOutputConfigSchema,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoxConfig",
    "BoxConfiguration",
    "ConfigError",
    "DxfOutputConfigSchema",
    "JointConfig",
    "MaterialConfig",
    "OutputConfig",
    "SvgOutputConfigSchema",
    "config_error_from_validation",
    "config_to_exporter_options",
    "config_to_input",
    "config_to_parameters",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validation_details",
]
