"""Pydantic models for box configuration files.

Ranges mirror the limits of the interactive parameter controls. The
geometry engine itself accepts anything positive; the config layer is where
out-of-range values are rejected with a readable message.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from fingerbox.domain.value_objects import EdgeSelector

# Version 1.0: Initial schema (box, material, joints, output)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class MaterialConfig(BaseModel):
    """Sheet material settings.

    Attributes:
        thickness: Material thickness in mm (1.0 to 12.0).
        kerf: Laser beam width in mm (0.0 to 0.5). Recorded, not applied.
    """

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=3.0, ge=1.0, le=12.0)
    kerf: float = Field(default=0.15, ge=0.0, le=0.5)


class JointConfig(BaseModel):
    """Finger joint and edge settings.

    Attributes:
        finger_width: Desired finger width in mm (3.0 to 30.0).
        surrounding_spaces: Flat margin at each end of a jointed edge, in
            base finger pitches (0.0 to 4.0).
        play: Joint clearance per side in mm (0.0 to 0.5). Recorded, not applied.
        edge_width: Hole inset from the panel edge, in thicknesses (0.5 to 5.0).
        top_edge: Joint between walls and top.
        bottom_edge: Joint between walls and bottom.
    """

    model_config = ConfigDict(extra="forbid")

    finger_width: float = Field(default=10.0, ge=3.0, le=30.0)
    surrounding_spaces: float = Field(default=1.0, ge=0.0, le=4.0)
    play: float = Field(default=0.0, ge=0.0, le=0.5)
    edge_width: float = Field(default=1.5, ge=0.5, le=5.0)
    top_edge: EdgeSelector = EdgeSelector.OPEN
    bottom_edge: EdgeSelector = EdgeSelector.HOLE

    @field_validator("top_edge", "bottom_edge", mode="before")
    @classmethod
    def parse_edge_alias(cls, v: object) -> object:
        """Accept legacy codes such as "F", "h", "s", "e"."""
        if isinstance(v, str):
            try:
                return EdgeSelector(v)
            except ValueError:
                return v
        return v


class BoxConfig(BaseModel):
    """Outer box dimensions in millimetres.

    Attributes:
        width: Outer width (30.0 to 500.0).
        depth: Outer depth (30.0 to 500.0).
        height: Outer height (20.0 to 300.0).
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=100.0, ge=30.0, le=500.0)
    depth: float = Field(default=80.0, ge=30.0, le=500.0)
    height: float = Field(default=60.0, ge=20.0, le=300.0)


class SvgOutputConfigSchema(BaseModel):
    """SVG export configuration.

    Attributes:
        stroke_width: Cut line width in mm; laser software treats thin
            lines as cut paths.
        stroke_color: Cut line color.
    """

    model_config = ConfigDict(extra="forbid")

    stroke_width: float = Field(default=0.1, gt=0, le=2.0)
    stroke_color: str = "#000"


class DxfOutputConfigSchema(BaseModel):
    """DXF export configuration.

    Attributes:
        include_labels: Whether to add panel names on the LABELS layer.
    """

    model_config = ConfigDict(extra="forbid")

    include_labels: bool = True


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        formats: Export formats to write (e.g. ["svg", "dxf"]).
        output_dir: Directory for exported files (defaults to the working directory).
        project_name: Base file name; defaults to ``box-{W}x{D}x{H}``.
        svg: SVG-specific options.
        dxf: DXF-specific options.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["svg"])
    output_dir: str | None = None
    project_name: str | None = None
    svg: SvgOutputConfigSchema = Field(default_factory=SvgOutputConfigSchema)
    dxf: DxfOutputConfigSchema = Field(default_factory=DxfOutputConfigSchema)

    @field_validator("formats")
    @classmethod
    def normalize_formats(cls, v: list[str]) -> list[str]:
        """Lower-case and strip format names."""
        return [f.strip().lower() for f in v if f.strip()]


class BoxConfiguration(BaseModel):
    """Root configuration model for a box configuration file.

    Example:
        >>> config = BoxConfiguration(
        ...     schema_version="1.0",
        ...     box=BoxConfig(width=120.0, depth=90.0, height=50.0),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    box: BoxConfig = Field(default_factory=BoxConfig)
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    joints: JointConfig = Field(default_factory=JointConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
