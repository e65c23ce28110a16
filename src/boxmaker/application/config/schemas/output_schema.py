"""Sheet layout and export sections of a configuration file."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Formats in the order they are written when "all" is requested
EXPORT_FORMAT_NAMES: tuple[str, ...] = ("svg", "dxf", "json")


class LayoutConfig(BaseModel):
    """Sheet the panels are packed onto.

    Attributes:
        sheet_width: Stock sheet width in mm.
        sheet_height: Stock sheet height in mm.
        spacing: Gap between panels in mm.
        arrange_on_sheet: Pack within the sheet; otherwise use preview bounds.
        auto_rotate: Allow 90 degree rotation of non-square panels.
    """

    model_config = ConfigDict(extra="forbid")

    sheet_width: float = Field(default=300.0, gt=0)
    sheet_height: float = Field(default=200.0, gt=0)
    spacing: float = Field(default=3.0, ge=0.0)
    arrange_on_sheet: bool = False
    auto_rotate: bool = False

    @model_validator(mode="after")
    def spacing_fits_sheet(self) -> "LayoutConfig":
        if self.spacing >= min(self.sheet_width, self.sheet_height):
            raise ValueError(
                f"spacing ({self.spacing} mm) leaves no room on a "
                f"{self.sheet_width} x {self.sheet_height} mm sheet"
            )
        return self


class SvgOutputConfigSchema(BaseModel):
    """Options passed to the SVG exporter."""

    model_config = ConfigDict(extra="forbid")

    show_labels: bool = False
    margin: float = Field(default=0.0, ge=0.0)


class DxfOutputConfigSchema(BaseModel):
    """Options passed to the DXF exporter.

    ``flatten_step`` is the chord length for sampled curves; the exporter
    raises anything below 0.25 mm to 0.25 mm.
    """

    model_config = ConfigDict(extra="forbid")

    flatten_step: float = Field(default=0.5, gt=0)
    show_labels: bool = False


class JsonOutputConfigSchema(BaseModel):
    """Options passed to the JSON exporter (indent 0 for compact output)."""

    model_config = ConfigDict(extra="forbid")

    include_paths: bool = True
    indent: int = Field(default=2, ge=0)


class OutputConfig(BaseModel):
    """Which files to write, where, and with which exporter options.

    ``formats`` accepts a list or a comma-separated string. Names are
    lower-cased, "all" expands to every format and duplicates are dropped,
    so the stored list is exactly the set of files to write. Files are named
    ``{project_name}_{format}.{ext}``; the name may not contain a path
    separator.

    The JSON options live under the ``json`` key in files.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    formats: list[str] = Field(default_factory=list)
    output_dir: str | None = None
    project_name: str = Field(default="box", min_length=1, pattern=r"^[^/\\]+$")

    svg: SvgOutputConfigSchema | None = None
    dxf: DxfOutputConfigSchema | None = None
    json_options: JsonOutputConfigSchema | None = Field(default=None, alias="json")

    @field_validator("formats", mode="before")
    @classmethod
    def normalise_formats(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, list) or not all(isinstance(name, str) for name in v):
            return v

        requested: list[str] = []
        for name in (n.strip().lower() for n in v):
            expanded = EXPORT_FORMAT_NAMES if name == "all" else (name,)
            requested.extend(n for n in expanded if n and n not in requested)

        unknown = [n for n in requested if n not in EXPORT_FORMAT_NAMES]
        if unknown:
            raise ValueError(
                f"Invalid formats: {', '.join(unknown)}. "
                f"Choose from {', '.join(EXPORT_FORMAT_NAMES)} or all"
            )
        return requested

    def exporter_options(self) -> dict[str, dict[str, Any]]:
        """Constructor keyword arguments per format, for formats with options."""
        sections = {"svg": self.svg, "dxf": self.dxf, "json": self.json_options}
        return {name: options.model_dump() for name, options in sections.items() if options is not None}
