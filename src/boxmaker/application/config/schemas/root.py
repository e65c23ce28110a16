"""Root configuration schema.

This module contains the BoxmakerConfiguration model, the top-level
structure of a configuration file.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from boxmaker.application.config.schemas.base import SUPPORTED_VERSIONS
from boxmaker.application.config.schemas.box_schema import BoxConfig
from boxmaker.application.config.schemas.drawer_schema import DrawerConfig
from boxmaker.application.config.schemas.output_schema import LayoutConfig, OutputConfig


class BoxmakerConfiguration(BaseModel):
    """Root configuration model.

    Exactly one of ``box`` and ``drawer`` must be given.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        box: Finger-jointed box configuration
        drawer: Sliding drawer configuration
        layout: Sheet arrangement configuration
        output: Output format configuration

    Example:
        >>> config = BoxmakerConfiguration(
        ...     schema_version="1.0",
        ...     box=BoxConfig(width=100.0, height=60.0, depth=80.0)
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    box: BoxConfig | None = None
    drawer: DrawerConfig | None = None
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
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

    @model_validator(mode="after")
    def validate_single_project(self) -> "BoxmakerConfiguration":
        """Validate that exactly one of 'box' or 'drawer' is configured."""
        if self.box is None and self.drawer is None:
            raise ValueError("Specify either 'box' or 'drawer'")
        if self.box is not None and self.drawer is not None:
            raise ValueError("Specify either 'box' or 'drawer', not both")
        return self
