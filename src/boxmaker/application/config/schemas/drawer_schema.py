"""Sliding drawer configuration schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from boxmaker.application.config.schemas.base import (
    ArtworkConfig,
    DividerConfig,
    MaterialConfig,
)


class DrawerConfig(BaseModel):
    """Configuration for an open-front shell with a sliding drawer.

    Width, depth and height are the shell's outside dimensions.

    Attributes:
        width: Shell width in mm (10 to 5000).
        depth: Shell depth in mm (10 to 5000).
        height: Shell height in mm (10 to 5000).
        material: Sheet material.
        clearance: Running clearance between drawer and shell in mm.
        bottom_offset: Gap below the drawer in mm.
        finger_width: Fixed finger width for all joints in mm.
        dividers: Compartment grid inside the drawer.
        artwork: Artwork merged onto panels.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=120.0, ge=10.0, le=5000.0)
    depth: float = Field(default=80.0, ge=10.0, le=5000.0)
    height: float = Field(default=60.0, ge=10.0, le=5000.0)
    material: MaterialConfig = Field(
        default_factory=lambda: MaterialConfig(thickness=3.0, kerf=0.15)
    )
    clearance: float = Field(default=1.0, ge=0.0, le=50.0)
    bottom_offset: float = Field(default=0.0, ge=0.0)
    finger_width: float = Field(default=10.0, ge=1.0, le=50.0)
    dividers: DividerConfig = Field(default_factory=DividerConfig)
    artwork: list[ArtworkConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_bottom_offset(self) -> "DrawerConfig":
        """The bottom offset may not exceed half the shell height."""
        if self.bottom_offset > self.height / 2:
            raise ValueError("bottom_offset exceeds half the shell height")
        return self
