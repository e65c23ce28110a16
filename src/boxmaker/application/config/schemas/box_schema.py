"""Box configuration schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from boxmaker.application.config.schemas.base import (
    ArtworkConfig,
    BoxTypeConfig,
    DimensionReferenceConfig,
    DividerConfig,
    FingerConfig,
    LidTypeConfig,
    MaterialConfig,
)


class LidConfig(BaseModel):
    """Lid style and its sizing.

    Attributes:
        type: Lid style.
        groove_depth: Sliding-lid groove height in mm.
        groove_offset: Distance from the side panel top to the groove in mm.
        lip_inset: Inset of the lid lip from the inner walls in mm.
        lip_height: Height of the lid lip strips in mm.
    """

    model_config = ConfigDict(extra="forbid")

    type: LidTypeConfig = LidTypeConfig.NONE
    groove_depth: float = Field(default=2.0, ge=0.0)
    groove_offset: float = Field(default=3.0, ge=0.0)
    lip_inset: float = Field(default=2.0, ge=0.0)
    lip_height: float = Field(default=8.0, ge=0.0)


class BoxConfig(BaseModel):
    """Configuration for a finger-jointed box.

    Attributes:
        width: Width in mm (1 to 5000).
        height: Height in mm (1 to 5000).
        depth: Depth in mm (1 to 5000).
        dimension_reference: Whether the sizes are inside or outside.
        style: Joint layout.
        open_front: Build an open-front shell instead of a closed box.
        material: Sheet material.
        fingers: Finger joint sizing.
        lid: Lid style.
        dividers: Compartment grid.
        artwork: Artwork merged onto panels.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=1.0, le=5000.0)
    height: float = Field(..., ge=1.0, le=5000.0)
    depth: float = Field(..., ge=1.0, le=5000.0)
    dimension_reference: DimensionReferenceConfig = DimensionReferenceConfig.INSIDE
    style: BoxTypeConfig = BoxTypeConfig.FINGER_ALL_EDGES
    open_front: bool = False
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    fingers: FingerConfig = Field(default_factory=FingerConfig)
    lid: LidConfig = Field(default_factory=LidConfig)
    dividers: DividerConfig = Field(default_factory=DividerConfig)
    artwork: list[ArtworkConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_open_front_style(self) -> "BoxConfig":
        """Open-front shells are always fully finger-jointed."""
        if self.open_front and self.style is not BoxTypeConfig.FINGER_ALL_EDGES:
            raise ValueError("open_front requires style 'finger_all_edges'")
        return self
