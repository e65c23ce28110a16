"""Base enums and shared models for boxmaker configuration schemas.

Domain enums are used directly; they are ``(str, Enum)`` types so JSON
values validate against them without translation.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from boxmaker.domain.value_objects import (
    BoxType,
    DimensionReference,
    LidType,
    PathOperation,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with box, drawer, layout and output sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

BoxTypeConfig = BoxType
LidTypeConfig = LidType
DimensionReferenceConfig = DimensionReference
PathOperationConfig = PathOperation


class MaterialConfig(BaseModel):
    """Sheet material for all panels.

    Attributes:
        thickness: Material thickness in mm (0.5 to 50).
        kerf: Beam width in mm (0 to 5).
        apply_kerf_compensation: Flag recorded for downstream tooling.
    """

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=3.0, ge=0.5, le=50.0)
    kerf: float = Field(default=0.1, ge=0.0, le=5.0)
    apply_kerf_compensation: bool = False


class DividerConfig(BaseModel):
    """Compartment divider grid.

    Attributes:
        enabled: Whether dividers are generated.
        count_x: Compartments along the width (1 to 50).
        count_z: Compartments along the depth (1 to 50).
        clearance: Extra slot width beyond the material thickness in mm.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    count_x: int = Field(default=1, ge=1, le=50)
    count_z: int = Field(default=1, ge=1, le=50)
    clearance: float = Field(default=0.2, ge=0.0, le=10.0)


class ArtworkConfig(BaseModel):
    """Externally produced artwork merged onto one panel.

    Attributes:
        face: Id of the target panel (e.g. "front", "drawer-front").
        path: Path string using M/L/H/V/Z/C/Q commands.
        x: Panel x of the artwork centre in mm.
        y: Panel y of the artwork centre in mm, measured down from the top.
        scale: Uniform scale factor.
        rotation: Clockwise rotation in degrees.
        operation: Cut operation for the merged path.
    """

    model_config = ConfigDict(extra="forbid")

    face: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1)
    x: float = 0.0
    y: float = 0.0
    scale: float = Field(default=1.0, gt=0)
    rotation: float = 0.0
    operation: PathOperation = PathOperation.ENGRAVE


class FingerConfig(BaseModel):
    """Finger joint sizing.

    Attributes:
        min: Smallest finger width in mm.
        max: Largest finger width in mm.
        auto_count: Derive the vertical-edge tab count automatically.
        manual_count: Tab count used when auto_count is off.
    """

    model_config = ConfigDict(extra="forbid")

    min: float = Field(default=5.0, gt=0, le=100.0)
    max: float = Field(default=15.0, gt=0, le=100.0)
    auto_count: bool = True
    manual_count: int | None = Field(default=None, ge=1, le=999)

    @model_validator(mode="after")
    def validate_manual_count(self) -> "FingerConfig":
        """Require a manual count when automatic counting is off."""
        if not self.auto_count and self.manual_count is None:
            raise ValueError("manual_count is required when auto_count is false")
        return self
