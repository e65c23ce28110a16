"""Adapter to convert BoxmakerConfiguration into domain settings.

The pydantic models describe the file format; the engine only accepts its
own frozen settings dataclasses. The functions below map one onto the
other.
"""

from boxmaker.application.config.schemas import (
    ArtworkConfig,
    BoxConfig,
    BoxmakerConfiguration,
    DrawerConfig,
    LayoutConfig,
)
from boxmaker.domain.services import ImportedArtwork
from boxmaker.domain.value_objects import BoxSettings, DrawerSettings
from boxmaker.infrastructure.sheet_packer import SheetSettings


def box_config_to_settings(box: BoxConfig) -> BoxSettings:
    """Convert a BoxConfig section to BoxSettings."""
    return BoxSettings(
        width=box.width,
        height=box.height,
        depth=box.depth,
        dimension_reference=box.dimension_reference,
        material_thickness=box.material.thickness,
        kerf=box.material.kerf,
        apply_kerf_compensation=box.material.apply_kerf_compensation,
        box_type=box.style,
        finger_min=box.fingers.min,
        finger_max=box.fingers.max,
        auto_finger_count=box.fingers.auto_count,
        manual_finger_count=box.fingers.manual_count,
        lid_type=box.lid.type,
        groove_depth=box.lid.groove_depth,
        groove_offset=box.lid.groove_offset,
        lip_inset=box.lid.lip_inset,
        lip_height=box.lid.lip_height,
        dividers_enabled=box.dividers.enabled,
        divider_count_x=box.dividers.count_x,
        divider_count_z=box.dividers.count_z,
        divider_clearance=box.dividers.clearance,
    )


def drawer_config_to_settings(drawer: DrawerConfig) -> DrawerSettings:
    """Convert a DrawerConfig section to DrawerSettings."""
    return DrawerSettings(
        width=drawer.width,
        depth=drawer.depth,
        height=drawer.height,
        material_thickness=drawer.material.thickness,
        kerf=drawer.material.kerf,
        clearance=drawer.clearance,
        bottom_offset=drawer.bottom_offset,
        finger_width=drawer.finger_width,
        dividers_enabled=drawer.dividers.enabled,
        divider_count_x=drawer.dividers.count_x,
        divider_count_z=drawer.dividers.count_z,
        divider_clearance=drawer.dividers.clearance,
    )


def layout_config_to_sheet(layout: LayoutConfig) -> SheetSettings:
    """Convert the layout section to SheetSettings."""
    return SheetSettings(
        width=layout.sheet_width,
        height=layout.sheet_height,
        spacing=layout.spacing,
        arrange_on_sheet=layout.arrange_on_sheet,
        auto_rotate=layout.auto_rotate,
    )


def artwork_config_to_placements(
    artwork: list[ArtworkConfig],
) -> list[tuple[str, ImportedArtwork]]:
    """Convert artwork entries to (panel id, ImportedArtwork) pairs."""
    return [
        (
            item.face,
            ImportedArtwork(
                path=item.path,
                x=item.x,
                y=item.y,
                scale=item.scale,
                rotation=item.rotation,
                op=item.operation,
            ),
        )
        for item in artwork
    ]


def config_to_artwork(config: BoxmakerConfiguration) -> list[tuple[str, ImportedArtwork]]:
    """Artwork placements of whichever project the configuration holds."""
    project = config.box if config.box is not None else config.drawer
    if project is None:
        return []
    return artwork_config_to_placements(project.artwork)
