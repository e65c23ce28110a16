"""Application commands (use cases) for box and drawer generation."""

from __future__ import annotations

import logging
from typing import Sequence

from boxmaker.domain.services import (
    ImportedArtwork,
    compute_layout_metrics,
    generate_box_geometry,
    generate_open_front_geometry,
    generate_sliding_drawer,
    merge_imported_artwork,
    validate_box_settings,
    validate_drawer_settings,
)
from boxmaker.domain.value_objects import BoxSettings, DrawerSettings, GeneratedFace
from boxmaker.infrastructure.sheet_packer import ShelfPacker

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)

ArtworkPlacement = tuple[str, ImportedArtwork]


def _apply_artwork(
    faces: list[GeneratedFace], artwork: Sequence[ArtworkPlacement]
) -> tuple[list[GeneratedFace], list[str]]:
    """Merge artwork onto panels by id; unknown ids become errors."""
    errors: list[str] = []
    by_id = {face.id: i for i, face in enumerate(faces)}
    merged = list(faces)
    for face_id, piece in artwork:
        index = by_id.get(face_id)
        if index is None:
            errors.append(f"Artwork target '{face_id}' does not match any panel")
            continue
        merged[index] = merge_imported_artwork(merged[index], piece)
    return merged, errors


def _finish(
    output: LayoutOutput,
    faces: list[GeneratedFace],
    warnings: Sequence[str],
    packer: ShelfPacker,
) -> LayoutOutput:
    layout = packer.pack(faces)
    output.faces = faces
    output.layout = layout
    output.metrics = compute_layout_metrics(
        faces,
        overflow_ids=(p.face.id for p in layout.overflowed),
        layout_width=layout.width,
        layout_height=layout.height,
    )
    output.warnings = list(warnings) + list(layout.warnings)
    return output


class GenerateBoxCommand:
    """Command to generate and lay out the panels of a box."""

    def __init__(self, packer: ShelfPacker | None = None) -> None:
        self.packer = packer or ShelfPacker()

    def execute(
        self,
        settings: BoxSettings,
        open_front: bool = False,
        artwork: Sequence[ArtworkPlacement] = (),
    ) -> LayoutOutput:
        """Execute box generation.

        Args:
            settings: Box parameters.
            open_front: Build an open-front shell instead of a closed box.
            artwork: Pairs of panel id and artwork to merge onto it.

        Returns:
            LayoutOutput with panels, layout and metrics, or with errors
            and no panels when the settings are rejected.

        Raises:
            PathSyntaxError: If an artwork path is malformed.
        """
        advisories = validate_box_settings(settings)
        output = LayoutOutput(
            kind="box", settings=settings, advisories=list(advisories.warnings)
        )
        if not advisories.is_valid:
            output.errors = list(advisories.errors)
            return output

        if open_front:
            result = generate_open_front_geometry(settings)
        else:
            result = generate_box_geometry(settings)
        output.dimensions = result.dimensions

        faces, errors = _apply_artwork(list(result.faces), artwork)
        if errors:
            output.errors = errors
            return output

        logger.debug("Box generated with %d panels", len(faces))
        return _finish(output, faces, result.warnings, self.packer)


class GenerateDrawerCommand:
    """Command to generate and lay out a sliding drawer and its shell."""

    def __init__(self, packer: ShelfPacker | None = None) -> None:
        self.packer = packer or ShelfPacker()

    def execute(
        self,
        settings: DrawerSettings,
        artwork: Sequence[ArtworkPlacement] = (),
    ) -> LayoutOutput:
        """Execute drawer generation.

        Raises:
            PathSyntaxError: If an artwork path is malformed.
        """
        advisories = validate_drawer_settings(settings)
        output = LayoutOutput(
            kind="drawer", settings=settings, advisories=list(advisories.warnings)
        )
        if not advisories.is_valid:
            output.errors = list(advisories.errors)
            return output

        result = generate_sliding_drawer(settings)
        output.dimensions = result.dimensions

        faces, errors = _apply_artwork(list(result.faces), artwork)
        if errors:
            output.errors = errors
            return output

        logger.debug("Drawer generated with %d panels", len(faces))
        return _finish(output, faces, result.warnings, self.packer)
