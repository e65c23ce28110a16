"""Domain services for box and drawer generation.

This package provides the geometry engine:
- Finger pattern generation and edge tracing
- Panel outline assembly, simplification and path emission
- Box, open-front shell and sliding drawer composition
- Imported artwork merging, layout metrics and settings advisories
"""

from .artwork import ImportedArtwork, merge_imported_artwork
from .box_composer import (
    ALIGNMENT_EPSILON,
    BoxComposer,
    build_divider_faces,
    check_panel_alignment,
    compute_box_dimensions,
    generate_box_geometry,
    generate_open_front_geometry,
)
from .drawer_composer import (
    compute_drawer_dimensions,
    drawer_warnings,
    generate_sliding_drawer,
)
from .edge_builder import build_edge_vertices, effective_tab_states
from .finger_pattern import calculate_finger_count, generate_finger_pattern
from .metrics import (
    LayoutMetrics,
    SettingsAdvisories,
    compute_layout_metrics,
    path_length,
    validate_box_settings,
    validate_drawer_settings,
)
from .outline import (
    is_simplified,
    polygon_area,
    simplify_closed_vertices,
    simplify_vertices,
    vertices_to_outline_path,
)
from .panel_assembler import (
    OutwardSigns,
    PanelEdges,
    RectOutline,
    ThumbNotchSpec,
    build_rect_outline,
    carve_thumb_notch,
    clamp,
    clone_face,
    create_rect_face,
    create_vertical_finger_face,
)
from .path_parser import Subpath, parse_path

__all__ = [
    # Finger joints
    "generate_finger_pattern",
    "calculate_finger_count",
    "build_edge_vertices",
    "effective_tab_states",
    # Outlines
    "simplify_vertices",
    "simplify_closed_vertices",
    "is_simplified",
    "polygon_area",
    "vertices_to_outline_path",
    "Subpath",
    "parse_path",
    # Panel assembly
    "PanelEdges",
    "OutwardSigns",
    "RectOutline",
    "ThumbNotchSpec",
    "build_rect_outline",
    "carve_thumb_notch",
    "clamp",
    "clone_face",
    "create_rect_face",
    "create_vertical_finger_face",
    # Composition
    "ALIGNMENT_EPSILON",
    "BoxComposer",
    "build_divider_faces",
    "check_panel_alignment",
    "compute_box_dimensions",
    "generate_box_geometry",
    "generate_open_front_geometry",
    "compute_drawer_dimensions",
    "drawer_warnings",
    "generate_sliding_drawer",
    # Artwork
    "ImportedArtwork",
    "merge_imported_artwork",
    # Metrics and advisories
    "LayoutMetrics",
    "SettingsAdvisories",
    "compute_layout_metrics",
    "path_length",
    "validate_box_settings",
    "validate_drawer_settings",
]
