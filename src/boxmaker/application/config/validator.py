"""Advisory checks for box and drawer configurations.

Pydantic already enforces field types and bounds. The checks here cover
combinations of fields that produce valid but doubtful geometry, and
references (artwork targets, path strings) that can only be checked
against the generated panels. Each check yields ``ConfigIssue`` records;
``validate_config`` collects them into a ``ValidationResult``.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from boxmaker.application.config.adapter import (
    box_config_to_settings,
    drawer_config_to_settings,
    layout_config_to_sheet,
)
from boxmaker.application.config.schemas import (
    ArtworkConfig,
    BoxConfig,
    BoxmakerConfiguration,
    DrawerConfig,
)
from boxmaker.domain.exceptions import PathSyntaxError
from boxmaker.domain.services import (
    SettingsAdvisories,
    compute_box_dimensions,
    generate_box_geometry,
    generate_open_front_geometry,
    generate_sliding_drawer,
    parse_path,
    validate_box_settings,
    validate_drawer_settings,
)
from boxmaker.domain.value_objects import GeneratedFace, LidType


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ConfigIssue:
    """One finding against a configuration field.

    Attributes:
        severity: ERROR blocks generation, WARNING does not.
        path: JSON path of the field (e.g. "box.lid.groove_offset").
        message: What is wrong.
        value: The offending value, for errors.
        suggestion: How to fix it, for warnings.
    """

    severity: Severity
    path: str
    message: str
    value: Any = None
    suggestion: str | None = None


def error(path: str, message: str, value: Any = None) -> ConfigIssue:
    return ConfigIssue(Severity.ERROR, path, message, value=value)


def warning(path: str, message: str, suggestion: str | None = None) -> ConfigIssue:
    return ConfigIssue(Severity.WARNING, path, message, suggestion=suggestion)


@dataclass
class ValidationResult:
    """Issues found in one configuration, in the order they were found."""

    issues: list[ConfigIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ConfigIssue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ConfigIssue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors, 2 with warnings only, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def extend(self, issues: Iterable[ConfigIssue]) -> "ValidationResult":
        self.issues.extend(issues)
        return self


def _from_advisories(path: str, advisories: SettingsAdvisories) -> Iterator[ConfigIssue]:
    for message in advisories.errors:
        yield error(path, message)
    for message in advisories.warnings:
        yield warning(path, message)


def check_artwork(
    artwork: list[ArtworkConfig], faces: tuple[GeneratedFace, ...], section: str
) -> Iterator[ConfigIssue]:
    """Artwork must target a generated panel and carry a parsable path."""
    face_ids = sorted(face.id for face in faces)
    for i, item in enumerate(artwork):
        base = f"{section}.artwork[{i}]"
        if item.face not in face_ids:
            yield error(
                f"{base}.face",
                f"Unknown panel '{item.face}'. Available panels: {', '.join(face_ids)}",
                item.face,
            )
        try:
            parse_path(item.path)
        except PathSyntaxError as e:
            yield error(f"{base}.path", str(e), item.path)


def check_sheet_fit(
    config: BoxmakerConfiguration, faces: tuple[GeneratedFace, ...]
) -> Iterator[ConfigIssue]:
    """Panels that can never fit an arranged sheet, in either orientation."""
    if not config.layout.arrange_on_sheet:
        return

    sheet = layout_config_to_sheet(config.layout)
    for face in faces:
        upright = face.width <= sheet.width and face.height <= sheet.height
        turned = face.height <= sheet.width and face.width <= sheet.height
        if upright or (sheet.auto_rotate and turned):
            continue
        yield warning(
            "layout",
            f"Panel '{face.id}' ({face.width:.1f} x {face.height:.1f} mm) "
            f"is larger than the {sheet.width:.0f} x {sheet.height:.0f} mm sheet",
            suggestion="Use a larger sheet or enable auto_rotate",
        )


def _lid_and_divider_checks(box: BoxConfig, inner_height: float) -> Iterator[ConfigIssue]:
    lid = box.lid
    if lid.type is LidType.SLIDING_LID and lid.groove_offset >= inner_height:
        yield warning(
            "box.lid.groove_offset",
            "Groove offset is below the inner height; no groove will be scored",
        )
    if lid.type is LidType.FLAT_LID_WITH_LIP and lid.lip_height > inner_height:
        yield warning("box.lid.lip_height", "Lip is taller than the box cavity")
    if box.dividers.enabled and box.dividers.count_x == 1 and box.dividers.count_z == 1:
        yield warning(
            "box.dividers",
            "Dividers are enabled but a 1x1 grid produces no divider panels",
        )


def check_box(config: BoxmakerConfiguration, box: BoxConfig) -> Iterator[ConfigIssue]:
    """Settings advisories, lid and divider sanity, artwork and sheet fit for a box."""
    settings = box_config_to_settings(box)
    yield from _from_advisories("box", validate_box_settings(settings))
    yield from _lid_and_divider_checks(box, compute_box_dimensions(settings).inner_height)

    compose = generate_open_front_geometry if box.open_front else generate_box_geometry
    geometry = compose(settings)
    for message in geometry.warnings:
        yield warning("box", message)
    yield from check_artwork(box.artwork, geometry.faces, "box")
    yield from check_sheet_fit(config, geometry.faces)


def check_drawer(config: BoxmakerConfiguration, drawer: DrawerConfig) -> Iterator[ConfigIssue]:
    """Settings advisories, artwork and sheet fit for a sliding drawer."""
    settings = drawer_config_to_settings(drawer)
    yield from _from_advisories("drawer", validate_drawer_settings(settings))

    geometry = generate_sliding_drawer(settings)
    for message in geometry.warnings:
        yield warning("drawer", message)
    yield from check_artwork(drawer.artwork, geometry.faces, "drawer")
    yield from check_sheet_fit(config, geometry.faces)


def validate_config(config: BoxmakerConfiguration) -> ValidationResult:
    """Run every check that applies to the configured project."""
    result = ValidationResult()
    if config.box is not None:
        result.extend(check_box(config, config.box))
    if config.drawer is not None:
        result.extend(check_drawer(config, config.drawer))
    return result
