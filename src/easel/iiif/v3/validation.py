"""
Validation for IIIF v3 resources.

Documents assembled through Canvas.paint_with() are valid by construction.
These validators re-run the same placement checks over documents that were
parsed or assembled by hand, and report problems instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

from .annotations import Motivation
from .canvas import Canvas
from .errors import ContentOutOfBoundsError, PresentationError
from .manifest import Manifest
from .painting import check_annotation
from .traversal import iter_annotations


@dataclass(frozen=True)
class ValidationIssue:
    """
    Represents a validation problem.

    Attributes:
        path: JSON path to the problematic field (e.g., "items[0].items[0].items[1]")
        message: Human-readable description of the issue
    """

    path: str
    message: str


def validate_canvas(canvas: Canvas, *, prefix: str = "") -> list[ValidationIssue]:
    """
    Validate the annotations of a canvas against its dimensions.

    Checks that:
    - Each annotation sits on a page matching its motivation
    - Each annotation targets this canvas
    - Each annotation has a non-empty body
    - Each target selector fits the canvas
    - Each body resource fits its target region

    Parameters:
        canvas: Canvas to validate
        prefix: Path prefix for issues (used by validate_manifest)

    Returns:
        List of validation issues (empty if valid)

    Example:
        >>> issues = validate_canvas(load_canvas(path))
        >>> for issue in issues:
        ...     print(f"{issue.path}: {issue.message}")
    """
    issues: list[ValidationIssue] = []
    dimensions = canvas.dimensions

    for motivation in Motivation:
        for path, annotation in iter_annotations(canvas, motivation):
            path = f"{prefix}{path}"

            if annotation.motivation is not motivation:
                issues.append(
                    ValidationIssue(
                        f"{path}.motivation",
                        f"{annotation.motivation.value} annotation on a {motivation.value} page.",
                    )
                )

            if annotation.target_id != canvas.id:
                issues.append(
                    ValidationIssue(
                        f"{path}.target",
                        f"Annotation targets {annotation.target_id}, not this canvas.",
                    )
                )
                continue

            if not any(c is not None for c in annotation.body):
                issues.append(ValidationIssue(f"{path}.body", "Annotation has no content."))
                continue

            try:
                check_annotation(annotation, dimensions)
            except PresentationError as e:
                field = "body" if isinstance(e, ContentOutOfBoundsError) else "target"
                issues.append(ValidationIssue(f"{path}.{field}", str(e)))

    return issues


def validate_manifest(manifest: Manifest) -> list[ValidationIssue]:
    """
    Validate every canvas of a manifest, plus its range references.

    Checks that:
    - The manifest has at least one canvas
    - Canvas ids are unique
    - Every canvas passes validate_canvas()
    - Every canvas a range references is in the manifest

    Parameters:
        manifest: Manifest to validate

    Returns:
        List of validation issues (empty if valid)
    """
    issues: list[ValidationIssue] = []

    if not manifest.items:
        issues.append(ValidationIssue("items", "Missing or empty items[]."))
        return issues

    seen: set[str] = set()
    for c_i, canvas in enumerate(manifest.items):
        if canvas.id in seen:
            issues.append(ValidationIssue(f"items[{c_i}].id", f"Duplicate canvas id {canvas.id}."))
        seen.add(canvas.id)
        issues.extend(validate_canvas(canvas, prefix=f"items[{c_i}]."))

    for r_i, range_ in enumerate(manifest.structures or []):
        for canvas_id in range_.canvas_ids():
            if canvas_id not in seen:
                issues.append(
                    ValidationIssue(
                        f"structures[{r_i}]",
                        f"Range references unknown canvas {canvas_id}.",
                    )
                )

    return issues
