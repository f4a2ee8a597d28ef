"""
Traversal helpers for IIIF v3 resources.

Iterate annotations and content with JSON paths for reporting, and inspect
raw JSON to tell manifests from canvases before parsing.
"""

from __future__ import annotations

from typing import Any, Iterable

from .annotations import Annotation, Motivation
from .canvas import Canvas
from .content import ContentResource

PAGE_KEYS = {
    Motivation.PAINTING: "items",
    Motivation.SUPPLEMENTING: "annotations",
}


def iter_annotations(
    canvas: Canvas, motivation: Motivation | None = None
) -> Iterable[tuple[str, Annotation]]:
    """
    Yield (path, annotation) pairs in document order.

    Paths are relative to the canvas, e.g. "items[0].items[2]" for the third
    annotation of the first painting page.

    Parameters:
        canvas: Canvas to walk
        motivation: Only walk the pages of this motivation

    Example:
        >>> for path, anno in iter_annotations(canvas, Motivation.PAINTING):
        ...     print(path, anno.id)
    """
    motivations = list(Motivation) if motivation is None else [motivation]
    for m in motivations:
        key = PAGE_KEYS[m]
        for p_i, page in enumerate(canvas.pages(m)):
            for a_i, annotation in enumerate(page.items):
                yield (f"{key}[{p_i}].items[{a_i}]", annotation)


def iter_content(canvas: Canvas) -> Iterable[ContentResource]:
    """Yield every content resource on the canvas, skipping empty choice slots."""
    for _path, annotation in iter_annotations(canvas):
        for content in annotation.body:
            if content is not None:
                yield content


def is_manifest(data: dict[str, Any]) -> bool:
    """
    Check whether raw JSON is a Manifest.

    Example:
        >>> data = load_json(path)
        >>> resource = parse_manifest(data) if is_manifest(data) else parse_canvas(data)
    """
    return data.get("type") == "Manifest"


def is_canvas(data: dict[str, Any]) -> bool:
    """Check whether raw JSON is a Canvas."""
    return data.get("type") == "Canvas"
