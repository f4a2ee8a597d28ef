"""
Annotation assembly.

Painting and supplementing are validate-then-commit: the target region is
resolved and every content resource checked before the canvas is touched.
Each call appends exactly one annotation; separate calls are never merged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from .annotations import (
    Annotation,
    AnnotationPage,
    FragmentSelector,
    Motivation,
    SpecificResource,
)
from .compatibility import check_body_fits
from .content import ContentResource
from .dimensions import Dimensions
from .errors import ArgumentError, NO_CONTENT
from .selectors import MediaFragmentSelector, Region, full_region, resolve_selector

if TYPE_CHECKING:
    from .canvas import Canvas

logger = logging.getLogger(__name__)


def annotation_base(canvas_id: str) -> str:
    """
    Base URI for ids derived from a canvas id.

    Example:
        >>> annotation_base("https://example.org/iiif/book1/page1/canvas-1")
        'https://example.org/iiif/book1/page1/annotation'
    """
    parent = canvas_id.rstrip("/").rsplit("/", 1)[0]
    return f"{parent}/annotation"


def page_id(canvas_id: str, motivation: Motivation, number: int = 1) -> str:
    return f"{annotation_base(canvas_id)}/{motivation.value}-page-{number}"


def annotation_id(canvas_id: str, motivation: Motivation, number: int) -> str:
    return f"{annotation_base(canvas_id)}/{motivation.value}-{number}"


def resolve_target(
    dimensions: Dimensions,
    selector: MediaFragmentSelector | str | None,
    *,
    canvas_id: str | None = None,
) -> Region:
    """Whole-canvas region when selector is None, else the resolved selector."""
    if selector is None:
        return full_region(dimensions)
    return resolve_selector(dimensions, selector, canvas_id=canvas_id)


def check_annotation(annotation: Annotation, dimensions: Dimensions) -> None:
    """
    Re-check an existing annotation against canvas dimensions.

    Raises:
        ArgumentError: If the target selector is malformed
        SelectorOutOfBoundsError: If the target selector no longer fits
        ContentOutOfBoundsError: If a body resource no longer fits
    """
    region = resolve_target(
        dimensions, annotation.target_selector(), canvas_id=annotation.target_id
    )
    check_body_fits(annotation.body, region)


def place(
    canvas: Canvas,
    resources: Sequence[ContentResource | None],
    *,
    motivation: Motivation,
    selector: MediaFragmentSelector | str | None = None,
) -> Annotation:
    """
    Validate content against a canvas region and append one annotation.

    Parameters:
        canvas: Canvas to annotate
        resources: Content resources; several are alternatives (a Choice),
            None entries are empty choice slots
        motivation: Which page list the annotation goes to
        selector: Optional region of the canvas; whole canvas when None

    Returns:
        The committed annotation

    Raises:
        ArgumentError: If no content resource is given or the selector is
            malformed
        SelectorOutOfBoundsError: If the selector does not fit the canvas
        ContentOutOfBoundsError: If any resource does not fit the region
    """
    body = list(resources)
    if not any(c is not None for c in body):
        raise ArgumentError(NO_CONTENT)
    for content in body:
        if content is not None and not isinstance(content, ContentResource):
            raise ArgumentError(f"Not a content resource: {content!r}")

    region = resolve_target(canvas.dimensions, selector, canvas_id=canvas.id)
    check_body_fits(body, region)

    # Commit
    pages = canvas.pages(motivation)
    if not pages:
        pages.append(AnnotationPage(id=page_id(canvas.id, motivation)))

    taken = {a.id for a in canvas.annotations()}
    number = sum(1 for _ in canvas.annotations(motivation)) + 1
    while annotation_id(canvas.id, motivation, number) in taken:
        number += 1
    if region.selector is None:
        target: SpecificResource | str = canvas.id
    else:
        target = SpecificResource(
            source=canvas.id, selector=FragmentSelector.from_selector(region.selector)
        )

    annotation = Annotation(
        id=annotation_id(canvas.id, motivation, number),
        motivation=motivation,
        body=body,
        target=target,
    )
    pages[0].items.append(annotation)

    logger.debug(
        "Added annotation",
        extra={
            "canvas_id": canvas.id,
            "annotation_id": annotation.id,
            "motivation": motivation.value,
            "body_size": len(body),
            "selector": None if region.selector is None else region.selector.value,
        },
    )
    return annotation
