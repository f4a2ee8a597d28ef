"""
Pydantic model for IIIF Presentation 3.0 canvases.

A canvas is a coordinate space: spatial (width/height), temporal
(duration), or both. Content is placed on it with paint_with() and
supplement_with(), which check the content against the canvas (or a region
of it) before adding any annotation.
"""

from __future__ import annotations

from typing import Any, Iterator, Literal, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from .annotations import Annotation, AnnotationPage, Motivation
from .content import ContentResource
from .dimensions import DimensionKind, Dimensions, check_duration, check_width_height
from .painting import check_annotation, place
from .properties import LanguageMap, language_map
from .selectors import MediaFragmentSelector


class Canvas(BaseModel):
    """
    IIIF canvas (a page, a track, a video segment).

    Painting pages are written as `items` and supplementing pages as
    `annotations`, per the Presentation 3.0 layout.

    Example:
        >>> canvas = Canvas(id="https://example.org/iiif/book1/page1/canvas-1", label="p. 1")
        >>> canvas.set_width_height(480, 360).paint_with(
        ...     ImageContent(id="https://example.org/page1.jpg").set_width_height(480, 360)
        ... )
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: Literal["Canvas"] = "Canvas"
    label: LanguageMap | None = None
    width: int | None = None
    height: int | None = None
    duration: float | None = None
    painting_pages: list[AnnotationPage] = Field(default_factory=list, alias="items")
    supplementing_pages: list[AnnotationPage] = Field(
        default_factory=list, alias="annotations"
    )

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> Any:
        return language_map(value)

    @model_validator(mode="after")
    def check_dimensions(self) -> Self:
        # Raises ArgumentError (surfaced as a ValidationError) on bad extents
        Dimensions(self.width, self.height, self.duration)
        return self

    @model_serializer(mode="wrap")
    def drop_empty_pages(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in ("items", "annotations", "painting_pages", "supplementing_pages"):
            if key in data and not data[key]:
                del data[key]
        return data

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height, self.duration)

    @property
    def kind(self) -> DimensionKind:
        return self.dimensions.kind

    def pages(self, motivation: Motivation) -> list[AnnotationPage]:
        """Page list for a motivation (the live list, not a copy)."""
        if motivation is Motivation.PAINTING:
            return self.painting_pages
        return self.supplementing_pages

    def annotations(self, motivation: Motivation | None = None) -> Iterator[Annotation]:
        """Iterate annotations in document order, optionally for one motivation."""
        motivations = list(Motivation) if motivation is None else [motivation]
        for m in motivations:
            for page in self.pages(m):
                yield from page.items

    def _revalidate(self, dimensions: Dimensions) -> None:
        for annotation in self.annotations():
            check_annotation(annotation, dimensions)

    def set_width_height(self, width: int, height: int) -> Self:
        """
        Give the canvas spatial dimensions.

        If the canvas already has annotations they are re-checked against the
        new dimensions first; nothing changes when any would no longer fit.

        Raises:
            ArgumentError: Unless both are strictly positive integers
            SelectorOutOfBoundsError: If an existing target would fall outside
            ContentOutOfBoundsError: If existing content would no longer fit
        """
        width, height = check_width_height(width, height)
        self._revalidate(Dimensions(width, height, self.duration))
        self.width, self.height = width, height
        return self

    def set_duration(self, duration: float) -> Self:
        """
        Give the canvas a temporal dimension (seconds).

        Existing annotations are re-checked as for set_width_height().

        Raises:
            ArgumentError: For zero, negative or non-finite values
            SelectorOutOfBoundsError: If an existing target would fall outside
            ContentOutOfBoundsError: If existing content would no longer fit
        """
        duration = check_duration(duration)
        self._revalidate(Dimensions(self.width, self.height, duration))
        self.duration = duration
        return self

    def paint_with(
        self,
        *resources: ContentResource | None,
        selector: MediaFragmentSelector | str | None = None,
    ) -> Self:
        """
        Paint content onto the canvas or a region of it.

        One resource makes a single-resource annotation; several in one call
        are alternatives and make one Choice annotation, first being the
        default. Each call adds a new annotation.

        Parameters:
            resources: Content resources; None marks an empty choice slot
            selector: Region as a selector or media fragment string
                (e.g. "xywh=0,0,480,360", "t=0,300"); whole canvas if None

        Returns:
            This canvas, for chaining

        Raises:
            ArgumentError: If no resource is given or the selector is malformed
            SelectorOutOfBoundsError: If the selector does not fit the canvas
            ContentOutOfBoundsError: If a resource does not fit the region
        """
        place(self, resources, motivation=Motivation.PAINTING, selector=selector)
        return self

    def supplement_with(
        self,
        *resources: ContentResource | None,
        selector: MediaFragmentSelector | str | None = None,
    ) -> Self:
        """Like paint_with(), for supplementing content (transcriptions, captions)."""
        place(self, resources, motivation=Motivation.SUPPLEMENTING, selector=selector)
        return self

    def set_painting_pages(self, *pages: AnnotationPage) -> Self:
        self.painting_pages = list(pages)
        return self

    def set_supplementing_pages(self, *pages: AnnotationPage) -> Self:
        self.supplementing_pages = list(pages)
        return self
