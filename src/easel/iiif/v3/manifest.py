"""
Pydantic models for IIIF Presentation 3.0 manifests and ranges.

Only the parts that interact with painted canvases are modelled: a manifest
orders its canvases, a range groups canvases (or regions of them) into
structure such as chapters or tracks.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Self, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .annotations import FragmentSelector, SpecificResource
from .canvas import Canvas
from .properties import PRESENTATION_CONTEXT, LanguageMap, language_map
from .selectors import MediaFragmentSelector, resolve_selector


class CanvasReference(BaseModel):
    """Reference to a canvas by id, as used inside ranges."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: Literal["Canvas"] = "Canvas"


class Range(BaseModel):
    """
    IIIF range: an ordered grouping of canvases, canvas regions and ranges.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: Literal["Range"] = "Range"
    label: LanguageMap | None = None
    items: list[RangeItem] = Field(default_factory=list)

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> Any:
        return language_map(value)

    def add_canvas(
        self, canvas: Canvas, selector: MediaFragmentSelector | str | None = None
    ) -> Self:
        """
        Add a canvas, or a region of it, to the range.

        Parameters:
            canvas: Canvas to reference
            selector: Optional region, checked against the canvas dimensions

        Raises:
            ArgumentError: If the selector is malformed
            SelectorOutOfBoundsError: If the selector does not fit the canvas
        """
        if selector is None:
            self.items.append(CanvasReference(id=canvas.id))
            return self

        region = resolve_selector(canvas.dimensions, selector, canvas_id=canvas.id)
        self.items.append(
            SpecificResource(
                source=canvas.id, selector=FragmentSelector.from_selector(region.selector)
            )
        )
        return self

    def add_range(self, *ranges: Range) -> Self:
        self.items.extend(ranges)
        return self

    def canvas_ids(self) -> list[str]:
        """Ids of every canvas referenced by this range and its sub-ranges."""
        result: list[str] = []
        for item in self.items:
            if isinstance(item, Range):
                result.extend(item.canvas_ids())
            elif isinstance(item, SpecificResource):
                result.append(item.source)
            else:
                result.append(item.id)
        return result


RangeItem = Annotated[
    Union[CanvasReference, SpecificResource, Range], Field(discriminator="type")
]

Range.model_rebuild()


class Manifest(BaseModel):
    """
    IIIF Presentation 3.0 Manifest.

    A manifest describes one object (a book, an album, a film) as an
    ordered list of canvases plus optional range structures.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    context: str | list[Any] = Field(default=PRESENTATION_CONTEXT, alias="@context")
    id: str
    type: Literal["Manifest"] = "Manifest"
    label: LanguageMap | None = None
    metadata: list[dict[str, Any]] | None = None
    items: list[Canvas] = Field(default_factory=list)
    structures: list[Range] | None = None

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> Any:
        return language_map(value)

    def canvases(self) -> list[Canvas]:
        """
        Get all canvases in order.

        Example:
            >>> for canvas in manifest.canvases():
            ...     print(canvas.id, canvas.kind)
        """
        return list(self.items)

    def canvas(self, canvas_id: str) -> Canvas | None:
        for canvas in self.items:
            if canvas.id == canvas_id:
                return canvas
        return None

    def add_canvas(self, *canvases: Canvas) -> Self:
        self.items.extend(canvases)
        return self

    def add_range(self, *ranges: Range) -> Self:
        if self.structures is None:
            self.structures = []
        self.structures.extend(ranges)
        return self
