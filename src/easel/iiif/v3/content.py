"""
Pydantic models for IIIF content resources.

Content resources are the media painted onto canvases. Their declared
width/height/duration are advisory: they only constrain placement, and an
absent extent leaves that axis unconstrained.
"""

from __future__ import annotations

from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dimensions import check_duration, check_width_height
from .properties import LanguageMap, language_map


class ContentResource(BaseModel):
    """
    Base content resource.

    Subclasses fix `type` to one IIIF resource kind. Extra JSON properties
    (service, language, ...) are kept and written back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: str
    format: str | None = None
    label: LanguageMap | None = None
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    duration: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> Any:
        return language_map(value)

    @property
    def declares_spatial(self) -> bool:
        return self.width is not None or self.height is not None

    @property
    def declares_temporal(self) -> bool:
        return self.duration is not None

    def set_width_height(self, width: int, height: int) -> Self:
        """
        Declare the resource's pixel size.

        Raises:
            ArgumentError: Unless both are strictly positive integers
        """
        self.width, self.height = check_width_height(width, height)
        return self

    def set_duration(self, duration: float) -> Self:
        """
        Declare the resource's length in seconds.

        Raises:
            ArgumentError: For zero, negative or non-finite values
        """
        self.duration = check_duration(duration)
        return self

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ImageContent(ContentResource):
    type: Literal["Image"] = "Image"


class SoundContent(ContentResource):
    type: Literal["Sound"] = "Sound"


class VideoContent(ContentResource):
    type: Literal["Video"] = "Video"


class TextContent(ContentResource):
    type: Literal["Text"] = "Text"


class DatasetContent(ContentResource):
    type: Literal["Dataset"] = "Dataset"


class ModelContent(ContentResource):
    type: Literal["Model"] = "Model"


class CanvasContent(ContentResource):
    """A canvas used as content, e.g. a detail canvas painted onto another."""

    type: Literal["Canvas"] = "Canvas"


CONTENT_TYPES: dict[str, type[ContentResource]] = {
    "Image": ImageContent,
    "Sound": SoundContent,
    "Video": VideoContent,
    "Text": TextContent,
    "Dataset": DatasetContent,
    "Model": ModelContent,
    "Canvas": CanvasContent,
}


def content_class(type_name: Any) -> type[ContentResource] | None:
    """Look up the content resource class for a JSON `type` value."""
    if not isinstance(type_name, str):
        return None
    return CONTENT_TYPES.get(type_name)
