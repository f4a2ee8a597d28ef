"""
Pydantic models for annotations and annotation pages.

An annotation associates an ordered body of content resources with a canvas
or a region of one. Painting annotations carry a canvas's primary content,
supplementing annotations carry supplementary content (transcriptions,
captions). Both are one Annotation type distinguished by its motivation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from .body import decode_body, encode_body
from .content import ContentResource
from .errors import ArgumentError, BAD_BEHAVIOR, FIXED_MOTIVATION
from .properties import LanguageMap, RESOURCE_BEHAVIORS, language_map
from .selectors import MEDIA_FRAGMENT_SPEC, MediaFragmentSelector


class Motivation(str, Enum):
    PAINTING = "painting"
    SUPPLEMENTING = "supplementing"


# Behavior values each motivation accepts; None leaves the motivation unrestricted
ALLOWED_BEHAVIORS: dict[Motivation, frozenset[str] | None] = {
    Motivation.PAINTING: RESOURCE_BEHAVIORS,
    Motivation.SUPPLEMENTING: None,
}


class FragmentSelector(BaseModel):
    """W3C fragment selector using Media Fragments syntax."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Literal["FragmentSelector"] = "FragmentSelector"
    conforms_to: str = Field(default=MEDIA_FRAGMENT_SPEC, alias="conformsTo")
    value: str

    @classmethod
    def from_selector(cls, selector: MediaFragmentSelector) -> FragmentSelector:
        return cls(value=selector.value)

    def media_fragment(self) -> MediaFragmentSelector:
        """
        Parse the selector value.

        Raises:
            ArgumentError: If the value is not a media fragment
        """
        return MediaFragmentSelector.parse(self.value)


class SpecificResource(BaseModel):
    """A canvas narrowed to a region by a selector."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Literal["SpecificResource"] = "SpecificResource"
    source: str
    selector: FragmentSelector | str

    @field_validator("source", mode="before")
    @classmethod
    def source_id(cls, value: Any) -> Any:
        # Sources may be written as {"id": ..., "type": "Canvas"}
        if isinstance(value, dict) and "id" in value:
            return value["id"]
        return value

    def media_fragment(self) -> MediaFragmentSelector:
        if isinstance(self.selector, str):
            return MediaFragmentSelector.parse(self.selector)
        return self.selector.media_fragment()


class Annotation(BaseModel):
    """
    IIIF annotation with a fixed motivation.

    The body is an ordered list of optional content resources; a None entry
    is an empty choice slot. In JSON the body is a single resource or a
    Choice (see body.encode_body).
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: Literal["Annotation"] = "Annotation"
    motivation: Motivation
    label: LanguageMap | None = None
    behavior: list[str] | None = None
    body: list[ContentResource | None] = Field(default_factory=list)
    target: SpecificResource | str

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> Any:
        return language_map(value)

    @field_validator("body", mode="before")
    @classmethod
    def read_body(cls, value: Any) -> Any:
        return decode_body(value)

    @model_validator(mode="after")
    def check_behaviors(self) -> Self:
        for behavior in self.behavior or []:
            self._check_behavior(behavior)
        return self

    @model_serializer(mode="wrap")
    def write_body(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        encoded = encode_body(self.body)
        if encoded is None:
            data.pop("body", None)
        else:
            data["body"] = encoded
        return data

    def _check_behavior(self, behavior: str) -> None:
        allowed = ALLOWED_BEHAVIORS[self.motivation]
        if allowed is not None and behavior not in allowed:
            raise ArgumentError(
                BAD_BEHAVIOR.format(behavior=behavior, motivation=self.motivation.value)
            )

    def set_motivation(self, value: str) -> Self:
        """
        Re-assert the annotation's motivation.

        Raises:
            ArgumentError: If value differs from the fixed motivation
        """
        if value != self.motivation.value:
            raise ArgumentError(
                FIXED_MOTIVATION.format(motivation=self.motivation.value, value=value)
            )
        return self

    def add_behaviors(self, *behaviors: str) -> Self:
        """
        Add behaviors, all or nothing.

        Painting annotations accept only resource behaviors ("hidden");
        supplementing annotations accept any value.

        Raises:
            ArgumentError: If any behavior is not allowed for the motivation
        """
        for behavior in behaviors:
            self._check_behavior(behavior)
        current = list(self.behavior or [])
        current.extend(b for b in behaviors if b not in current)
        self.behavior = current
        return self

    @property
    def target_id(self) -> str:
        """Id of the annotated canvas, with or without a selector."""
        if isinstance(self.target, SpecificResource):
            return self.target.source
        return self.target.split("#", 1)[0]

    def target_selector(self) -> MediaFragmentSelector | None:
        """
        Selector the target narrows to, or None for a whole-canvas target.

        A bare target URI with a `#xywh=...` fragment is read as a selector.

        Raises:
            ArgumentError: If the selector value is malformed
        """
        if isinstance(self.target, SpecificResource):
            return self.target.media_fragment()
        _, sep, fragment = self.target.partition("#")
        if sep and fragment:
            return MediaFragmentSelector.parse(fragment)
        return None


class AnnotationPage(BaseModel):
    """Ordered list of annotations."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: Literal["AnnotationPage"] = "AnnotationPage"
    items: list[Annotation] = Field(default_factory=list)
