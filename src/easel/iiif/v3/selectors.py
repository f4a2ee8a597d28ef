"""
Media fragment selectors and region resolution.

A selector names a rectangle (`xywh=x,y,w,h`), a time range (`t=start,end`),
or both (`xywh=...&t=...`). Resolving a selector against a canvas's
dimensions checks that every axis it names exists on the canvas and lies
within the canvas bounds, and yields the Region that content is then
checked against.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from numbers import Real

from .dimensions import Dimensions
from .errors import (
    ArgumentError,
    SelectorOutOfBoundsError,
    AXIS_MISSING,
    AXIS_UNAVAILABLE,
    BAD_SELECTOR_EXTENT,
    BAD_SELECTOR_RANGE,
    EMPTY_SELECTOR,
    MALFORMED_SELECTOR,
    OUT_OF_RANGE,
    SELECTOR_BEYOND,
)

MEDIA_FRAGMENT_SPEC = "http://www.w3.org/TR/media-frags/"

_INT = r"[+-]?\d+"
_NUM = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_XYWH_RE = re.compile(rf"^({_INT}),({_INT}),({_INT}),({_INT})$")
_T_RE = re.compile(rf"^({_NUM}),({_NUM})$")


def format_number(value: float) -> str:
    """Render a time value, dropping the decimal point for whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class MediaFragmentSelector:
    """
    Spatial and/or temporal fragment of a canvas.

    Construction checks only the selector's own shape (w/h positive, start
    before end); canvas bounds are checked by resolve_selector().

    Example:
        >>> MediaFragmentSelector.parse("xywh=0,0,480,360&t=0,300").value
        'xywh=0,0,480,360&t=0,300'
    """

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    start: float | None = None
    end: float | None = None

    def __post_init__(self) -> None:
        spatial = (self.x, self.y, self.width, self.height)
        temporal = (self.start, self.end)

        if any(v is None for v in spatial) and any(v is not None for v in spatial):
            raise ArgumentError(MALFORMED_SELECTOR.format(value=spatial))
        if any(v is None for v in temporal) and any(v is not None for v in temporal):
            raise ArgumentError(MALFORMED_SELECTOR.format(value=temporal))
        if not self.is_spatial and not self.is_temporal:
            raise ArgumentError(EMPTY_SELECTOR)

        if self.is_spatial:
            for value in spatial:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ArgumentError(MALFORMED_SELECTOR.format(value=spatial))
            for field in ("width", "height"):
                value = getattr(self, field)
                if value <= 0:
                    raise ArgumentError(BAD_SELECTOR_EXTENT.format(field=field, value=value))
        if self.is_temporal:
            for value in temporal:
                if (
                    isinstance(value, bool)
                    or not isinstance(value, Real)
                    or not math.isfinite(value)
                ):
                    raise ArgumentError(MALFORMED_SELECTOR.format(value=temporal))
            object.__setattr__(self, "start", float(self.start))
            object.__setattr__(self, "end", float(self.end))
            if self.start >= self.end:
                raise ArgumentError(BAD_SELECTOR_RANGE.format(start=self.start, end=self.end))

    @classmethod
    def spatial(cls, x: int, y: int, width: int, height: int) -> MediaFragmentSelector:
        return cls(x=x, y=y, width=width, height=height)

    @classmethod
    def temporal(cls, start: float, end: float) -> MediaFragmentSelector:
        return cls(start=start, end=end)

    @classmethod
    def parse(cls, value: str) -> MediaFragmentSelector:
        """
        Parse a media fragment string.

        Parameters:
            value: `xywh=x,y,w,h`, `t=start,end`, or both joined with `&`

        Returns:
            Parsed selector

        Raises:
            ArgumentError: If the string is empty, names an unknown or
                repeated key, or has missing or non-numeric components
        """
        if not isinstance(value, str) or not value.strip():
            raise ArgumentError(MALFORMED_SELECTOR.format(value=value))

        parts: dict[str, str] = {}
        for part in value.strip().split("&"):
            key, sep, body = part.partition("=")
            if not sep or key not in ("xywh", "t") or key in parts:
                raise ArgumentError(MALFORMED_SELECTOR.format(value=value))
            parts[key] = body

        kwargs: dict[str, float | int] = {}
        if "xywh" in parts:
            m = _XYWH_RE.match(parts["xywh"])
            if m is None:
                raise ArgumentError(MALFORMED_SELECTOR.format(value=value))
            x, y, w, h = (int(g) for g in m.groups())
            kwargs.update(x=x, y=y, width=w, height=h)
        if "t" in parts:
            m = _T_RE.match(parts["t"])
            if m is None:
                raise ArgumentError(MALFORMED_SELECTOR.format(value=value))
            kwargs.update(start=float(m.group(1)), end=float(m.group(2)))

        return cls(**kwargs)

    @property
    def is_spatial(self) -> bool:
        return self.width is not None

    @property
    def is_temporal(self) -> bool:
        return self.start is not None

    @property
    def value(self) -> str:
        """Canonical media fragment string."""
        parts = []
        if self.is_spatial:
            parts.append(f"xywh={self.x},{self.y},{self.width},{self.height}")
        if self.is_temporal:
            parts.append(f"t={format_number(self.start)},{format_number(self.end)}")
        return "&".join(parts)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Region:
    """
    Resolved target region on a canvas.

    Spatial fields are None when the region has no spatial axis, temporal
    fields are None when it has no temporal axis. `selector` is None for a
    whole-canvas region.
    """

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    start: float | None = None
    end: float | None = None
    selector: MediaFragmentSelector | None = None

    @property
    def is_spatial(self) -> bool:
        return self.width is not None

    @property
    def is_temporal(self) -> bool:
        return self.start is not None

    @property
    def duration(self) -> float | None:
        if not self.is_temporal:
            return None
        return self.end - self.start


def full_region(dimensions: Dimensions) -> Region:
    """Region covering every axis the canvas defines."""
    spatial = {}
    temporal = {}
    if dimensions.is_spatial:
        spatial = dict(x=0, y=0, width=dimensions.width, height=dimensions.height)
    if dimensions.is_temporal:
        temporal = dict(start=0.0, end=dimensions.duration)
    return Region(**spatial, **temporal)


def resolve_selector(
    dimensions: Dimensions,
    selector: MediaFragmentSelector | str,
    *,
    canvas_id: str | None = None,
) -> Region:
    """
    Resolve a selector against canvas dimensions.

    Axes the selector names take the selector's extents; canvas axes it
    leaves out keep the canvas's full extent.

    Parameters:
        dimensions: Canvas dimensions
        selector: Selector or media fragment string
        canvas_id: Canvas id, used only in error messages

    Returns:
        Resolved region

    Raises:
        ArgumentError: If a selector string is malformed
        SelectorOutOfBoundsError: If the selector names an axis the canvas
            lacks, or exceeds the canvas bounds on an axis it names
    """
    if isinstance(selector, str):
        selector = MediaFragmentSelector.parse(selector)

    canvas = canvas_id or "<canvas>"

    if selector.is_spatial and not dimensions.is_spatial:
        raise SelectorOutOfBoundsError(
            AXIS_MISSING.format(selector=selector.value, axis="spatial", canvas=canvas),
            reason=AXIS_UNAVAILABLE,
            axis="spatial",
        )
    if selector.is_temporal and not dimensions.is_temporal:
        raise SelectorOutOfBoundsError(
            AXIS_MISSING.format(selector=selector.value, axis="temporal", canvas=canvas),
            reason=AXIS_UNAVAILABLE,
            axis="temporal",
        )

    if selector.is_spatial and (
        selector.x < 0
        or selector.y < 0
        or selector.x + selector.width > dimensions.width
        or selector.y + selector.height > dimensions.height
    ):
        raise SelectorOutOfBoundsError(
            SELECTOR_BEYOND.format(selector=selector.value, axis="spatial", canvas=canvas),
            reason=OUT_OF_RANGE,
            axis="spatial",
        )
    if selector.is_temporal and (selector.start < 0 or selector.end > dimensions.duration):
        raise SelectorOutOfBoundsError(
            SELECTOR_BEYOND.format(selector=selector.value, axis="temporal", canvas=canvas),
            reason=OUT_OF_RANGE,
            axis="temporal",
        )

    region = full_region(dimensions)
    spatial = dict(x=region.x, y=region.y, width=region.width, height=region.height)
    temporal = dict(start=region.start, end=region.end)
    if selector.is_spatial:
        spatial = dict(x=selector.x, y=selector.y, width=selector.width, height=selector.height)
    if selector.is_temporal:
        temporal = dict(start=selector.start, end=selector.end)
    return Region(**spatial, **temporal, selector=selector)
