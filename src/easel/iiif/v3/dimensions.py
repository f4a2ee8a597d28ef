"""
Canvas dimension model.

A canvas's coordinate space is derived from which extents it declares:
width and height give it spatial axes, duration gives it a temporal axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real

from .errors import (
    ArgumentError,
    BAD_DURATION,
    BAD_WIDTH_HEIGHT,
    PARTIAL_WIDTH_HEIGHT,
)


class DimensionKind(str, Enum):
    UNDEFINED = "undefined"
    SPATIAL = "spatial"
    TEMPORAL = "temporal"
    SPATIOTEMPORAL = "spatiotemporal"


def check_width_height(width: object, height: object) -> tuple[int, int]:
    """
    Validate a width/height pair.

    Raises:
        ArgumentError: Unless both are strictly positive integers
    """
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ArgumentError(BAD_WIDTH_HEIGHT.format(width=width, height=height))
    return width, height  # type: ignore[return-value]


def check_duration(duration: object) -> float:
    """
    Validate a duration in seconds.

    Raises:
        ArgumentError: For zero, negative, infinite, NaN or non-numeric values
    """
    if isinstance(duration, bool) or not isinstance(duration, Real):
        raise ArgumentError(BAD_DURATION.format(duration=duration))
    value = float(duration)
    if not math.isfinite(value) or value <= 0:
        raise ArgumentError(BAD_DURATION.format(duration=duration))
    return value


@dataclass(frozen=True)
class Dimensions:
    """
    Declared extents of a canvas.

    Attributes:
        width: Canvas width in pixels, or None
        height: Canvas height in pixels, or None
        duration: Canvas duration in seconds, or None
    """

    width: int | None = None
    height: int | None = None
    duration: float | None = None

    def __post_init__(self) -> None:
        if (self.width is None) != (self.height is None):
            raise ArgumentError(
                PARTIAL_WIDTH_HEIGHT.format(width=self.width, height=self.height)
            )
        if self.width is not None:
            check_width_height(self.width, self.height)
        if self.duration is not None:
            object.__setattr__(self, "duration", check_duration(self.duration))

    @property
    def is_spatial(self) -> bool:
        return self.width is not None

    @property
    def is_temporal(self) -> bool:
        return self.duration is not None

    @property
    def kind(self) -> DimensionKind:
        if self.is_spatial and self.is_temporal:
            return DimensionKind.SPATIOTEMPORAL
        if self.is_spatial:
            return DimensionKind.SPATIAL
        if self.is_temporal:
            return DimensionKind.TEMPORAL
        return DimensionKind.UNDEFINED
