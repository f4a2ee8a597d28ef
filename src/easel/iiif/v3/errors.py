"""
Error kinds raised by the content-placement engine.

Every failure is detected before a canvas is mutated. The three kinds map to
three exception classes sharing a common base so callers can catch them
together or apart.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    ARGUMENT = "argument"
    SELECTOR_OUT_OF_BOUNDS = "selector-out-of-bounds"
    CONTENT_OUT_OF_BOUNDS = "content-out-of-bounds"


# Selector-out-of-bounds reasons
AXIS_UNAVAILABLE = "axis-unavailable"
OUT_OF_RANGE = "out-of-range"

# Message templates
MALFORMED_SELECTOR = "Malformed media fragment: {value!r}"
EMPTY_SELECTOR = "Selector needs a spatial part, a temporal part, or both"
BAD_SELECTOR_EXTENT = "Selector {field} must be greater than zero, got {value}"
BAD_SELECTOR_RANGE = "Selector start ({start}) must be before end ({end})"
BAD_WIDTH_HEIGHT = "Width and height must both be positive integers, got {width!r} x {height!r}"
PARTIAL_WIDTH_HEIGHT = "Width and height must be set together, got {width!r} x {height!r}"
BAD_DURATION = "Duration must be a finite positive number, got {duration!r}"
FIXED_MOTIVATION = "Motivation of a {motivation} annotation cannot be changed to {value!r}"
BAD_BEHAVIOR = "Behavior {behavior!r} is not allowed on a {motivation} annotation"
NO_CONTENT = "At least one content resource is required"
AXIS_MISSING = "Selector {selector!r} names a {axis} axis that canvas {canvas} does not define"
SELECTOR_BEYOND = "Selector {selector!r} falls outside the {axis} bounds of canvas {canvas}"
CONTENT_AXIS_MISSING = "Content {content} declares a {axis} extent but its target region has none"
CONTENT_BEYOND = "Content {content} {axis} extent {extent} exceeds its target region ({limit})"


class PresentationError(Exception):
    """Base class for placement failures."""

    kind: ErrorKind


class ArgumentError(PresentationError, ValueError):
    """Malformed input: selector syntax, dimensions, motivation, behaviors."""

    kind = ErrorKind.ARGUMENT


class SelectorOutOfBoundsError(PresentationError):
    """
    A selector does not fit its canvas.

    Attributes:
        reason: AXIS_UNAVAILABLE when the canvas lacks an axis the selector
            names, OUT_OF_RANGE when a named axis exceeds the canvas extent
        axis: "spatial" or "temporal"
    """

    kind = ErrorKind.SELECTOR_OUT_OF_BOUNDS

    def __init__(self, message: str, *, reason: str, axis: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.axis = axis


class ContentOutOfBoundsError(PresentationError):
    """A content resource's declared extent does not fit its target region."""

    kind = ErrorKind.CONTENT_OUT_OF_BOUNDS

    def __init__(self, message: str, *, axis: str) -> None:
        super().__init__(message)
        self.axis = axis
