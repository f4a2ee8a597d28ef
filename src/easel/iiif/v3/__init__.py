"""
IIIF Presentation 3.0 models and content placement.

This module provides Pydantic models for IIIF Presentation API 3.0 canvases,
annotations, manifests and ranges, along with the placement checks that
decide whether content may be painted onto a canvas or a region of one.

Basic usage:
    >>> from easel.iiif.v3 import Canvas, ImageContent, dumps
    >>>
    >>> canvas = Canvas(id="https://example.org/iiif/book1/page1/canvas-1", label="p. 1")
    >>> canvas.set_width_height(480, 360)
    >>> image = ImageContent(id="https://example.org/page1.jpg").set_width_height(480, 360)
    >>> print(dumps(canvas.paint_with(image)))

Painting regions and choices:
    >>> canvas.paint_with(image, bitonal, selector="xywh=0,0,480,360")
    >>> sound_canvas.set_duration(3600).paint_with(track, selector="t=0,300")

Reading documents back:
    >>> from easel.iiif.v3 import load_manifest, validate_manifest
    >>>
    >>> manifest = load_manifest("https://example.org/manifest.json")
    >>> for issue in validate_manifest(manifest):
    ...     print(issue.path, issue.message)
"""

from .errors import (
    ErrorKind,
    PresentationError,
    ArgumentError,
    SelectorOutOfBoundsError,
    ContentOutOfBoundsError,
)
from .dimensions import DimensionKind, Dimensions
from .content import (
    ContentResource,
    ImageContent,
    SoundContent,
    VideoContent,
    TextContent,
    DatasetContent,
    ModelContent,
    CanvasContent,
)
from .selectors import MediaFragmentSelector, Region, resolve_selector
from .compatibility import check_content_fits
from .body import RDF_NIL, encode_body, decode_body
from .annotations import (
    Motivation,
    Annotation,
    AnnotationPage,
    FragmentSelector,
    SpecificResource,
)
from .canvas import Canvas
from .manifest import Manifest, Range, CanvasReference
from .loaders import (
    load_manifest,
    load_canvas,
    load_json,
    parse_manifest,
    parse_canvas,
    parse_annotation,
    parse_content,
    fetch_json,
    to_json,
    dumps,
)
from .validation import (
    ValidationIssue,
    validate_manifest,
    validate_canvas,
)
from .traversal import (
    iter_annotations,
    iter_content,
    is_manifest,
    is_canvas,
)

__all__ = [
    # Errors
    "ErrorKind",
    "PresentationError",
    "ArgumentError",
    "SelectorOutOfBoundsError",
    "ContentOutOfBoundsError",
    # Dimensions and selectors
    "DimensionKind",
    "Dimensions",
    "MediaFragmentSelector",
    "Region",
    "resolve_selector",
    "check_content_fits",
    # Body codec
    "RDF_NIL",
    "encode_body",
    "decode_body",
    # Models
    "ContentResource",
    "ImageContent",
    "SoundContent",
    "VideoContent",
    "TextContent",
    "DatasetContent",
    "ModelContent",
    "CanvasContent",
    "Motivation",
    "Annotation",
    "AnnotationPage",
    "FragmentSelector",
    "SpecificResource",
    "Canvas",
    "Manifest",
    "Range",
    "CanvasReference",
    # Loaders
    "load_manifest",
    "load_canvas",
    "load_json",
    "parse_manifest",
    "parse_canvas",
    "parse_annotation",
    "parse_content",
    "fetch_json",
    "to_json",
    "dumps",
    # Validation
    "ValidationIssue",
    "validate_manifest",
    "validate_canvas",
    # Traversal
    "iter_annotations",
    "iter_content",
    "is_manifest",
    "is_canvas",
]
