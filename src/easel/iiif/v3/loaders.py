"""
Loading, parsing and dumping IIIF resources.

Provides functions to load IIIF JSON from files or URLs, parse it into
Pydantic models, and write models back out as Presentation 3.0 JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json

import httpx
from pydantic import BaseModel

from .annotations import Annotation
from .canvas import Canvas
from .content import ContentResource, content_class
from .manifest import Manifest

DEFAULT_FETCH_TIMEOUT = 10.0


def fetch_json(url: str, *, timeout: float = DEFAULT_FETCH_TIMEOUT) -> dict[str, Any]:
    """
    Fetch JSON from URL.

    Parameters:
        url: HTTP(S) URL to fetch
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON as dictionary

    Raises:
        httpx.HTTPError: If request fails
        json.JSONDecodeError: If response is not valid JSON
    """
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.json()


def load_json(path_or_url: str) -> dict[str, Any]:
    """
    Load JSON from file path or URL.

    Automatically detects whether input is a URL (starts with http:// or https://)
    or a filesystem path.

    Parameters:
        path_or_url: File path or URL

    Returns:
        Parsed JSON as dictionary

    Raises:
        FileNotFoundError: If file path doesn't exist
        httpx.HTTPError: If URL fetch fails
        json.JSONDecodeError: If JSON is invalid
    """
    if path_or_url.startswith("http://") or path_or_url.startswith("https://"):
        return fetch_json(path_or_url)

    p = Path(path_or_url).expanduser()
    return json.loads(p.read_text(encoding="utf-8"))


def parse_manifest(data: dict[str, Any]) -> Manifest:
    """
    Parse manifest dict into Pydantic model.

    Raises:
        pydantic.ValidationError: If JSON doesn't match manifest schema

    Example:
        >>> manifest = parse_manifest(load_json(url))
        >>> for canvas in manifest.canvases():
        ...     print(canvas.id)
    """
    return Manifest.model_validate(data)


def parse_canvas(data: dict[str, Any]) -> Canvas:
    """
    Parse canvas dict into Pydantic model.

    Annotation bodies are decoded with the body codec: Choice items keep
    their order, "rdf:nil" becomes an empty slot, unknown types are skipped.

    Raises:
        pydantic.ValidationError: If JSON doesn't match canvas schema
    """
    return Canvas.model_validate(data)


def parse_annotation(data: dict[str, Any]) -> Annotation:
    """
    Parse annotation dict into Pydantic model.

    Raises:
        pydantic.ValidationError: If JSON doesn't match annotation schema
    """
    return Annotation.model_validate(data)


def parse_content(data: dict[str, Any]) -> ContentResource:
    """
    Parse a content resource dict into the model its `type` names.

    Raises:
        ValueError: If `type` is not a known content resource kind
        pydantic.ValidationError: If JSON doesn't match the resource schema
    """
    cls = content_class(data.get("type"))
    if cls is None:
        raise ValueError(f"Unknown content resource type: {data.get('type')!r}")
    return cls.model_validate(data)


def load_manifest(path_or_url: str) -> Manifest:
    """
    Load and parse manifest from path or URL.

    Combines load_json() and parse_manifest() in one call.
    """
    return parse_manifest(load_json(path_or_url))


def load_canvas(path_or_url: str) -> Canvas:
    """
    Load and parse canvas from path or URL.

    Combines load_json() and parse_canvas() in one call.
    """
    return parse_canvas(load_json(path_or_url))


def to_json(resource: BaseModel) -> dict[str, Any]:
    """
    Convert a model to Presentation 3.0 JSON.

    Uses JSON property names, omits unset values and empty page lists.

    Example:
        >>> to_json(canvas)["items"][0]["items"][0]["motivation"]
        'painting'
    """
    return resource.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps(resource: BaseModel, *, indent: int | None = 2) -> str:
    """Serialize a model to JSON text."""
    return json.dumps(to_json(resource), indent=indent, ensure_ascii=False)
