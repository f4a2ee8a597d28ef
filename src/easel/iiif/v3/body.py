"""
Annotation body codec.

A body is an ordered list of optional content resources. One resource is
written as that resource's own JSON; two or more are written as a Choice
whose items keep their order, with empty slots written as "rdf:nil" so that
parallel choice lists stay aligned.

Reading is lenient: entries of an unknown `type` are logged and skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .content import ContentResource, content_class

logger = logging.getLogger(__name__)

RDF_NIL = "rdf:nil"
CHOICE = "Choice"

Body = list[ContentResource | None]


def encode_body(body: Sequence[ContentResource | None]) -> dict[str, Any] | None:
    """
    Encode a body for JSON output.

    Parameters:
        body: Ordered content resources; None marks an empty slot

    Returns:
        None for an empty body (or a lone empty slot), the resource's JSON
        for a single entry, otherwise a Choice object

    Example:
        >>> encode_body([image, None, other])["items"][1]
        'rdf:nil'
    """
    if not body:
        return None

    if len(body) == 1:
        return None if body[0] is None else body[0].to_json()

    items: list[Any] = [RDF_NIL if c is None else c.to_json() for c in body]
    return {"type": CHOICE, "items": items}


def decode_content(data: dict[str, Any]) -> ContentResource | None:
    """
    Build the content resource named by a JSON object's `type`.

    Returns:
        Content resource, or None (with a warning logged) for unknown types
    """
    cls = content_class(data.get("type"))
    if cls is None:
        logger.warning(
            "Skipping body entry of unknown type",
            extra={"content_type": data.get("type"), "content_id": data.get("id")},
        )
        return None
    return cls.model_validate(data)


def _decode_items(items: list[Any]) -> Body:
    body: Body = []
    for item in items:
        if item is None or isinstance(item, ContentResource):
            body.append(item)
        elif item == RDF_NIL:
            body.append(None)
        elif isinstance(item, dict):
            content = decode_content(item)
            if content is not None:
                body.append(content)
        else:
            logger.warning(
                "Skipping unreadable body entry", extra={"entry": repr(item)}
            )
    return body


def decode_body(value: Any) -> Body:
    """
    Decode a JSON body into an ordered list of optional content resources.

    Parameters:
        value: A single resource object, a Choice object with `items`, a
            bare list (read like `items`), or None

    Returns:
        Ordered body; "rdf:nil" entries become None

    Example:
        >>> decode_body({"type": "Choice", "items": [img, "rdf:nil"]})
        [ImageContent(...), None]
    """
    if value is None:
        return []
    if isinstance(value, ContentResource):
        return [value]
    if isinstance(value, list):
        return _decode_items(value)
    if isinstance(value, dict):
        items = value.get("items")
        if items is None:
            content = decode_content(value)
            return [] if content is None else [content]
        if isinstance(items, list):
            return _decode_items(items)
    logger.warning("Skipping unreadable body", extra={"body": repr(value)})
    return []
