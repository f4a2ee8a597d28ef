"""
Descriptive property helpers shared by the resource models.

Only the plumbing the placement engine relies on lives here: label language
maps and the behavior values annotations may carry.
"""

from __future__ import annotations

from typing import Any

PRESENTATION_CONTEXT = "http://iiif.io/api/presentation/3/context.json"

LanguageMap = dict[str, list[str]]

# Behaviors defined for any resource; painting annotations accept only these.
RESOURCE_BEHAVIORS = frozenset({"hidden"})


def language_map(value: Any) -> Any:
    """
    Coerce a plain label into a IIIF language map.

    Strings become {"none": [value]}, lists of strings {"none": values}.
    Anything else (including existing maps and None) is returned unchanged
    for the model to validate.

    Example:
        >>> language_map("p. 1")
        {'none': ['p. 1']}
    """
    if isinstance(value, str):
        return {"none": [value]}
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return {"none": list(value)}
    return value

