"""
Content compatibility checks.

Content fits a region when, for every axis the content declares, the region
has that axis and the content's extent is no larger than the region's.
Undeclared axes are unconstrained.
"""

from __future__ import annotations

from typing import Iterable

from .content import ContentResource
from .errors import ContentOutOfBoundsError, CONTENT_AXIS_MISSING, CONTENT_BEYOND
from .selectors import Region


def check_content_fits(content: ContentResource, region: Region) -> None:
    """
    Check one content resource against a resolved region.

    Raises:
        ContentOutOfBoundsError: If the content declares an axis the region
            lacks, or is larger than the region along a declared axis
    """
    if content.declares_spatial:
        if not region.is_spatial:
            raise ContentOutOfBoundsError(
                CONTENT_AXIS_MISSING.format(content=content.id, axis="spatial"),
                axis="spatial",
            )
        if content.width is not None and content.width > region.width:
            raise ContentOutOfBoundsError(
                CONTENT_BEYOND.format(
                    content=content.id, axis="width", extent=content.width, limit=region.width
                ),
                axis="spatial",
            )
        if content.height is not None and content.height > region.height:
            raise ContentOutOfBoundsError(
                CONTENT_BEYOND.format(
                    content=content.id, axis="height", extent=content.height, limit=region.height
                ),
                axis="spatial",
            )

    if content.declares_temporal:
        if not region.is_temporal:
            raise ContentOutOfBoundsError(
                CONTENT_AXIS_MISSING.format(content=content.id, axis="temporal"),
                axis="temporal",
            )
        if content.duration > region.duration:
            raise ContentOutOfBoundsError(
                CONTENT_BEYOND.format(
                    content=content.id,
                    axis="duration",
                    extent=content.duration,
                    limit=region.duration,
                ),
                axis="temporal",
            )


def check_body_fits(body: Iterable[ContentResource | None], region: Region) -> None:
    """Check every non-placeholder entry in order; the first misfit raises."""
    for content in body:
        if content is not None:
            check_content_fits(content, region)
