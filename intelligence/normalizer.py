"""
Request Normalizer
Turns the current selection state into a canonical TrendRequest.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from core import OutputFormat, PlatformToggle, TrendRequest
from utils.exceptions import NoPlatformSelectedError


def default_platforms() -> List[PlatformToggle]:
    """Platform toggles offered by the form, Instagram preselected."""
    return [
        PlatformToggle(id="instagram", name="Instagram", selected=True),
        PlatformToggle(id="youtube", name="YouTube"),
        PlatformToggle(id="tiktok", name="TikTok"),
        PlatformToggle(id="twitter", name="Twitter/X"),
        PlatformToggle(id="threads", name="Threads"),
    ]


def selected_platform_names(platforms: Sequence[PlatformToggle]) -> List[str]:
    return [p.name for p in platforms if p.selected]


def normalize_request(
    platforms: Sequence[PlatformToggle],
    topic: str = "",
    month: str = "",
    day: str = "",
    output_format: Union[OutputFormat, str] = OutputFormat.PER_PLATFORM,
) -> TrendRequest:
    """
    Build a TrendRequest from raw selections.

    Empty topic, month and day are legal and mean "unspecified".

    Raises:
        NoPlatformSelectedError: no platform is toggled on
    """
    names = selected_platform_names(platforms)
    if not names:
        raise NoPlatformSelectedError()

    return TrendRequest(
        platforms=names,
        topic=topic,
        month=month,
        day=day,
        output_format=OutputFormat(output_format),
    )
