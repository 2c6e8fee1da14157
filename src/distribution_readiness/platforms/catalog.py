"""Catalog of distribution platforms a project can target."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Platform:
    """A distribution platform.

    Attributes
    ----------
    platform_id:
        Stable identifier used in intake documents and reports.
    label:
        Display label including the platform's business model(s).
    """

    platform_id: str
    label: str


PLATFORM_CATALOG: tuple[Platform, ...] = (
    Platform("netflix", "Netflix (SVOD)"),
    Platform("hulu", "Hulu (SVOD)"),
    Platform("apple_tv", "Apple TV / iTunes (TVOD)"),
    Platform("amazon_prime", "Amazon Prime Video (SVOD/TVOD)"),
    Platform("roku", "Roku Channel (AVOD/FAST)"),
    Platform("tubi", "Tubi (AVOD)"),
    Platform("pluto", "Pluto TV (FAST)"),
    Platform("peacock", "Peacock (SVOD/AVOD)"),
)

_BY_ID: dict[str, Platform] = {p.platform_id: p for p in PLATFORM_CATALOG}


def is_known_platform(platform_id: str) -> bool:
    """Return True if *platform_id* is in :data:`PLATFORM_CATALOG`."""
    return platform_id in _BY_ID


def platform_label(platform_id: str) -> str:
    """Return the display label for *platform_id*, or the id itself if unknown."""
    platform = _BY_ID.get(platform_id)
    return platform.label if platform is not None else platform_id


__all__ = ["PLATFORM_CATALOG", "Platform", "is_known_platform", "platform_label"]
