"""Platform catalog and per-platform checklist subpackage."""
from __future__ import annotations

from distribution_readiness.platforms.catalog import (
    PLATFORM_CATALOG,
    Platform,
    is_known_platform,
    platform_label,
)

__all__ = [
    "PLATFORM_CATALOG",
    "Platform",
    "is_known_platform",
    "platform_label",
]
