"""Readiness bands.

Interpretation of the final score: 0-39 = Not Ready, 40-69 = Developing,
70-84 = Ready-ish, 85-100 = Delivery Ready.  Each band carries one fixed
recommended action.
"""
from __future__ import annotations

from enum import Enum


class ReadinessBand(str, Enum):
    """Named classification of a final readiness score."""

    NOT_READY = "Not Ready"
    DEVELOPING = "Developing"
    READY_ISH = "Ready-ish"
    DELIVERY_READY = "Delivery Ready"

    @property
    def label(self) -> str:
        return self.value

    @property
    def action(self) -> str:
        """The band's fixed recommended action."""
        return _BAND_ACTIONS[self]

    @property
    def lower_bound(self) -> int:
        """Smallest score (inclusive) classified into this band."""
        return _BAND_FLOORS[self]


_BAND_ACTIONS: dict[ReadinessBand, str] = {
    ReadinessBand.NOT_READY: "Fix deal-killers first (legal + captions + master availability).",
    ReadinessBand.DEVELOPING: "Complete core deliverables and tighten business packaging.",
    ReadinessBand.READY_ISH: "Platform-specific deliverables + aggregator/distributor outreach.",
    ReadinessBand.DELIVERY_READY: (
        "Proceed to aggregator/distributor intake or platform delivery path."
    ),
}

_BAND_FLOORS: dict[ReadinessBand, int] = {
    ReadinessBand.NOT_READY: 0,
    ReadinessBand.DEVELOPING: 40,
    ReadinessBand.READY_ISH: 70,
    ReadinessBand.DELIVERY_READY: 85,
}


def classify_band(score: int) -> ReadinessBand:
    """Map a final score to its :class:`ReadinessBand`."""
    if score >= 85:
        return ReadinessBand.DELIVERY_READY
    if score >= 70:
        return ReadinessBand.READY_ISH
    if score >= 40:
        return ReadinessBand.DEVELOPING
    return ReadinessBand.NOT_READY


__all__ = ["ReadinessBand", "classify_band"]
