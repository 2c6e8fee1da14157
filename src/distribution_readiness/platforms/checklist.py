"""Per-platform delivery checklists.

Each selected platform gets the same five generic readiness rows, derived
directly from the intake (never from pillar scores):

* Trailer
* Artwork + Metadata
* Captions/CC
* Chain of Title
* E&O Insurance

Platform-specific delivery mandates are not modelled.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from distribution_readiness.intake.enums import (
    CaptionStatus,
    ChainOfTitleStatus,
    InsuranceStatus,
)
from distribution_readiness.intake.model import ProjectIntake


class ChecklistState(str, Enum):
    """Readiness state of one checklist row."""

    MET = "met"
    PARTIAL = "partial"
    UNMET = "unmet"


@dataclass(frozen=True)
class ChecklistItem:
    """One row of a platform checklist."""

    label: str
    state: ChecklistState


_CAPTION_STATES: dict[CaptionStatus, ChecklistState] = {
    CaptionStatus.YES: ChecklistState.MET,
    CaptionStatus.IN_PROGRESS: ChecklistState.PARTIAL,
    CaptionStatus.NO: ChecklistState.UNMET,
}

_CHAIN_OF_TITLE_STATES: dict[ChainOfTitleStatus, ChecklistState] = {
    ChainOfTitleStatus.COMPLETE: ChecklistState.MET,
    ChainOfTitleStatus.PARTIAL: ChecklistState.PARTIAL,
    ChainOfTitleStatus.MISSING: ChecklistState.UNMET,
}

_INSURANCE_STATES: dict[InsuranceStatus, ChecklistState] = {
    InsuranceStatus.IN_PLACE: ChecklistState.MET,
    InsuranceStatus.PLANNED: ChecklistState.PARTIAL,
    InsuranceStatus.MISSING: ChecklistState.UNMET,
}


def _met_if(flag: bool) -> ChecklistState:
    return ChecklistState.MET if flag else ChecklistState.UNMET


def build_checklist(intake: ProjectIntake) -> tuple[ChecklistItem, ...]:
    """Return the generic five-row checklist for *intake*."""
    business, legal, technical = intake.business, intake.legal, intake.technical
    return (
        ChecklistItem("Trailer", _met_if(business.trailer_present)),
        ChecklistItem("Artwork + Metadata", _met_if(business.poster_or_key_art_present)),
        ChecklistItem("Captions/CC", _CAPTION_STATES[technical.captions_available]),
        ChecklistItem("Chain of Title", _CHAIN_OF_TITLE_STATES[legal.chain_of_title_status]),
        ChecklistItem("E&O Insurance", _INSURANCE_STATES[legal.errors_and_omissions_status]),
    )


def build_platform_checklists(
    intake: ProjectIntake,
) -> Mapping[str, tuple[ChecklistItem, ...]]:
    """Map every target platform, in selection order, to its checklist."""
    checklist = build_checklist(intake)
    return MappingProxyType({pid: checklist for pid in intake.target_platforms})


__all__ = [
    "ChecklistItem",
    "ChecklistState",
    "build_checklist",
    "build_platform_checklists",
]
