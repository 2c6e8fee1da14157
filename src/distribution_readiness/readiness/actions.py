"""Recommended next steps, in fixed priority order."""
from __future__ import annotations

from typing import Sequence

from distribution_readiness.intake.enums import (
    CaptionStatus,
    ChainOfTitleStatus,
    InsuranceStatus,
)
from distribution_readiness.intake.model import ProjectIntake

ADDRESS_HARD_STOPS = (
    "Address all deal-killers listed above before proceeding with platform outreach."
)
COMPLETE_CAPTIONS = (
    "Complete captions/closed captions for your project. This is required by most platforms."
)
FINALIZE_CHAIN_OF_TITLE = "Finalize your chain of title documentation with legal counsel."
OBTAIN_EO_INSURANCE = (
    "Obtain Errors & Omissions insurance - required for most distribution deals."
)
CREATE_TRAILER = "Create and upload a professional trailer for marketing purposes."
RESEARCH_OUTLETS = (
    "Research aggregators and distributors that work with your target platforms."
)


def build_recommended_actions(
    intake: ProjectIntake, hard_stops: Sequence[str]
) -> tuple[str, ...]:
    """Return the applicable actions for *intake*; the last one is always present."""
    actions: list[str] = []
    if hard_stops:
        actions.append(ADDRESS_HARD_STOPS)
    if intake.technical.captions_available is not CaptionStatus.YES:
        actions.append(COMPLETE_CAPTIONS)
    if intake.legal.chain_of_title_status is not ChainOfTitleStatus.COMPLETE:
        actions.append(FINALIZE_CHAIN_OF_TITLE)
    if intake.legal.errors_and_omissions_status is InsuranceStatus.MISSING:
        actions.append(OBTAIN_EO_INSURANCE)
    if not intake.business.trailer_present:
        actions.append(CREATE_TRAILER)
    actions.append(RESEARCH_OUTLETS)
    return tuple(actions)


__all__ = [
    "ADDRESS_HARD_STOPS",
    "COMPLETE_CAPTIONS",
    "CREATE_TRAILER",
    "FINALIZE_CHAIN_OF_TITLE",
    "OBTAIN_EO_INSURANCE",
    "RESEARCH_OUTLETS",
    "build_recommended_actions",
]
