"""Pillar scorers.

Three independent pure functions, each mapping a
:class:`~distribution_readiness.intake.model.ProjectIntake` to an integer
score in [0, 100]:

- **Business**: additive binary criteria over the marketing package.
- **Legal**: lookup tables over clearance statuses plus a risk allowance.
- **Technical**: lookup tables over deliverables plus a master-format heuristic.

Lookup tables are keyed by enum member and cover every member, so a lookup
can never miss.
"""
from __future__ import annotations

from distribution_readiness.intake.enums import (
    Availability,
    CaptionStatus,
    ChainOfTitleStatus,
    ClearanceStatus,
    CreditRole,
    InsuranceStatus,
    RightsOfferType,
)
from distribution_readiness.intake.model import ProjectIntake

MIN_SCORE = 0
MAX_SCORE = 100


def _clamp(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


# ---------------------------------------------------------------------------
# Business
# ---------------------------------------------------------------------------

MIN_COMPARABLE_TITLES = 3
_MARQUEE_ROLES = frozenset({CreditRole.DIRECTOR, CreditRole.CAST})


def score_business(intake: ProjectIntake) -> int:
    """Score the business package.

    ======================================================  ======
    Criterion                                               Points
    ======================================================  ======
    logline present                                         10
    short synopsis present                                  10
    at least one genre                                      10
    at least three comparable titles                        10
    a director or cast credit with notable credits          15
    trailer and poster/key art both present                 15
    press kit URL present                                   10
    rights offer type known                                 20
    ======================================================  ======
    """
    b = intake.business
    score = 0
    if b.logline:
        score += 10
    if b.short_synopsis:
        score += 10
    if b.genres:
        score += 10
    if len(b.comparable_titles) >= MIN_COMPARABLE_TITLES:
        score += 10
    if any(c.role in _MARQUEE_ROLES and c.notable_credits for c in b.credits):
        score += 15
    if b.trailer_present and b.poster_or_key_art_present:
        score += 15
    if b.press_kit_url:
        score += 10
    if b.rights_offer_type is not RightsOfferType.UNKNOWN:
        score += 20
    return _clamp(score)


# ---------------------------------------------------------------------------
# Legal
# ---------------------------------------------------------------------------

CHAIN_OF_TITLE_POINTS: dict[ChainOfTitleStatus, int] = {
    ChainOfTitleStatus.COMPLETE: 25,
    ChainOfTitleStatus.PARTIAL: 12,
    ChainOfTitleStatus.MISSING: 0,
}

CLEARANCE_POINTS: dict[ClearanceStatus, int] = {
    ClearanceStatus.COMPLETE: 20,
    ClearanceStatus.PARTIAL: 10,
    ClearanceStatus.MISSING: 0,
    ClearanceStatus.UNKNOWN: 5,
}

INSURANCE_POINTS: dict[InsuranceStatus, int] = {
    InsuranceStatus.IN_PLACE: 20,
    InsuranceStatus.PLANNED: 10,
    InsuranceStatus.MISSING: 0,
}

RISK_ALLOWANCE = 15
RISK_PENALTY = 5


def clearance_risk_points(risk_count: int) -> int:
    """Points left from the risk allowance after *risk_count* known risks."""
    return max(0, RISK_ALLOWANCE - RISK_PENALTY * risk_count)


def score_legal(intake: ProjectIntake) -> int:
    """Score legal clearances: chain of title, music, releases, E&O and risks."""
    g = intake.legal
    score = (
        CHAIN_OF_TITLE_POINTS[g.chain_of_title_status]
        + CLEARANCE_POINTS[g.music_clearance_status]
        + CLEARANCE_POINTS[g.releases_status]
        + INSURANCE_POINTS[g.errors_and_omissions_status]
        + clearance_risk_points(len(g.known_clearance_risks))
    )
    return _clamp(score)


# ---------------------------------------------------------------------------
# Technical
# ---------------------------------------------------------------------------

MASTER_POINTS: dict[Availability, int] = {
    Availability.YES: 20,
    Availability.NO: 0,
    Availability.UNKNOWN: 10,
}

CAPTION_POINTS: dict[CaptionStatus, int] = {
    CaptionStatus.YES: 20,
    CaptionStatus.IN_PROGRESS: 10,
    CaptionStatus.NO: 0,
}

DELIVERABLE_POINTS: dict[Availability, int] = {
    Availability.YES: 10,
    Availability.NO: 0,
    Availability.UNKNOWN: 5,
}

STEREO_DELIVERABLE = "Stereo 2.0"
STEREO_POINTS = 15


def master_format_points(master_format: str) -> int:
    """Score a free-text master format; the first matching rule wins.

    ProRes or IMF earn 15, DNxHD/DNxHR earn 10, any other declared format 5.
    """
    fmt = master_format.lower()
    if not fmt:
        return 0
    if "prores" in fmt or "imf" in fmt:
        return 15
    if "dnx" in fmt:
        return 10
    return 5


def score_technical(intake: ProjectIntake) -> int:
    """Score technical deliverables."""
    t = intake.technical
    score = MASTER_POINTS[t.master_available]
    score += master_format_points(t.master_format)
    if STEREO_DELIVERABLE in t.audio_deliverables:
        score += STEREO_POINTS
    score += CAPTION_POINTS[t.captions_available]
    score += DELIVERABLE_POINTS[t.textless_elements_available]
    score += DELIVERABLE_POINTS[t.music_and_effects_track_available]
    score += DELIVERABLE_POINTS[t.quality_control_done]
    return _clamp(score)


__all__ = [
    "CAPTION_POINTS",
    "CHAIN_OF_TITLE_POINTS",
    "CLEARANCE_POINTS",
    "DELIVERABLE_POINTS",
    "INSURANCE_POINTS",
    "MASTER_POINTS",
    "clearance_risk_points",
    "master_format_points",
    "score_business",
    "score_legal",
    "score_technical",
]
