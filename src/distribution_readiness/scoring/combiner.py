"""Budget-tier weights and overall score combination.

The overall score is the weighted average of the three pillar scores, using
integer percentage weights chosen by budget tier, rounded half-up.  When any
hard stop exists the result is capped at :data:`HARD_STOP_CEILING`; the cap
only ever lowers a score.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from distribution_readiness.intake.enums import BudgetTier

logger = logging.getLogger(__name__)

HARD_STOP_CEILING = 59


@dataclass(frozen=True)
class PillarWeights:
    """Integer percentage weights for the three pillars; they sum to 100."""

    business: int
    legal: int
    technical: int

    def as_array(self) -> np.ndarray:
        return np.array([self.business, self.legal, self.technical], dtype=np.int64)


WEIGHTS_BY_TIER: dict[BudgetTier, PillarWeights] = {
    BudgetTier.SMALL: PillarWeights(business=40, legal=35, technical=25),
    BudgetTier.MEDIUM: PillarWeights(business=35, legal=35, technical=30),
    BudgetTier.HIGH: PillarWeights(business=30, legal=35, technical=35),
}

DEFAULT_WEIGHTS = WEIGHTS_BY_TIER[BudgetTier.MEDIUM]


def select_weights(tier: BudgetTier | str | None) -> PillarWeights:
    """Return the weights for *tier*.

    Any value that is not a recognised budget tier, including ``None``,
    selects the medium-tier weights.
    """
    if isinstance(tier, BudgetTier):
        return WEIGHTS_BY_TIER[tier]
    try:
        return WEIGHTS_BY_TIER[BudgetTier(str(tier).strip().lower())]
    except ValueError:
        logger.debug("Budget tier %r not recognised; using medium-tier weights.", tier)
        return DEFAULT_WEIGHTS


def combine_scores(
    business: int,
    legal: int,
    technical: int,
    weights: PillarWeights = DEFAULT_WEIGHTS,
) -> int:
    """Weighted average of the pillar scores, rounded half-up to an integer.

    Uses exact integer arithmetic: ``(sum(score * weight) + 50) // 100``.
    """
    scores = np.array([business, legal, technical], dtype=np.int64)
    total = int(np.dot(scores, weights.as_array()))
    return (total + 50) // 100


def apply_hard_stop_cap(overall_raw: int, hard_stops: Sequence[str]) -> int:
    """Cap *overall_raw* at :data:`HARD_STOP_CEILING` when any hard stop exists."""
    if hard_stops:
        return min(overall_raw, HARD_STOP_CEILING)
    return overall_raw


__all__ = [
    "DEFAULT_WEIGHTS",
    "HARD_STOP_CEILING",
    "PillarWeights",
    "WEIGHTS_BY_TIER",
    "apply_hard_stop_cap",
    "combine_scores",
    "select_weights",
]
