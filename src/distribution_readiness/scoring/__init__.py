"""Scoring subpackage: pillar scorers, hard stops, weights and bands."""
from __future__ import annotations

from distribution_readiness.scoring.bands import ReadinessBand, classify_band
from distribution_readiness.scoring.combiner import (
    HARD_STOP_CEILING,
    PillarWeights,
    apply_hard_stop_cap,
    combine_scores,
    select_weights,
)
from distribution_readiness.scoring.hard_stops import (
    DEFAULT_HARD_STOP_RULES,
    HardStopRegistry,
    HardStopRule,
    HardStopRuleNotFoundError,
    detect_hard_stops,
)
from distribution_readiness.scoring.pillars import (
    score_business,
    score_legal,
    score_technical,
)

__all__ = [
    "DEFAULT_HARD_STOP_RULES",
    "HARD_STOP_CEILING",
    "HardStopRegistry",
    "HardStopRule",
    "HardStopRuleNotFoundError",
    "PillarWeights",
    "ReadinessBand",
    "apply_hard_stop_cap",
    "classify_band",
    "combine_scores",
    "detect_hard_stops",
    "score_business",
    "score_legal",
    "score_technical",
    "select_weights",
]
