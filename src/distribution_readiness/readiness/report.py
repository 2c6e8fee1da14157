"""ReadinessReport — the immutable result of one assessment."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from distribution_readiness.platforms.checklist import ChecklistItem
from distribution_readiness.scoring.bands import ReadinessBand
from distribution_readiness.scoring.combiner import PillarWeights


@dataclass(frozen=True)
class ReadinessReport:
    """Full distribution readiness report.

    Attributes
    ----------
    business_score, legal_score, technical_score:
        Pillar scores in [0, 100].
    overall_score_raw:
        Weighted average of the pillar scores before any hard-stop cap.
    overall_score_final:
        ``overall_score_raw``, capped at 59 when hard stops exist.
    hard_stops:
        Violation messages in detection order.
    band:
        :class:`ReadinessBand` of ``overall_score_final``.
    band_action:
        The band's fixed recommended action.
    weights:
        Pillar weights selected from the budget tier.
    recommended_actions:
        Prioritised next steps.
    platform_checklists:
        Platform id (selection order) to checklist rows.
    """

    business_score: int
    legal_score: int
    technical_score: int
    overall_score_raw: int
    overall_score_final: int
    hard_stops: tuple[str, ...]
    band: ReadinessBand
    band_action: str
    weights: PillarWeights
    recommended_actions: tuple[str, ...]
    platform_checklists: Mapping[str, tuple[ChecklistItem, ...]]

    @property
    def is_delivery_ready(self) -> bool:
        return self.band is ReadinessBand.DELIVERY_READY

    @property
    def is_capped(self) -> bool:
        """True when a hard stop lowered the overall score."""
        return self.overall_score_final < self.overall_score_raw

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dictionary with camelCase keys."""
        return {
            "businessScore": self.business_score,
            "legalScore": self.legal_score,
            "technicalScore": self.technical_score,
            "overallScoreRaw": self.overall_score_raw,
            "overallScoreFinal": self.overall_score_final,
            "hardStops": list(self.hard_stops),
            "band": self.band.value,
            "bandAction": self.band_action,
            "weights": {
                "business": self.weights.business,
                "legal": self.weights.legal,
                "technical": self.weights.technical,
            },
            "recommendedActions": list(self.recommended_actions),
            "platformChecklists": {
                pid: [{"label": item.label, "state": item.state.value} for item in items]
                for pid, items in self.platform_checklists.items()
            },
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


__all__ = ["ReadinessReport"]
