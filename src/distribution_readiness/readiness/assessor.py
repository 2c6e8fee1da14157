"""Distribution readiness assessor.

Computes a :class:`~distribution_readiness.readiness.report.ReadinessReport`
from a :class:`~distribution_readiness.intake.model.ProjectIntake`:

1. Score the Business, Legal and Technical pillars (0-100 each).
2. Detect hard stops.
3. Combine the pillar scores with budget-tier weights, rounded half-up.
4. Cap the overall score at 59 if any hard stop fired.
5. Classify the capped score into a readiness band.
6. Build recommended actions and per-platform checklists.

Every step is a pure function of the intake snapshot, so assessing the same
snapshot twice yields equal reports and assessments can run in parallel.
"""
from __future__ import annotations

import logging
from typing import Iterable

from distribution_readiness.intake.model import ProjectIntake
from distribution_readiness.platforms.checklist import build_platform_checklists
from distribution_readiness.readiness.actions import build_recommended_actions
from distribution_readiness.readiness.report import ReadinessReport
from distribution_readiness.scoring.bands import classify_band
from distribution_readiness.scoring.combiner import (
    apply_hard_stop_cap,
    combine_scores,
    select_weights,
)
from distribution_readiness.scoring.hard_stops import (
    DEFAULT_HARD_STOP_RULES,
    HardStopRule,
    detect_hard_stops,
)
from distribution_readiness.scoring.pillars import (
    score_business,
    score_legal,
    score_technical,
)

logger = logging.getLogger(__name__)


class ReadinessAssessor:
    """Assess projects for distribution readiness.

    Parameters
    ----------
    hard_stop_rules:
        Rules to evaluate, in order.  Accepts any iterable of
        :class:`HardStopRule`, including a
        :class:`~distribution_readiness.scoring.hard_stops.HardStopRegistry`.
        The rules are captured when the assessor is created.

    Example
    -------
    ::

        intake = (
            IntakeBuilder()
            .with_runtime_minutes(94)
            .with_chain_of_title("complete")
            .with_captions("yes")
            .build()
        )
        report = ReadinessAssessor().assess(intake)
        print(report.overall_score_final, report.band.label)
    """

    def __init__(
        self, hard_stop_rules: Iterable[HardStopRule] = DEFAULT_HARD_STOP_RULES
    ) -> None:
        self._rules: tuple[HardStopRule, ...] = tuple(hard_stop_rules)

    @property
    def hard_stop_rules(self) -> tuple[HardStopRule, ...]:
        return self._rules

    def assess(self, intake: ProjectIntake) -> ReadinessReport:
        """Compute a :class:`ReadinessReport` for *intake*.

        Parameters
        ----------
        intake:
            An immutable intake snapshot.

        Returns
        -------
        ReadinessReport
            The complete report.  This method does not raise for any intake.
        """
        business = score_business(intake)
        legal = score_legal(intake)
        technical = score_technical(intake)

        hard_stops = detect_hard_stops(intake, self._rules)
        weights = select_weights(intake.budget_tier)
        overall_raw = combine_scores(business, legal, technical, weights)
        overall_final = apply_hard_stop_cap(overall_raw, hard_stops)
        band = classify_band(overall_final)

        logger.debug(
            "Pillars business=%d legal=%d technical=%d, weights=%s, raw=%d, final=%d",
            business, legal, technical, weights, overall_raw, overall_final,
        )
        logger.info(
            "Assessed %r: %d (%s), %d hard stop(s).",
            intake.project_title or "(untitled)", overall_final, band.label, len(hard_stops),
        )

        return ReadinessReport(
            business_score=business,
            legal_score=legal,
            technical_score=technical,
            overall_score_raw=overall_raw,
            overall_score_final=overall_final,
            hard_stops=hard_stops,
            band=band,
            band_action=band.action,
            weights=weights,
            recommended_actions=build_recommended_actions(intake, hard_stops),
            platform_checklists=build_platform_checklists(intake),
        )


_DEFAULT_ASSESSOR = ReadinessAssessor()


def assess(intake: ProjectIntake) -> ReadinessReport:
    """Assess *intake* with the default hard-stop rules."""
    return _DEFAULT_ASSESSOR.assess(intake)


__all__ = ["ReadinessAssessor", "assess"]
