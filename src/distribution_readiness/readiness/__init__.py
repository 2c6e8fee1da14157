"""Distribution readiness assessment subpackage."""
from __future__ import annotations

from distribution_readiness.readiness.actions import build_recommended_actions
from distribution_readiness.readiness.assessor import ReadinessAssessor, assess
from distribution_readiness.readiness.report import ReadinessReport

__all__ = [
    "ReadinessAssessor",
    "ReadinessReport",
    "assess",
    "build_recommended_actions",
]
