"""One-call helpers for the common cases.

Example
-------
::

    from distribution_readiness import quick_assess

    report = quick_assess("night_harbor.yaml")
    print(report.overall_score_final, report.band.label)
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from distribution_readiness.intake.loader import load_intake, parse_intake
from distribution_readiness.intake.model import ProjectIntake
from distribution_readiness.readiness.assessor import assess
from distribution_readiness.readiness.report import ReadinessReport


def quick_assess(source: ProjectIntake | Mapping[str, Any] | str | Path) -> ReadinessReport:
    """Assess an intake given as a snapshot, a decoded document, or a file path.

    Raises
    ------
    FileNotFoundError
        If *source* is a path that does not exist.
    IntakeValidationError
        If a document or file fails validation.
    """
    if isinstance(source, ProjectIntake):
        intake = source
    elif isinstance(source, Mapping):
        intake = parse_intake(source)
    else:
        intake = load_intake(source)
    return assess(intake)


def assess_json(payload: str) -> dict[str, Any]:
    """Request/response form of :func:`assess`: JSON intake in, report dict out."""
    import json

    from distribution_readiness.intake.builder import IntakeValidationError

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise IntakeValidationError([f"(document): invalid JSON: {exc}"]) from exc
    return assess(parse_intake(data)).to_dict()


__all__ = ["assess_json", "quick_assess"]
