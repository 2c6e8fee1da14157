"""distribution-readiness — multi-pillar readiness scoring for film and TV distribution.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Quick-start example
-------------------
>>> import distribution_readiness as dr
>>> intake = dr.IntakeBuilder().with_runtime_minutes(12).build()
>>> dr.assess(intake).band.label
'Not Ready'

Subpackages
-----------
intake:
    Status enums, the immutable ProjectIntake snapshot, the validating
    builder, and YAML/JSON intake documents.
scoring:
    Pillar scorers, hard-stop rules, budget-tier weights and readiness bands.
platforms:
    Platform catalog and per-platform delivery checklists.
readiness:
    The assessor, recommended actions and the ReadinessReport.
"""
from __future__ import annotations

__version__: str = "0.1.0"

from distribution_readiness.convenience import assess_json, quick_assess

# -- Intake ---------------------------------------------------------------
from distribution_readiness.intake import (
    Availability,
    BudgetTier,
    BusinessPackage,
    CaptionStatus,
    ChainOfTitleStatus,
    ClearanceStatus,
    ComparableTitle,
    Credit,
    CreditRole,
    DistributionGoal,
    InsuranceStatus,
    IntakeBuilder,
    IntakeValidationError,
    LegalStatus,
    PlatformIntent,
    PlatformNotes,
    PlatformRoute,
    ProjectIntake,
    ProjectType,
    RightsOfferType,
    TechnicalDeliverables,
)
from distribution_readiness.intake.loader import (
    IntakeDocument,
    dump_intake,
    load_intake,
    parse_intake,
    save_intake,
)

# -- Platforms ------------------------------------------------------------
from distribution_readiness.platforms import PLATFORM_CATALOG, Platform, platform_label
from distribution_readiness.platforms.checklist import (
    ChecklistItem,
    ChecklistState,
    build_checklist,
    build_platform_checklists,
)

# -- Readiness ------------------------------------------------------------
from distribution_readiness.readiness import (
    ReadinessAssessor,
    ReadinessReport,
    assess,
    build_recommended_actions,
)

# -- Scoring --------------------------------------------------------------
from distribution_readiness.scoring import (
    DEFAULT_HARD_STOP_RULES,
    HARD_STOP_CEILING,
    HardStopRegistry,
    HardStopRule,
    HardStopRuleNotFoundError,
    PillarWeights,
    ReadinessBand,
    apply_hard_stop_cap,
    classify_band,
    combine_scores,
    detect_hard_stops,
    score_business,
    score_legal,
    score_technical,
    select_weights,
)

__all__ = [
    "__version__",
    # Convenience
    "assess_json",
    "quick_assess",
    # Intake
    "Availability",
    "BudgetTier",
    "BusinessPackage",
    "CaptionStatus",
    "ChainOfTitleStatus",
    "ClearanceStatus",
    "ComparableTitle",
    "Credit",
    "CreditRole",
    "DistributionGoal",
    "InsuranceStatus",
    "IntakeBuilder",
    "IntakeDocument",
    "IntakeValidationError",
    "LegalStatus",
    "PlatformIntent",
    "PlatformNotes",
    "PlatformRoute",
    "ProjectIntake",
    "ProjectType",
    "RightsOfferType",
    "TechnicalDeliverables",
    "dump_intake",
    "load_intake",
    "parse_intake",
    "save_intake",
    # Platforms
    "ChecklistItem",
    "ChecklistState",
    "PLATFORM_CATALOG",
    "Platform",
    "build_checklist",
    "build_platform_checklists",
    "platform_label",
    # Readiness
    "ReadinessAssessor",
    "ReadinessReport",
    "assess",
    "build_recommended_actions",
    # Scoring
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
