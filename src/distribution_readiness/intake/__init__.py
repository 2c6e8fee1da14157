"""Project intake subpackage: enums, immutable model, builder and loader."""
from __future__ import annotations

from distribution_readiness.intake.builder import IntakeBuilder, IntakeValidationError
from distribution_readiness.intake.enums import (
    Availability,
    BudgetTier,
    CaptionStatus,
    ChainOfTitleStatus,
    ClearanceStatus,
    CreditRole,
    DistributionGoal,
    InsuranceStatus,
    PlatformIntent,
    PlatformRoute,
    ProjectType,
    RightsOfferType,
)
from distribution_readiness.intake.model import (
    BusinessPackage,
    ComparableTitle,
    Credit,
    LegalStatus,
    PlatformNotes,
    ProjectIntake,
    TechnicalDeliverables,
)

__all__ = [
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
    "IntakeValidationError",
    "LegalStatus",
    "PlatformIntent",
    "PlatformNotes",
    "PlatformRoute",
    "ProjectIntake",
    "ProjectType",
    "RightsOfferType",
    "TechnicalDeliverables",
]
