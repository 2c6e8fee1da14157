"""Closed status enumerations used by the project intake.

Every enum is ``str``-valued so members compare equal to their wire value and
serialise directly to JSON/YAML.  Each field that can be left blank has an
explicit "unknown" or "missing" member; absence is never modelled as ``None``.
"""
from __future__ import annotations

from enum import Enum


class RightsOfferType(str, Enum):
    """Kind of rights the producer is offering to distributors."""

    EXCLUSIVE = "exclusive"
    NON_EXCLUSIVE = "non_exclusive"
    UNKNOWN = "unknown"


class ChainOfTitleStatus(str, Enum):
    """State of the chain-of-title documentation."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    MISSING = "missing"


class ClearanceStatus(str, Enum):
    """State of a clearance (music licences, talent/location releases)."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    MISSING = "missing"
    UNKNOWN = "unknown"


class InsuranceStatus(str, Enum):
    """State of the Errors & Omissions insurance policy."""

    IN_PLACE = "in_place"
    PLANNED = "planned"
    MISSING = "missing"


class Availability(str, Enum):
    """Yes/no/unknown answer for a technical deliverable."""

    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class CaptionStatus(str, Enum):
    """Whether captions/closed captions exist for the master."""

    YES = "yes"
    NO = "no"
    IN_PROGRESS = "in_progress"


class BudgetTier(str, Enum):
    """Coarse budget classification that selects pillar weights."""

    SMALL = "small"
    MEDIUM = "medium"
    HIGH = "high"


class CreditRole(str, Enum):
    """Role of a key credit."""

    DIRECTOR = "director"
    WRITER = "writer"
    PRODUCER = "producer"
    CAST = "cast"
    DP = "dp"
    EDITOR = "editor"
    COMPOSER = "composer"
    OTHER = "other"


class ProjectType(str, Enum):
    """Kind of production."""

    FEATURE = "feature"
    SHORT = "short"
    SERIES = "series"
    DOC = "doc"
    SPECIAL = "special"
    UNSPECIFIED = "unspecified"


class DistributionGoal(str, Enum):
    """Primary monetisation window the producer is aiming for."""

    SVOD = "svod"
    TVOD = "tvod"
    AVOD = "avod"
    FAST = "fast"
    THEATRICAL = "theatrical"
    FESTIVAL = "festival"
    UNSPECIFIED = "unspecified"


class PlatformIntent(str, Enum):
    """How far along the producer is with a given platform."""

    EXPLORING = "exploring"
    ACTIVELY_PITCHING = "actively_pitching"
    READY_TO_DELIVER = "ready_to_deliver"
    UNSPECIFIED = "unspecified"


class PlatformRoute(str, Enum):
    """Delivery route towards a given platform."""

    DIRECT_IF_AVAILABLE = "direct_if_available"
    AGGREGATOR = "aggregator"
    DISTRIBUTOR = "distributor"
    SALES_AGENT = "sales_agent"
    UNKNOWN = "unknown"


__all__ = [
    "Availability",
    "BudgetTier",
    "CaptionStatus",
    "ChainOfTitleStatus",
    "ClearanceStatus",
    "CreditRole",
    "DistributionGoal",
    "InsuranceStatus",
    "PlatformIntent",
    "PlatformRoute",
    "ProjectType",
    "RightsOfferType",
]
