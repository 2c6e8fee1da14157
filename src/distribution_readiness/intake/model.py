"""Immutable project intake snapshot.

A :class:`ProjectIntake` describes the declared business, legal and technical
state of a production.  It is a tree of frozen dataclasses whose collections
are tuples, frozensets or read-only mappings, so a snapshot handed to the
scoring engine can never change underneath it.

Every field defaults to its "absent" value, which is always the same as the
explicit "unknown"/"missing" member of the field's enum.  Build snapshots with
:class:`~distribution_readiness.intake.builder.IntakeBuilder` to get boundary
validation.  Constructing the dataclasses directly still converts raw status
strings to enum members and raises ``ValueError`` for values outside a
field's enum; other checks (length limits, platform ids) are skipped.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

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

if TYPE_CHECKING:
    from distribution_readiness.intake.builder import IntakeBuilder


def _empty_mapping() -> Mapping[str, "PlatformNotes"]:
    return MappingProxyType({})


def _coerce_enums(instance: object, fields: Mapping[str, type[Enum]]) -> None:
    """Replace raw values on a frozen *instance* with members of their enum.

    Raises
    ------
    ValueError
        If a value is not a member of the field's enum.
    """
    for name, enum_cls in fields.items():
        value = getattr(instance, name)
        if not isinstance(value, enum_cls):
            object.__setattr__(instance, name, enum_cls(value))


# ---------------------------------------------------------------------------
# Leaf records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ComparableTitle:
    """A comparable ("comp") title used to position the project.

    Attributes
    ----------
    title:
        Title of the comparable release.
    year:
        Release year as free text (may be empty).
    rationale:
        Why the title is comparable.
    """

    title: str
    year: str = ""
    rationale: str = ""


@dataclass(frozen=True)
class Credit:
    """A key creative credit.

    Attributes
    ----------
    person:
        Name of the credited person.
    role:
        The :class:`CreditRole` held on this project.
    character:
        Character name, for cast credits.
    notable_credits:
        Free-text list of the person's notable prior work.
    """

    person: str
    role: CreditRole = CreditRole.OTHER
    character: str = ""
    notable_credits: str = ""

    def __post_init__(self) -> None:
        _coerce_enums(self, {"role": CreditRole})


@dataclass(frozen=True)
class PlatformNotes:
    """Producer notes about one target platform.  Informational only."""

    intent: PlatformIntent = PlatformIntent.UNSPECIFIED
    route: PlatformRoute = PlatformRoute.UNKNOWN
    notes: str = ""

    def __post_init__(self) -> None:
        _coerce_enums(self, {"intent": PlatformIntent, "route": PlatformRoute})


# ---------------------------------------------------------------------------
# Pillar sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BusinessPackage:
    """Marketing and sales packaging of the project."""

    logline: str = ""
    short_synopsis: str = ""
    long_synopsis: str = ""
    genres: frozenset[str] = frozenset()
    tone_keywords: tuple[str, ...] = ()
    comparable_titles: tuple[ComparableTitle, ...] = ()
    credits: tuple[Credit, ...] = ()
    trailer_present: bool = False
    poster_or_key_art_present: bool = False
    still_image_count: int = 0
    press_kit_url: str = ""
    rights_offer_type: RightsOfferType = RightsOfferType.UNKNOWN
    territories: str = ""
    term_months: int | None = None

    def __post_init__(self) -> None:
        _coerce_enums(self, {"rights_offer_type": RightsOfferType})


@dataclass(frozen=True)
class LegalStatus:
    """Legal clearances backing the project."""

    chain_of_title_status: ChainOfTitleStatus = ChainOfTitleStatus.MISSING
    music_clearance_status: ClearanceStatus = ClearanceStatus.UNKNOWN
    releases_status: ClearanceStatus = ClearanceStatus.UNKNOWN
    errors_and_omissions_status: InsuranceStatus = InsuranceStatus.MISSING
    known_clearance_risks: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        _coerce_enums(
            self,
            {
                "chain_of_title_status": ChainOfTitleStatus,
                "music_clearance_status": ClearanceStatus,
                "releases_status": ClearanceStatus,
                "errors_and_omissions_status": InsuranceStatus,
            },
        )


@dataclass(frozen=True)
class TechnicalDeliverables:
    """Technical delivery elements available for the project.

    ``master_resolution`` and ``master_frame_rate`` are recorded for
    reference and never scored.
    """

    master_available: Availability = Availability.UNKNOWN
    master_format: str = ""
    master_resolution: str = ""
    master_frame_rate: str = ""
    audio_deliverables: frozenset[str] = frozenset()
    captions_available: CaptionStatus = CaptionStatus.NO
    subtitle_languages: tuple[str, ...] = ()
    textless_elements_available: Availability = Availability.UNKNOWN
    music_and_effects_track_available: Availability = Availability.UNKNOWN
    quality_control_done: Availability = Availability.UNKNOWN
    known_technical_issues: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _coerce_enums(
            self,
            {
                "master_available": Availability,
                "captions_available": CaptionStatus,
                "textless_elements_available": Availability,
                "music_and_effects_track_available": Availability,
                "quality_control_done": Availability,
            },
        )


# ---------------------------------------------------------------------------
# Root snapshot
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectIntake:
    """Complete, immutable intake snapshot consumed by the scoring engine.

    Attributes
    ----------
    business, legal, technical:
        The three pillar sections.
    runtime_minutes:
        Running time in whole minutes (non-negative).
    budget_tier:
        Selects pillar weights.
    target_platforms:
        Platform ids in the order the producer selected them.
    project_title, project_type, primary_language, distribution_goal:
        Descriptive project metadata; never scored.
    platform_notes:
        Read-only mapping of platform id to :class:`PlatformNotes`.
    """

    business: BusinessPackage = field(default_factory=BusinessPackage)
    legal: LegalStatus = field(default_factory=LegalStatus)
    technical: TechnicalDeliverables = field(default_factory=TechnicalDeliverables)
    runtime_minutes: int = 0
    budget_tier: BudgetTier = BudgetTier.MEDIUM
    target_platforms: tuple[str, ...] = ()
    project_title: str = ""
    project_type: ProjectType = ProjectType.UNSPECIFIED
    primary_language: str = ""
    distribution_goal: DistributionGoal = DistributionGoal.UNSPECIFIED
    platform_notes: Mapping[str, PlatformNotes] = field(default_factory=_empty_mapping)

    def __post_init__(self) -> None:
        _coerce_enums(
            self,
            {
                "budget_tier": BudgetTier,
                "project_type": ProjectType,
                "distribution_goal": DistributionGoal,
            },
        )

    @classmethod
    def builder(cls) -> "IntakeBuilder":
        """Return an empty :class:`IntakeBuilder`."""
        from distribution_readiness.intake.builder import IntakeBuilder

        return IntakeBuilder()


__all__ = [
    "BusinessPackage",
    "ComparableTitle",
    "Credit",
    "LegalStatus",
    "PlatformNotes",
    "ProjectIntake",
    "TechnicalDeliverables",
]
