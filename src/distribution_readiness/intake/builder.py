"""IntakeBuilder — validated, incremental construction of ProjectIntake.

The builder is the only mutable object in the intake layer.  Interactive
callers update it field by field and call :meth:`IntakeBuilder.build` to
capture an immutable :class:`~distribution_readiness.intake.model.ProjectIntake`
snapshot, which is what the scoring engine consumes.

Validation happens once, in :meth:`~IntakeBuilder.build`, and reports every
problem at the same time rather than stopping at the first one.
"""
from __future__ import annotations

import logging
from dataclasses import fields
from enum import Enum
from types import MappingProxyType
from typing import Iterable, TypeVar

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
from distribution_readiness.platforms.catalog import is_known_platform

logger = logging.getLogger(__name__)

LOGLINE_MAX_CHARS = 280
SHORT_SYNOPSIS_MAX_CHARS = 1200

_E = TypeVar("_E", bound=Enum)


class IntakeValidationError(ValueError):
    """Raised by :meth:`IntakeBuilder.build` when the intake is invalid.

    Attributes
    ----------
    errors:
        Every validation problem found, in field order.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        joined = "; ".join(self.errors)
        super().__init__(f"Invalid project intake ({len(self.errors)} problem(s)): {joined}")


def _field_values(instance: object) -> dict[str, object]:
    """Shallow field-name → value mapping of a dataclass instance."""
    return {f.name: getattr(instance, f.name) for f in fields(instance)}  # type: ignore[arg-type]


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


def _texts(values: Iterable[object]) -> list[str]:
    cleaned = [_text(v) for v in values]
    return [v for v in cleaned if v]


def _coerce(
    enum_cls: type[_E],
    value: object,
    field_name: str,
    default: _E,
    errors: list[str],
) -> _E:
    """Return *value* as a member of *enum_cls*, recording an error if it is not one.

    ``None`` and the empty string mean "absent" and yield *default*.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None or _text(value) == "":
        return default
    try:
        return enum_cls(_text(value).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)  # type: ignore[attr-defined]
        errors.append(f"{field_name}: {value!r} is not one of [{allowed}]")
        return default


class IntakeBuilder:
    """Fluent builder for :class:`ProjectIntake`.

    Scalar fields are set with ``with_*`` methods, collection fields are
    extended with ``add_*`` methods.  Every method returns the builder so
    calls can be chained.

    Example
    -------
    ::

        intake = (
            IntakeBuilder()
            .with_runtime_minutes(94)
            .with_budget_tier("small")
            .add_target_platform("tubi")
            .with_captions("yes")
            .with_chain_of_title("complete")
            .build()
        )
    """

    def __init__(self) -> None:
        self._project: dict[str, object] = {
            "runtime_minutes": 0,
            "budget_tier": BudgetTier.MEDIUM,
            "project_title": "",
            "project_type": ProjectType.UNSPECIFIED,
            "primary_language": "",
            "distribution_goal": DistributionGoal.UNSPECIFIED,
        }
        self._platforms: list[str] = []
        self._platform_notes: dict[str, tuple[object, object, str]] = {}
        self._business = _field_values(BusinessPackage())
        self._genres: list[str] = []
        self._tone_keywords: list[str] = []
        self._comps: list[ComparableTitle] = []
        self._credits: list[tuple[str, object, str, str]] = []
        self._legal = _field_values(LegalStatus())
        self._risks: list[str] = []
        self._technical = _field_values(TechnicalDeliverables())
        self._audio: list[str] = []
        self._subtitles: list[str] = []
        self._tech_issues: list[str] = []

    @classmethod
    def from_intake(cls, intake: ProjectIntake) -> "IntakeBuilder":
        """Return a builder pre-populated from an existing snapshot.

        Edits made to the returned builder never affect *intake*.
        """
        builder = cls()
        builder._project.update(
            runtime_minutes=intake.runtime_minutes,
            budget_tier=intake.budget_tier,
            project_title=intake.project_title,
            project_type=intake.project_type,
            primary_language=intake.primary_language,
            distribution_goal=intake.distribution_goal,
        )
        builder._platforms = list(intake.target_platforms)
        builder._platform_notes = {
            pid: (n.intent, n.route, n.notes) for pid, n in intake.platform_notes.items()
        }
        builder._business = _field_values(intake.business)
        builder._genres = sorted(intake.business.genres)
        builder._tone_keywords = list(intake.business.tone_keywords)
        builder._comps = list(intake.business.comparable_titles)
        builder._credits = [
            (c.person, c.role, c.character, c.notable_credits) for c in intake.business.credits
        ]
        builder._legal = _field_values(intake.legal)
        builder._risks = sorted(intake.legal.known_clearance_risks)
        builder._technical = _field_values(intake.technical)
        builder._audio = sorted(intake.technical.audio_deliverables)
        builder._subtitles = list(intake.technical.subtitle_languages)
        builder._tech_issues = list(intake.technical.known_technical_issues)
        return builder

    # ------------------------------------------------------------------
    # Project setup
    # ------------------------------------------------------------------

    def with_project_title(self, title: str) -> "IntakeBuilder":
        self._project["project_title"] = title
        return self

    def with_project_type(self, project_type: ProjectType | str) -> "IntakeBuilder":
        self._project["project_type"] = project_type
        return self

    def with_primary_language(self, language: str) -> "IntakeBuilder":
        self._project["primary_language"] = language
        return self

    def with_distribution_goal(self, goal: DistributionGoal | str) -> "IntakeBuilder":
        self._project["distribution_goal"] = goal
        return self

    def with_runtime_minutes(self, minutes: int | str | None) -> "IntakeBuilder":
        self._project["runtime_minutes"] = minutes
        return self

    def with_budget_tier(self, tier: BudgetTier | str | None) -> "IntakeBuilder":
        self._project["budget_tier"] = tier
        return self

    def add_target_platform(self, platform_id: str) -> "IntakeBuilder":
        """Append *platform_id*; repeated selections keep the first position."""
        pid = _text(platform_id).lower()
        if pid and pid not in self._platforms:
            self._platforms.append(pid)
        return self

    def add_target_platforms(self, platform_ids: Iterable[str]) -> "IntakeBuilder":
        for pid in platform_ids:
            self.add_target_platform(pid)
        return self

    def remove_target_platform(self, platform_id: str) -> "IntakeBuilder":
        pid = _text(platform_id).lower()
        if pid in self._platforms:
            self._platforms.remove(pid)
        self._platform_notes.pop(pid, None)
        return self

    def with_platform_notes(
        self,
        platform_id: str,
        intent: PlatformIntent | str | None = None,
        route: PlatformRoute | str | None = None,
        notes: str = "",
    ) -> "IntakeBuilder":
        self._platform_notes[_text(platform_id).lower()] = (intent, route, notes)
        return self

    # ------------------------------------------------------------------
    # Business package
    # ------------------------------------------------------------------

    def with_logline(self, logline: str) -> "IntakeBuilder":
        self._business["logline"] = logline
        return self

    def with_short_synopsis(self, synopsis: str) -> "IntakeBuilder":
        self._business["short_synopsis"] = synopsis
        return self

    def with_long_synopsis(self, synopsis: str) -> "IntakeBuilder":
        self._business["long_synopsis"] = synopsis
        return self

    def add_genre(self, *genres: str) -> "IntakeBuilder":
        self._genres.extend(genres)
        return self

    def add_tone_keyword(self, *keywords: str) -> "IntakeBuilder":
        self._tone_keywords.extend(keywords)
        return self

    def add_comparable_title(
        self, title: str, year: str | int = "", rationale: str = ""
    ) -> "IntakeBuilder":
        self._comps.append(
            ComparableTitle(title=_text(title), year=_text(year), rationale=_text(rationale))
        )
        return self

    def add_credit(
        self,
        person: str,
        role: CreditRole | str = CreditRole.OTHER,
        character: str = "",
        notable_credits: str = "",
    ) -> "IntakeBuilder":
        self._credits.append((person, role, character, notable_credits))
        return self

    def with_trailer(self, present: bool = True) -> "IntakeBuilder":
        self._business["trailer_present"] = bool(present)
        return self

    def with_poster_or_key_art(self, present: bool = True) -> "IntakeBuilder":
        self._business["poster_or_key_art_present"] = bool(present)
        return self

    def with_still_image_count(self, count: int) -> "IntakeBuilder":
        self._business["still_image_count"] = count
        return self

    def with_press_kit_url(self, url: str | None) -> "IntakeBuilder":
        self._business["press_kit_url"] = url
        return self

    def with_rights_offer(self, offer: RightsOfferType | str | None) -> "IntakeBuilder":
        self._business["rights_offer_type"] = offer
        return self

    def with_territories(self, territories: str) -> "IntakeBuilder":
        self._business["territories"] = territories
        return self

    def with_term_months(self, months: int | None) -> "IntakeBuilder":
        self._business["term_months"] = months
        return self

    # ------------------------------------------------------------------
    # Legal
    # ------------------------------------------------------------------

    def with_chain_of_title(self, status: ChainOfTitleStatus | str | None) -> "IntakeBuilder":
        self._legal["chain_of_title_status"] = status
        return self

    def with_music_clearance(self, status: ClearanceStatus | str | None) -> "IntakeBuilder":
        self._legal["music_clearance_status"] = status
        return self

    def with_releases(self, status: ClearanceStatus | str | None) -> "IntakeBuilder":
        self._legal["releases_status"] = status
        return self

    def with_errors_and_omissions(self, status: InsuranceStatus | str | None) -> "IntakeBuilder":
        self._legal["errors_and_omissions_status"] = status
        return self

    def add_clearance_risk(self, *risks: str) -> "IntakeBuilder":
        self._risks.extend(risks)
        return self

    # ------------------------------------------------------------------
    # Technical
    # ------------------------------------------------------------------

    def with_master(
        self,
        available: Availability | str | None,
        master_format: str | None = None,
        resolution: str | None = None,
        frame_rate: str | None = None,
    ) -> "IntakeBuilder":
        """Set master availability and, optionally, its descriptive properties."""
        self._technical["master_available"] = available
        if master_format is not None:
            self._technical["master_format"] = master_format
        if resolution is not None:
            self._technical["master_resolution"] = resolution
        if frame_rate is not None:
            self._technical["master_frame_rate"] = frame_rate
        return self

    def with_master_format(self, master_format: str | None) -> "IntakeBuilder":
        self._technical["master_format"] = master_format
        return self

    def add_audio_deliverable(self, *deliverables: str) -> "IntakeBuilder":
        self._audio.extend(deliverables)
        return self

    def with_captions(self, status: CaptionStatus | str | None) -> "IntakeBuilder":
        self._technical["captions_available"] = status
        return self

    def add_subtitle_language(self, *languages: str) -> "IntakeBuilder":
        self._subtitles.extend(languages)
        return self

    def with_textless_elements(self, status: Availability | str | None) -> "IntakeBuilder":
        self._technical["textless_elements_available"] = status
        return self

    def with_music_and_effects_track(self, status: Availability | str | None) -> "IntakeBuilder":
        self._technical["music_and_effects_track_available"] = status
        return self

    def with_quality_control(self, status: Availability | str | None) -> "IntakeBuilder":
        self._technical["quality_control_done"] = status
        return self

    def add_technical_issue(self, *issues: str) -> "IntakeBuilder":
        self._tech_issues.extend(issues)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> ProjectIntake:
        """Validate the current state and return an immutable snapshot.

        Raises
        ------
        IntakeValidationError
            If any field is invalid.  All problems are reported together.
        """
        errors: list[str] = []
        business = self._build_business(errors)
        legal = self._build_legal(errors)
        technical = self._build_technical(errors)

        runtime = self._build_runtime(errors)
        budget_tier = self._build_budget_tier()

        for pid in self._platforms:
            if not is_known_platform(pid):
                errors.append(f"target_platforms: unknown platform id {pid!r}")

        notes: dict[str, PlatformNotes] = {}
        for pid, (intent, route, text) in self._platform_notes.items():
            notes[pid] = PlatformNotes(
                intent=_coerce(
                    PlatformIntent, intent, f"platform_notes[{pid}].intent",
                    PlatformIntent.UNSPECIFIED, errors,
                ),
                route=_coerce(
                    PlatformRoute, route, f"platform_notes[{pid}].route",
                    PlatformRoute.UNKNOWN, errors,
                ),
                notes=_text(text),
            )

        p = self._project
        project_type = _coerce(
            ProjectType, p["project_type"], "project_type", ProjectType.UNSPECIFIED, errors
        )
        goal = _coerce(
            DistributionGoal, p["distribution_goal"], "distribution_goal",
            DistributionGoal.UNSPECIFIED, errors,
        )

        if errors:
            logger.debug("Intake validation failed with %d error(s).", len(errors))
            raise IntakeValidationError(errors)

        intake = ProjectIntake(
            business=business,
            legal=legal,
            technical=technical,
            runtime_minutes=runtime,
            budget_tier=budget_tier,
            target_platforms=tuple(self._platforms),
            project_title=_text(p["project_title"]),
            project_type=project_type,
            primary_language=_text(p["primary_language"]),
            distribution_goal=goal,
            platform_notes=MappingProxyType(notes),
        )
        logger.debug(
            "Built intake snapshot %r (%d platform(s)).",
            intake.project_title, len(intake.target_platforms),
        )
        return intake

    # ------------------------------------------------------------------
    # Section builders
    # ------------------------------------------------------------------

    def _build_runtime(self, errors: list[str]) -> int:
        raw = self._project["runtime_minutes"]
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return 0
        if isinstance(raw, bool):
            errors.append("runtime_minutes: must be an integer number of minutes")
            return 0
        if isinstance(raw, str):
            try:
                raw = int(raw.strip())
            except ValueError:
                errors.append(f"runtime_minutes: {raw!r} is not an integer")
                return 0
        if not isinstance(raw, int):
            errors.append(f"runtime_minutes: {raw!r} is not an integer")
            return 0
        if raw < 0:
            errors.append(f"runtime_minutes: must be non-negative, got {raw}")
            return 0
        return raw

    def _build_budget_tier(self) -> BudgetTier:
        raw = self._project["budget_tier"]
        if isinstance(raw, BudgetTier):
            return raw
        if raw is None or _text(raw) == "":
            return BudgetTier.MEDIUM
        try:
            return BudgetTier(_text(raw).lower())
        except ValueError:
            logger.warning("Unrecognised budget tier %r; using medium-tier weights.", raw)
            return BudgetTier.MEDIUM

    def _build_business(self, errors: list[str]) -> BusinessPackage:
        b = self._business
        logline = _text(b["logline"])
        if len(logline) > LOGLINE_MAX_CHARS:
            errors.append(
                f"logline: {len(logline)} characters exceeds limit of {LOGLINE_MAX_CHARS}"
            )
        short_synopsis = _text(b["short_synopsis"])
        if len(short_synopsis) > SHORT_SYNOPSIS_MAX_CHARS:
            errors.append(
                f"short_synopsis: {len(short_synopsis)} characters exceeds limit of "
                f"{SHORT_SYNOPSIS_MAX_CHARS}"
            )

        credits: list[Credit] = []
        for index, (person, role, character, notable) in enumerate(self._credits):
            credits.append(
                Credit(
                    person=_text(person),
                    role=_coerce(CreditRole, role, f"credits[{index}].role", CreditRole.OTHER, errors),
                    character=_text(character),
                    notable_credits=_text(notable),
                )
            )

        still_images = b["still_image_count"]
        if not isinstance(still_images, int) or isinstance(still_images, bool) or still_images < 0:
            errors.append(f"still_image_count: must be a non-negative integer, got {still_images!r}")
            still_images = 0

        term_months = b["term_months"]
        if term_months is not None and (
            not isinstance(term_months, int) or isinstance(term_months, bool) or term_months < 0
        ):
            errors.append(f"term_months: must be a non-negative integer, got {term_months!r}")
            term_months = None

        return BusinessPackage(
            logline=logline,
            short_synopsis=short_synopsis,
            long_synopsis=_text(b["long_synopsis"]),
            genres=frozenset(_texts(self._genres)),
            tone_keywords=tuple(_texts(self._tone_keywords)),
            comparable_titles=tuple(c for c in self._comps if c.title),
            credits=tuple(credits),
            trailer_present=bool(b["trailer_present"]),
            poster_or_key_art_present=bool(b["poster_or_key_art_present"]),
            still_image_count=still_images,
            press_kit_url=_text(b["press_kit_url"]),
            rights_offer_type=_coerce(
                RightsOfferType, b["rights_offer_type"], "rights_offer_type",
                RightsOfferType.UNKNOWN, errors,
            ),
            territories=_text(b["territories"]),
            term_months=term_months,
        )

    def _build_legal(self, errors: list[str]) -> LegalStatus:
        g = self._legal
        return LegalStatus(
            chain_of_title_status=_coerce(
                ChainOfTitleStatus, g["chain_of_title_status"], "chain_of_title_status",
                ChainOfTitleStatus.MISSING, errors,
            ),
            music_clearance_status=_coerce(
                ClearanceStatus, g["music_clearance_status"], "music_clearance_status",
                ClearanceStatus.UNKNOWN, errors,
            ),
            releases_status=_coerce(
                ClearanceStatus, g["releases_status"], "releases_status",
                ClearanceStatus.UNKNOWN, errors,
            ),
            errors_and_omissions_status=_coerce(
                InsuranceStatus, g["errors_and_omissions_status"], "errors_and_omissions_status",
                InsuranceStatus.MISSING, errors,
            ),
            known_clearance_risks=frozenset(_texts(self._risks)),
        )

    def _build_technical(self, errors: list[str]) -> TechnicalDeliverables:
        t = self._technical
        return TechnicalDeliverables(
            master_available=_coerce(
                Availability, t["master_available"], "master_available",
                Availability.UNKNOWN, errors,
            ),
            master_format=_text(t["master_format"]),
            master_resolution=_text(t["master_resolution"]),
            master_frame_rate=_text(t["master_frame_rate"]),
            audio_deliverables=frozenset(_texts(self._audio)),
            captions_available=_coerce(
                CaptionStatus, t["captions_available"], "captions_available",
                CaptionStatus.NO, errors,
            ),
            subtitle_languages=tuple(_texts(self._subtitles)),
            textless_elements_available=_coerce(
                Availability, t["textless_elements_available"], "textless_elements_available",
                Availability.UNKNOWN, errors,
            ),
            music_and_effects_track_available=_coerce(
                Availability, t["music_and_effects_track_available"],
                "music_and_effects_track_available", Availability.UNKNOWN, errors,
            ),
            quality_control_done=_coerce(
                Availability, t["quality_control_done"], "quality_control_done",
                Availability.UNKNOWN, errors,
            ),
            known_technical_issues=tuple(_texts(self._tech_issues)),
        )


__all__ = [
    "IntakeBuilder",
    "IntakeValidationError",
    "LOGLINE_MAX_CHARS",
    "SHORT_SYNOPSIS_MAX_CHARS",
]
