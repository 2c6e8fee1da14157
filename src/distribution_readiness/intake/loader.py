"""Intake documents — load and save ProjectIntake as YAML or JSON.

An intake document is the wire form of a :class:`ProjectIntake`: a mapping
grouped by pillar with camelCase keys (snake_case keys are accepted too)::

    projectTitle: Night Harbor
    runtimeMinutes: 94
    budgetTier: small
    targetPlatforms: [tubi, pluto]
    business:
      logline: A harbor pilot uncovers a smuggling ring.
      trailerPresent: true
      rightsOfferType: non_exclusive
    legal:
      chainOfTitleStatus: complete
    technical:
      captionsAvailable: in_progress

Structure is checked by pydantic; field values (enum members, length limits,
non-negative runtime) are checked by
:class:`~distribution_readiness.intake.builder.IntakeBuilder`, so a document
and a hand-built intake are validated by the same rules.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Mapping

import yaml
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from distribution_readiness.intake.builder import IntakeBuilder, IntakeValidationError
from distribution_readiness.intake.model import ProjectIntake

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _answer_from_bool(value: object) -> object:
    # YAML 1.1 reads bare yes/no as booleans.
    if isinstance(value, bool):
        return "yes" if value else "no"
    return value


StatusText = Annotated[str | None, BeforeValidator(_answer_from_bool)]


def _text_from_number(value: object) -> object:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


FreeText = Annotated[str | None, BeforeValidator(_text_from_number)]
Text = Annotated[str, BeforeValidator(_text_from_number)]


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ComparableTitleDocument(_Document):
    title: Text
    year: FreeText = ""
    rationale: Text = ""


class CreditDocument(_Document):
    person: Text = ""
    role: StatusText = None
    character: Text = ""
    notable_credits: Text = ""


class PlatformNotesDocument(_Document):
    intent: StatusText = None
    route: StatusText = None
    notes: Text = ""


class BusinessDocument(_Document):
    logline: Text = ""
    short_synopsis: Text = ""
    long_synopsis: Text = ""
    genres: list[Text] = Field(default_factory=list)
    tone_keywords: list[Text] = Field(default_factory=list)
    comparable_titles: list[ComparableTitleDocument] = Field(default_factory=list)
    credits: list[CreditDocument] = Field(default_factory=list)
    trailer_present: bool = False
    poster_or_key_art_present: bool = False
    still_image_count: int = 0
    press_kit_url: str | None = None
    rights_offer_type: StatusText = None
    territories: Text = ""
    term_months: int | None = None


class LegalDocument(_Document):
    chain_of_title_status: StatusText = None
    music_clearance_status: StatusText = None
    releases_status: StatusText = None
    errors_and_omissions_status: StatusText = None
    known_clearance_risks: list[Text] = Field(default_factory=list)


class TechnicalDocument(_Document):
    master_available: StatusText = None
    master_format: FreeText = None
    master_resolution: FreeText = None
    master_frame_rate: FreeText = None
    audio_deliverables: list[Text] = Field(default_factory=list)
    captions_available: StatusText = None
    subtitle_languages: list[Text] = Field(default_factory=list)
    textless_elements_available: StatusText = None
    music_and_effects_track_available: StatusText = None
    quality_control_done: StatusText = None
    known_technical_issues: list[Text] = Field(default_factory=list)


class IntakeDocument(_Document):
    """Serialisable form of a :class:`ProjectIntake`.

    Every field is optional; an empty document describes an all-defaults
    intake.
    """

    project_title: Text = ""
    project_type: StatusText = None
    primary_language: Text = ""
    distribution_goal: StatusText = None
    runtime_minutes: int | None = None
    budget_tier: StatusText = None
    target_platforms: list[str] = Field(default_factory=list)
    platform_notes: dict[str, PlatformNotesDocument] = Field(default_factory=dict)
    business: BusinessDocument = Field(default_factory=BusinessDocument)
    legal: LegalDocument = Field(default_factory=LegalDocument)
    technical: TechnicalDocument = Field(default_factory=TechnicalDocument)

    def to_builder(self) -> IntakeBuilder:
        """Return an :class:`IntakeBuilder` populated from this document."""
        builder = (
            IntakeBuilder()
            .with_project_title(self.project_title)
            .with_project_type(self.project_type)
            .with_primary_language(self.primary_language)
            .with_distribution_goal(self.distribution_goal)
            .with_runtime_minutes(self.runtime_minutes)
            .with_budget_tier(self.budget_tier)
            .add_target_platforms(self.target_platforms)
        )
        for platform_id, notes in self.platform_notes.items():
            builder.with_platform_notes(platform_id, notes.intent, notes.route, notes.notes)

        b = self.business
        builder.with_logline(b.logline).with_short_synopsis(b.short_synopsis)
        builder.with_long_synopsis(b.long_synopsis)
        builder.add_genre(*b.genres).add_tone_keyword(*b.tone_keywords)
        for comp in b.comparable_titles:
            builder.add_comparable_title(comp.title, comp.year, comp.rationale)
        for credit in b.credits:
            builder.add_credit(
                credit.person, credit.role or "other", credit.character, credit.notable_credits
            )
        builder.with_trailer(b.trailer_present).with_poster_or_key_art(b.poster_or_key_art_present)
        builder.with_still_image_count(b.still_image_count).with_press_kit_url(b.press_kit_url)
        builder.with_rights_offer(b.rights_offer_type).with_territories(b.territories)
        builder.with_term_months(b.term_months)

        g = self.legal
        builder.with_chain_of_title(g.chain_of_title_status)
        builder.with_music_clearance(g.music_clearance_status)
        builder.with_releases(g.releases_status)
        builder.with_errors_and_omissions(g.errors_and_omissions_status)
        builder.add_clearance_risk(*g.known_clearance_risks)

        t = self.technical
        builder.with_master(
            t.master_available, t.master_format, t.master_resolution, t.master_frame_rate
        )
        builder.add_audio_deliverable(*t.audio_deliverables)
        builder.with_captions(t.captions_available)
        builder.add_subtitle_language(*t.subtitle_languages)
        builder.with_textless_elements(t.textless_elements_available)
        builder.with_music_and_effects_track(t.music_and_effects_track_available)
        builder.with_quality_control(t.quality_control_done)
        builder.add_technical_issue(*t.known_technical_issues)
        return builder

    @classmethod
    def from_intake(cls, intake: ProjectIntake) -> "IntakeDocument":
        """Return the document form of *intake*."""
        b, g, t = intake.business, intake.legal, intake.technical
        return cls(
            project_title=intake.project_title,
            project_type=intake.project_type.value,
            primary_language=intake.primary_language,
            distribution_goal=intake.distribution_goal.value,
            runtime_minutes=intake.runtime_minutes,
            budget_tier=intake.budget_tier.value,
            target_platforms=list(intake.target_platforms),
            platform_notes={
                pid: PlatformNotesDocument(
                    intent=n.intent.value, route=n.route.value, notes=n.notes
                )
                for pid, n in intake.platform_notes.items()
            },
            business=BusinessDocument(
                logline=b.logline,
                short_synopsis=b.short_synopsis,
                long_synopsis=b.long_synopsis,
                genres=sorted(b.genres),
                tone_keywords=list(b.tone_keywords),
                comparable_titles=[
                    ComparableTitleDocument(title=c.title, year=c.year, rationale=c.rationale)
                    for c in b.comparable_titles
                ],
                credits=[
                    CreditDocument(
                        person=c.person,
                        role=c.role.value,
                        character=c.character,
                        notable_credits=c.notable_credits,
                    )
                    for c in b.credits
                ],
                trailer_present=b.trailer_present,
                poster_or_key_art_present=b.poster_or_key_art_present,
                still_image_count=b.still_image_count,
                press_kit_url=b.press_kit_url,
                rights_offer_type=b.rights_offer_type.value,
                territories=b.territories,
                term_months=b.term_months,
            ),
            legal=LegalDocument(
                chain_of_title_status=g.chain_of_title_status.value,
                music_clearance_status=g.music_clearance_status.value,
                releases_status=g.releases_status.value,
                errors_and_omissions_status=g.errors_and_omissions_status.value,
                known_clearance_risks=sorted(g.known_clearance_risks),
            ),
            technical=TechnicalDocument(
                master_available=t.master_available.value,
                master_format=t.master_format,
                master_resolution=t.master_resolution,
                master_frame_rate=t.master_frame_rate,
                audio_deliverables=sorted(t.audio_deliverables),
                captions_available=t.captions_available.value,
                subtitle_languages=list(t.subtitle_languages),
                textless_elements_available=t.textless_elements_available.value,
                music_and_effects_track_available=t.music_and_effects_track_available.value,
                quality_control_done=t.quality_control_done.value,
                known_technical_issues=list(t.known_technical_issues),
            ),
        )


def _format_pydantic_errors(exc: ValidationError) -> list[str]:
    messages: list[str] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "(document)"
        messages.append(f"{location}: {err['msg']}")
    return messages


def parse_intake(data: Mapping[str, Any] | None) -> ProjectIntake:
    """Validate a decoded intake document and return the snapshot.

    Parameters
    ----------
    data:
        Mapping decoded from JSON or YAML.  ``None`` (an empty YAML file) is
        treated as an empty document.

    Raises
    ------
    IntakeValidationError
        If the document is structurally invalid or any field fails validation.
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise IntakeValidationError(
            [f"(document): expected a mapping, got {type(data).__name__}"]
        )
    try:
        document = IntakeDocument.model_validate(dict(data))
    except ValidationError as exc:
        raise IntakeValidationError(_format_pydantic_errors(exc)) from exc
    return document.to_builder().build()


def load_intake(path: str | Path) -> ProjectIntake:
    """Read an intake document from a ``.yaml``/``.yml`` or ``.json`` file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    IntakeValidationError
        If the file cannot be decoded or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Intake file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise IntakeValidationError([f"(document): could not decode {path.name}: {exc}"]) from exc
    intake = parse_intake(data)
    logger.debug("Loaded intake %r from %s", intake.project_title, path)
    return intake


def dump_intake(intake: ProjectIntake) -> dict[str, Any]:
    """Return the JSON-compatible document form of *intake* (camelCase keys)."""
    return IntakeDocument.from_intake(intake).model_dump(by_alias=True, mode="json")


def save_intake(intake: ProjectIntake, path: str | Path) -> Path:
    """Write *intake* to *path* as YAML (or JSON for a ``.json`` suffix).

    Returns
    -------
    Path
        The path written to.
    """
    path = Path(path)
    data = dump_intake(intake)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    logger.info("Saved intake %r to %s", intake.project_title, path)
    return path


__all__ = [
    "IntakeDocument",
    "dump_intake",
    "load_intake",
    "parse_intake",
    "save_intake",
]
