"""Tests for the immutable intake model and IntakeBuilder validation."""
from __future__ import annotations

import dataclasses
import logging

import pytest

from distribution_readiness.intake.builder import (
    LOGLINE_MAX_CHARS,
    SHORT_SYNOPSIS_MAX_CHARS,
    IntakeBuilder,
    IntakeValidationError,
)
from distribution_readiness.intake.enums import (
    Availability,
    BudgetTier,
    CaptionStatus,
    ChainOfTitleStatus,
    ClearanceStatus,
    CreditRole,
    InsuranceStatus,
    PlatformIntent,
    PlatformRoute,
    RightsOfferType,
)
from distribution_readiness.intake.model import (
    BusinessPackage,
    Credit,
    LegalStatus,
    PlatformNotes,
    ProjectIntake,
    TechnicalDeliverables,
)


# ---------------------------------------------------------------------------
# Defaults and immutability
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_empty_builder_matches_dataclass_defaults(self) -> None:
        assert IntakeBuilder().build() == ProjectIntake()

    def test_absent_fields_use_unknown_or_missing_variants(self) -> None:
        intake = ProjectIntake()
        assert intake.business.rights_offer_type is RightsOfferType.UNKNOWN
        assert intake.legal.chain_of_title_status is ChainOfTitleStatus.MISSING
        assert intake.legal.music_clearance_status is ClearanceStatus.UNKNOWN
        assert intake.legal.releases_status is ClearanceStatus.UNKNOWN
        assert intake.legal.errors_and_omissions_status is InsuranceStatus.MISSING
        assert intake.technical.master_available is Availability.UNKNOWN
        assert intake.technical.captions_available is CaptionStatus.NO
        assert intake.budget_tier is BudgetTier.MEDIUM
        assert intake.runtime_minutes == 0
        assert intake.target_platforms == ()

    @pytest.mark.parametrize("blank", [None, ""])
    def test_blank_values_mean_absent(self, blank: str | None) -> None:
        intake = (
            IntakeBuilder()
            .with_chain_of_title(blank)
            .with_music_clearance(blank)
            .with_captions(blank)
            .with_master(blank)
            .with_rights_offer(blank)
            .with_runtime_minutes(blank)
            .build()
        )
        assert intake == ProjectIntake()

    def test_intake_is_frozen(self) -> None:
        intake = IntakeBuilder().build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            intake.runtime_minutes = 10  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            intake.legal.chain_of_title_status = ChainOfTitleStatus.COMPLETE  # type: ignore[misc]

    def test_platform_notes_are_read_only(self) -> None:
        intake = IntakeBuilder().add_target_platform("tubi").with_platform_notes("tubi").build()
        with pytest.raises(TypeError):
            intake.platform_notes["hulu"] = intake.platform_notes["tubi"]  # type: ignore[index]

    def test_builder_class_method(self) -> None:
        assert isinstance(ProjectIntake.builder(), IntakeBuilder)


# ---------------------------------------------------------------------------
# Direct construction
# ---------------------------------------------------------------------------


class TestDirectConstruction:
    def test_raw_strings_become_enum_members(self) -> None:
        intake = ProjectIntake(
            legal=LegalStatus(chain_of_title_status="missing", releases_status="partial"),  # type: ignore[arg-type]
            technical=TechnicalDeliverables(captions_available="yes", quality_control_done="no"),  # type: ignore[arg-type]
            business=BusinessPackage(rights_offer_type="exclusive"),  # type: ignore[arg-type]
            budget_tier="small",  # type: ignore[arg-type]
        )
        assert intake.legal.chain_of_title_status is ChainOfTitleStatus.MISSING
        assert intake.legal.releases_status is ClearanceStatus.PARTIAL
        assert intake.technical.captions_available is CaptionStatus.YES
        assert intake.technical.quality_control_done is Availability.NO
        assert intake.business.rights_offer_type is RightsOfferType.EXCLUSIVE
        assert intake.budget_tier is BudgetTier.SMALL

    def test_raw_strings_equal_builder_snapshot(self) -> None:
        direct = ProjectIntake(legal=LegalStatus(chain_of_title_status="complete"))  # type: ignore[arg-type]
        assert direct == IntakeBuilder().with_chain_of_title("complete").build()

    def test_leaf_records_are_coerced(self) -> None:
        credit = Credit(person="Ana", role="director")  # type: ignore[arg-type]
        notes = PlatformNotes(intent="exploring", route="aggregator")  # type: ignore[arg-type]
        assert credit.role is CreditRole.DIRECTOR
        assert notes.intent is PlatformIntent.EXPLORING
        assert notes.route is PlatformRoute.AGGREGATOR

    def test_out_of_domain_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="maybe"):
            TechnicalDeliverables(quality_control_done="maybe")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


class TestCoercion:
    def test_strings_become_enum_members(self) -> None:
        intake = (
            IntakeBuilder()
            .with_chain_of_title("Complete")
            .with_captions(" in_progress ")
            .with_errors_and_omissions("IN_PLACE")
            .build()
        )
        assert intake.legal.chain_of_title_status is ChainOfTitleStatus.COMPLETE
        assert intake.technical.captions_available is CaptionStatus.IN_PROGRESS
        assert intake.legal.errors_and_omissions_status is InsuranceStatus.IN_PLACE

    def test_text_is_stripped(self) -> None:
        intake = IntakeBuilder().with_logline("  A pilot.  ").with_master_format("   ").build()
        assert intake.business.logline == "A pilot."
        assert intake.technical.master_format == ""

    def test_blank_collection_entries_are_dropped(self) -> None:
        intake = IntakeBuilder().add_genre("Drama", " ", "").add_clearance_risk("").build()
        assert intake.business.genres == frozenset({"Drama"})
        assert intake.legal.known_clearance_risks == frozenset()

    def test_runtime_from_numeric_string(self) -> None:
        assert IntakeBuilder().with_runtime_minutes("94").build().runtime_minutes == 94

    def test_credit_role(self) -> None:
        intake = IntakeBuilder().add_credit("Ana", "Director", notable_credits="x").build()
        assert intake.business.credits[0].role is CreditRole.DIRECTOR

    def test_platform_ids_are_normalised_and_deduplicated(self) -> None:
        intake = (
            IntakeBuilder()
            .add_target_platforms(["Tubi", "pluto", "tubi", "netflix"])
            .build()
        )
        assert intake.target_platforms == ("tubi", "pluto", "netflix")

    def test_remove_target_platform(self) -> None:
        intake = (
            IntakeBuilder()
            .add_target_platforms(["tubi", "pluto"])
            .with_platform_notes("tubi", "exploring")
            .remove_target_platform("tubi")
            .build()
        )
        assert intake.target_platforms == ("pluto",)
        assert "tubi" not in intake.platform_notes

    def test_platform_notes(self) -> None:
        intake = (
            IntakeBuilder()
            .add_target_platform("roku")
            .with_platform_notes("roku", "actively_pitching", "aggregator", " via FAST partner ")
            .build()
        )
        notes = intake.platform_notes["roku"]
        assert notes.intent is PlatformIntent.ACTIVELY_PITCHING
        assert notes.route is PlatformRoute.AGGREGATOR
        assert notes.notes == "via FAST partner"


# ---------------------------------------------------------------------------
# Budget tier fallback
# ---------------------------------------------------------------------------


class TestBudgetTier:
    @pytest.mark.parametrize(("raw", "tier"), [("small", BudgetTier.SMALL), ("HIGH", BudgetTier.HIGH)])
    def test_known(self, raw: str, tier: BudgetTier) -> None:
        assert IntakeBuilder().with_budget_tier(raw).build().budget_tier is tier

    def test_unrecognised_tier_falls_back_to_medium(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            intake = IntakeBuilder().with_budget_tier("blockbuster").build()
        assert intake.budget_tier is BudgetTier.MEDIUM
        assert "blockbuster" in caplog.text


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class TestValidation:
    def test_negative_runtime_rejected(self) -> None:
        with pytest.raises(IntakeValidationError, match="runtime_minutes"):
            IntakeBuilder().with_runtime_minutes(-1).build()

    @pytest.mark.parametrize("runtime", ["ninety", 12.5, True])
    def test_non_integer_runtime_rejected(self, runtime: object) -> None:
        with pytest.raises(IntakeValidationError, match="runtime_minutes"):
            IntakeBuilder().with_runtime_minutes(runtime).build()  # type: ignore[arg-type]

    def test_logline_limit(self) -> None:
        IntakeBuilder().with_logline("x" * LOGLINE_MAX_CHARS).build()
        with pytest.raises(IntakeValidationError, match="logline"):
            IntakeBuilder().with_logline("x" * (LOGLINE_MAX_CHARS + 1)).build()

    def test_short_synopsis_limit(self) -> None:
        IntakeBuilder().with_short_synopsis("x" * SHORT_SYNOPSIS_MAX_CHARS).build()
        with pytest.raises(IntakeValidationError, match="short_synopsis"):
            IntakeBuilder().with_short_synopsis("x" * (SHORT_SYNOPSIS_MAX_CHARS + 1)).build()

    def test_invalid_enum_value(self) -> None:
        with pytest.raises(IntakeValidationError) as exc_info:
            IntakeBuilder().with_chain_of_title("mostly").build()
        assert "chain_of_title_status" in exc_info.value.errors[0]
        assert "complete" in exc_info.value.errors[0]

    def test_unknown_is_not_valid_for_captions(self) -> None:
        with pytest.raises(IntakeValidationError, match="captions_available"):
            IntakeBuilder().with_captions("unknown").build()

    def test_unknown_platform(self) -> None:
        with pytest.raises(IntakeValidationError, match="myspace"):
            IntakeBuilder().add_target_platform("myspace").build()

    def test_all_errors_reported_together(self) -> None:
        with pytest.raises(IntakeValidationError) as exc_info:
            (
                IntakeBuilder()
                .with_runtime_minutes(-5)
                .with_captions("maybe")
                .with_master("perhaps")
                .add_credit("Ana", "gaffer")
                .add_target_platform("myspace")
                .build()
            )
        assert len(exc_info.value.errors) == 5

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            IntakeBuilder().with_runtime_minutes(-1).build()


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------


class TestSnapshots:
    def test_later_edits_do_not_affect_earlier_snapshot(self) -> None:
        builder = IntakeBuilder().with_chain_of_title("partial").add_genre("Drama")
        first = builder.build()
        builder.with_chain_of_title("complete").add_genre("Horror")
        second = builder.build()
        assert first.legal.chain_of_title_status is ChainOfTitleStatus.PARTIAL
        assert first.business.genres == frozenset({"Drama"})
        assert second.legal.chain_of_title_status is ChainOfTitleStatus.COMPLETE
        assert second.business.genres == frozenset({"Drama", "Horror"})

    def test_from_intake_round_trip(self, full_intake: ProjectIntake) -> None:
        assert IntakeBuilder.from_intake(full_intake).build() == full_intake

    def test_from_intake_edits_produce_new_snapshot(self, full_intake: ProjectIntake) -> None:
        edited = IntakeBuilder.from_intake(full_intake).with_captions("no").build()
        assert edited.technical.captions_available is CaptionStatus.NO
        assert full_intake.technical.captions_available is CaptionStatus.YES
