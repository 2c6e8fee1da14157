"""Shared intake fixtures."""
from __future__ import annotations

import pytest

from distribution_readiness.intake.builder import IntakeBuilder
from distribution_readiness.intake.model import ProjectIntake


def build_full_builder() -> IntakeBuilder:
    """A builder describing a project that scores 100 on every pillar."""
    return (
        IntakeBuilder()
        .with_project_title("Night Harbor")
        .with_project_type("feature")
        .with_runtime_minutes(94)
        .with_budget_tier("medium")
        .add_target_platforms(["tubi", "netflix"])
        .with_logline("A harbor pilot uncovers a smuggling ring run by her own family.")
        .with_short_synopsis("When a storm strands a cargo ship, a pilot finds contraband.")
        .add_genre("Thriller", "Drama")
        .add_comparable_title("Hell or High Water", 2016, "Family crime in a dying town")
        .add_comparable_title("Wind River", 2017, "Procedural in a harsh landscape")
        .add_comparable_title("Blue Ruin", 2013, "Lean indie revenge thriller")
        .add_credit("Ana Ruiz", "director", notable_credits="Salt Line (SXSW 2021)")
        .add_credit("Tom Hale", "cast", character="Ray")
        .with_trailer(True)
        .with_poster_or_key_art(True)
        .with_press_kit_url("https://example.com/night-harbor/epk")
        .with_rights_offer("exclusive")
        .with_chain_of_title("complete")
        .with_music_clearance("complete")
        .with_releases("complete")
        .with_errors_and_omissions("in_place")
        .with_master("yes", master_format="ProRes 4444 XQ", resolution="3840x2160", frame_rate="23.976")
        .add_audio_deliverable("Stereo 2.0", "5.1")
        .with_captions("yes")
        .with_textless_elements("yes")
        .with_music_and_effects_track("yes")
        .with_quality_control("yes")
    )


@pytest.fixture()
def full_builder() -> IntakeBuilder:
    return build_full_builder()


@pytest.fixture()
def full_intake() -> ProjectIntake:
    return build_full_builder().build()


@pytest.fixture()
def empty_intake() -> ProjectIntake:
    return IntakeBuilder().build()
