#!/usr/bin/env python3
"""Example: Quickstart — distribution-readiness

Minimal working example: describe a project with the builder, assess it,
then fix the deal-killers and assess again.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install distribution-readiness
"""
from __future__ import annotations

import distribution_readiness
from distribution_readiness import IntakeBuilder, ReadinessReport, assess


def show(report: ReadinessReport) -> None:
    print(
        f"  pillars: business={report.business_score} "
        f"legal={report.legal_score} technical={report.technical_score}"
    )
    print(
        f"  overall: raw={report.overall_score_raw} "
        f"final={report.overall_score_final} band={report.band.label}"
    )
    for stop in report.hard_stops:
        print(f"  deal-killer: {stop}")
    for index, action in enumerate(report.recommended_actions, start=1):
        print(f"  {index}. {action}")


def main() -> None:
    print(f"distribution-readiness version: {distribution_readiness.__version__}")

    # Step 1: Describe the project
    builder = (
        IntakeBuilder()
        .with_project_title("Night Harbor")
        .with_runtime_minutes(94)
        .with_budget_tier("small")
        .add_target_platforms(["tubi", "pluto"])
        .with_logline("A harbor pilot uncovers a smuggling ring run by her own family.")
        .with_short_synopsis("A tense maritime thriller set over one winter night.")
        .add_genre("Thriller", "Drama")
        .with_trailer(True)
        .with_poster_or_key_art(True)
        .with_rights_offer("non_exclusive")
        .with_music_clearance("complete")
        .with_master("yes", master_format="ProRes 422 HQ")
        .add_audio_deliverable("Stereo 2.0")
    )

    # Step 2: Assess it as-is
    print("\nFirst pass:")
    show(assess(builder.build()))

    # Step 3: Clear the deal-killers and assess again
    builder.with_chain_of_title("complete").with_captions("yes")
    report = assess(builder.build())
    print("\nAfter chain of title and captions:")
    show(report)

    # Step 4: Per-platform checklists
    for platform_id, items in report.platform_checklists.items():
        rows = ", ".join(f"{item.label}={item.state.value}" for item in items)
        print(f"\n{platform_id}: {rows}")


if __name__ == "__main__":
    main()
