#!/usr/bin/env python3
"""Example: Intake files and custom hard stops

Writes an intake template to YAML, loads it back, and assesses it with an
extra hard-stop rule registered alongside the defaults.

Usage:
    python examples/02_intake_files.py

Requirements:
    pip install distribution-readiness
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from distribution_readiness import (
    HardStopRegistry,
    HardStopRule,
    IntakeBuilder,
    InsuranceStatus,
    ReadinessAssessor,
    load_intake,
    save_intake,
)


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        # Step 1: Save an intake document to disk
        intake = (
            IntakeBuilder()
            .with_project_title("Salt Line")
            .with_runtime_minutes(22)
            .with_budget_tier("high")
            .add_target_platform("netflix")
            .with_chain_of_title("complete")
            .build()
        )
        path = save_intake(intake, Path(tmp) / "salt_line.yaml")
        print(f"Saved intake to {path.name}:")
        print(path.read_text(encoding="utf-8"))

        # Step 2: Load it back
        loaded = load_intake(path)
        print(f"Round trip equal: {loaded == intake}")

    # Step 3: Register an extra rule and assess
    registry = HardStopRegistry()
    registry.register(
        HardStopRule(
            name="eo_missing_for_svod",
            message="E&O insurance missing. Subscription services require it before delivery.",
            predicate=lambda i: (
                "netflix" in i.target_platforms
                and i.legal.errors_and_omissions_status is InsuranceStatus.MISSING
            ),
        )
    )
    print(f"\nRegistry: {registry!r}")
    report = ReadinessAssessor(hard_stop_rules=registry).assess(loaded)
    print(f"Final score: {report.overall_score_final} ({report.band.label})")
    for stop in report.hard_stops:
        print(f"  deal-killer: {stop}")


if __name__ == "__main__":
    main()
