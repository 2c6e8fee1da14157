"""Tests for intake documents (YAML/JSON loading and saving)."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from distribution_readiness.intake.builder import IntakeValidationError
from distribution_readiness.intake.enums import (
    BudgetTier,
    CaptionStatus,
    ChainOfTitleStatus,
    CreditRole,
)
from distribution_readiness.intake.loader import (
    IntakeDocument,
    dump_intake,
    load_intake,
    parse_intake,
    save_intake,
)
from distribution_readiness.intake.model import ProjectIntake

_YAML_INTAKE = """\
projectTitle: Night Harbor
runtimeMinutes: 94
budgetTier: small
targetPlatforms: [tubi, pluto]
platformNotes:
  tubi:
    intent: exploring
    route: aggregator
business:
  logline: A harbor pilot uncovers a smuggling ring.
  genres: [Thriller]
  comparableTitles:
    - {title: Wind River, year: 2017, rationale: Harsh landscape procedural}
  credits:
    - {person: Ana Ruiz, role: director, notableCredits: Salt Line}
  trailerPresent: true
  rightsOfferType: non_exclusive
legal:
  chainOfTitleStatus: complete
  knownClearanceRisks: [Archive clip]
technical:
  masterAvailable: yes
  masterFormat: ProRes 422 HQ
  masterFrameRate: 23.976
  captionsAvailable: no
  qualityControlDone: unknown
"""


class TestParseIntake:
    def test_empty_document_is_default_intake(self) -> None:
        assert parse_intake({}) == ProjectIntake()
        assert parse_intake(None) == ProjectIntake()

    def test_camel_case_keys(self) -> None:
        intake = parse_intake(
            {"runtimeMinutes": 50, "legal": {"chainOfTitleStatus": "partial"}}
        )
        assert intake.runtime_minutes == 50
        assert intake.legal.chain_of_title_status is ChainOfTitleStatus.PARTIAL

    def test_snake_case_keys(self) -> None:
        intake = parse_intake(
            {"runtime_minutes": 50, "legal": {"chain_of_title_status": "partial"}}
        )
        assert intake.runtime_minutes == 50
        assert intake.legal.chain_of_title_status is ChainOfTitleStatus.PARTIAL

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(IntakeValidationError, match="confirmAccuracy"):
            parse_intake({"confirmAccuracy": True})

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(IntakeValidationError, match="genres"):
            parse_intake({"business": {"genres": "Thriller"}})

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(IntakeValidationError, match="mapping"):
            parse_intake(["not", "a", "mapping"])  # type: ignore[arg-type]

    def test_field_validation_runs(self) -> None:
        with pytest.raises(IntakeValidationError, match="runtime_minutes"):
            parse_intake({"runtimeMinutes": -3})

    def test_boolean_answers_become_yes_no(self) -> None:
        intake = parse_intake({"technical": {"captionsAvailable": True, "masterAvailable": False}})
        assert intake.technical.captions_available is CaptionStatus.YES
        assert intake.technical.master_available.value == "no"

    def test_numeric_free_text_becomes_string(self) -> None:
        intake = parse_intake(
            {
                "projectTitle": 1917,
                "business": {
                    "genres": [300],
                    "comparableTitles": [{"title": 1917, "year": 2019}],
                    "credits": [{"person": 2046, "role": "cast"}],
                },
                "legal": {"knownClearanceRisks": [42]},
            }
        )
        assert intake.project_title == "1917"
        assert intake.business.genres == frozenset({"300"})
        assert intake.business.comparable_titles[0].title == "1917"
        assert intake.business.credits[0].person == "2046"
        assert intake.legal.known_clearance_risks == frozenset({"42"})


class TestLoadIntake:
    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text(_YAML_INTAKE, encoding="utf-8")
        intake = load_intake(path)
        assert intake.project_title == "Night Harbor"
        assert intake.budget_tier is BudgetTier.SMALL
        assert intake.target_platforms == ("tubi", "pluto")
        assert intake.business.comparable_titles[0].year == "2017"
        assert intake.business.credits[0].role is CreditRole.DIRECTOR
        assert intake.technical.captions_available is CaptionStatus.NO
        assert intake.technical.master_frame_rate == "23.976"
        assert intake.legal.known_clearance_risks == frozenset({"Archive clip"})

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.json"
        path.write_text(json.dumps({"technical": {"captionsAvailable": "yes"}}), encoding="utf-8")
        assert load_intake(path).technical.captions_available is CaptionStatus.YES

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_intake(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("business: [unclosed", encoding="utf-8")
        with pytest.raises(IntakeValidationError, match="could not decode"):
            load_intake(path)

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(IntakeValidationError):
            load_intake(path)

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_intake(path) == ProjectIntake()


class TestSaveIntake:
    def test_yaml_round_trip(self, tmp_path: Path, full_intake: ProjectIntake) -> None:
        path = save_intake(full_intake, tmp_path / "nested" / "intake.yaml")
        assert path.exists()
        assert load_intake(path) == full_intake

    def test_json_output(self, tmp_path: Path, full_intake: ProjectIntake) -> None:
        path = save_intake(full_intake, tmp_path / "intake.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["runtimeMinutes"] == 94
        assert data["legal"]["chainOfTitleStatus"] == "complete"

    def test_yes_no_survive_yaml(self, tmp_path: Path) -> None:
        path = save_intake(ProjectIntake(), tmp_path / "defaults.yaml")
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert raw["technical"]["captionsAvailable"] == "no"

    def test_dump_uses_camel_case(self, full_intake: ProjectIntake) -> None:
        data = dump_intake(full_intake)
        assert "shortSynopsis" in data["business"]
        assert "short_synopsis" not in data["business"]

    def test_document_from_intake(self, full_intake: ProjectIntake) -> None:
        document = IntakeDocument.from_intake(full_intake)
        assert document.to_builder().build() == full_intake
