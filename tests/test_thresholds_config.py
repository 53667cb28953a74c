from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.eligibility.thresholds import EligibilityThresholds, TierThresholds, load_config


def test_baseline_thresholds_match_published_limits() -> None:
    assert EligibilityThresholds.baseline().to_dict() == {
        "full": {
            "max_per_capita_income": 800.0,
            "min_final_score": 8.0,
            "max_family_recipients": 0,
            "min_final_score_without_priority": None,
        },
        "partial": {
            "max_per_capita_income": 1600.0,
            "min_final_score": 6.0,
            "max_family_recipients": 1,
            "min_final_score_without_priority": 7.5,
        },
    }


def test_from_mapping_overrides_only_given_keys() -> None:
    thresholds = EligibilityThresholds.from_mapping({"partial": {"max_per_capita_income": 2000}})

    assert thresholds.partial.max_per_capita_income == 2000.0
    assert thresholds.partial.min_final_score_without_priority == 7.5
    assert thresholds.full == EligibilityThresholds.baseline().full


def test_tier_thresholds_reject_scores_outside_scale() -> None:
    with pytest.raises(ValueError, match="between 0.0 and 10.0"):
        TierThresholds(max_per_capita_income=800.0, min_final_score=11.0, max_family_recipients=0)


def test_tier_thresholds_reject_negative_recipient_limit() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        TierThresholds(max_per_capita_income=800.0, min_final_score=8.0, max_family_recipients=-1)


def test_partial_tier_requires_raised_minimum() -> None:
    with pytest.raises(ValueError, match="min_final_score_without_priority"):
        EligibilityThresholds.from_mapping({"partial": {"min_final_score_without_priority": None}})


def test_load_config_reads_thresholds_and_weights(tmp_path: Path) -> None:
    config_path = tmp_path / "eligibility_config.json"
    config_path.write_text(
        json.dumps(
            {
                "thresholds": {"full": {"min_final_score": 8.5}},
                "score_weights": {"internal": 0.5, "enem": 0.25, "high_school": 0.25},
            }
        ),
        encoding="utf-8",
    )

    thresholds, weights = load_config(config_path)

    assert thresholds.full.min_final_score == 8.5
    assert thresholds.partial == EligibilityThresholds.baseline().partial
    assert weights.to_dict() == {"internal": 0.5, "enem": 0.25, "high_school": 0.25}


def test_load_config_rejects_invalid_weights(tmp_path: Path) -> None:
    config_path = tmp_path / "bad_config.json"
    config_path.write_text(json.dumps({"score_weights": {"internal": 0.9}}), encoding="utf-8")

    with pytest.raises(ValueError, match="must sum to 1.0"):
        load_config(config_path)


def test_load_config_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")
