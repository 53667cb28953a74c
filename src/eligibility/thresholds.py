from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from src.eligibility.scoring import ScoreWeights

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TierThresholds:
    """Limits for one scholarship tier.

    `min_final_score_without_priority` replaces `min_final_score` when the
    candidate is neither a public-school student nor has a disability. When
    it is None the tier treats being in that group as a requirement instead.
    """

    max_per_capita_income: float
    min_final_score: float
    max_family_recipients: int
    min_final_score_without_priority: float | None = None

    def __post_init__(self) -> None:
        income = float(self.max_per_capita_income)
        if not math.isfinite(income) or income < 0.0:
            raise ValueError("Threshold 'max_per_capita_income' must be a finite non-negative number.")
        for field_name in ("min_final_score", "min_final_score_without_priority"):
            value = getattr(self, field_name)
            if value is None:
                continue
            value = float(value)
            if not math.isfinite(value) or value < 0.0 or value > 10.0:
                raise ValueError(f"Threshold '{field_name}' must be between 0.0 and 10.0.")
        if int(self.max_family_recipients) < 0:
            raise ValueError("Threshold 'max_family_recipients' must be non-negative.")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None, baseline: TierThresholds) -> TierThresholds:
        values = payload or {}
        raised = values.get(
            "min_final_score_without_priority", baseline.min_final_score_without_priority
        )
        return cls(
            max_per_capita_income=float(values.get("max_per_capita_income", baseline.max_per_capita_income)),
            min_final_score=float(values.get("min_final_score", baseline.min_final_score)),
            max_family_recipients=int(values.get("max_family_recipients", baseline.max_family_recipients)),
            min_final_score_without_priority=None if raised is None else float(raised),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_per_capita_income": self.max_per_capita_income,
            "min_final_score": self.min_final_score,
            "max_family_recipients": self.max_family_recipients,
            "min_final_score_without_priority": self.min_final_score_without_priority,
        }


@dataclass(frozen=True, slots=True)
class EligibilityThresholds:
    full: TierThresholds
    partial: TierThresholds

    def __post_init__(self) -> None:
        if self.full.min_final_score_without_priority is not None:
            raise ValueError("FULL tier requires the priority group; it has no raised score minimum.")
        if self.partial.min_final_score_without_priority is None:
            raise ValueError("PARTIAL tier needs 'min_final_score_without_priority'.")

    @classmethod
    def baseline(cls) -> EligibilityThresholds:
        return cls(
            full=TierThresholds(
                max_per_capita_income=800.0,
                min_final_score=8.0,
                max_family_recipients=0,
            ),
            partial=TierThresholds(
                max_per_capita_income=1600.0,
                min_final_score=6.0,
                max_family_recipients=1,
                min_final_score_without_priority=7.5,
            ),
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> EligibilityThresholds:
        values = payload or {}
        baseline = cls.baseline()
        return cls(
            full=TierThresholds.from_mapping(values.get("full"), baseline.full),
            partial=TierThresholds.from_mapping(values.get("partial"), baseline.partial),
        )

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            "full": self.full.to_dict(),
            "partial": self.partial.to_dict(),
        }


def load_config(path: Path) -> tuple[EligibilityThresholds, ScoreWeights]:
    """Read threshold and score weight overrides from one JSON file.

    Keys left out of the file keep their baseline values.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at '{path}'.")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Config file '{path}' must hold a JSON object.")

    thresholds = EligibilityThresholds.from_mapping(payload.get("thresholds"))
    weights = ScoreWeights.from_mapping(payload.get("score_weights"))
    logger.info("Loaded eligibility config from %s", path)
    return thresholds, weights
