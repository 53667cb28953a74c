from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

WEIGHT_TOLERANCE = 1e-6
SCORE_PRECISION = 6


@dataclass(frozen=True, slots=True)
class ScoreWeights:
    """Weights of the internal selection, ENEM and high school scores in the final score."""

    internal: float
    enem: float
    high_school: float

    def __post_init__(self) -> None:
        for field_name in ("internal", "enem", "high_school"):
            value = float(getattr(self, field_name))
            if not math.isfinite(value):
                raise ValueError(f"Score weight '{field_name}' must be finite.")
            if value < 0.0 or value > 1.0:
                raise ValueError(f"Score weight '{field_name}' must be between 0.0 and 1.0.")

        total = self.internal + self.enem + self.high_school
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ValueError(
                "Score weights must sum to 1.0 "
                f"(received {total:.6f}, tolerance={WEIGHT_TOLERANCE})."
            )

    @classmethod
    def baseline(cls) -> ScoreWeights:
        return cls(internal=0.4, enem=0.3, high_school=0.3)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> ScoreWeights:
        values = payload or {}
        baseline = cls.baseline()
        return cls(
            internal=float(values.get("internal", baseline.internal)),
            enem=float(values.get("enem", baseline.enem)),
            high_school=float(values.get("high_school", baseline.high_school)),
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "internal": self.internal,
            "enem": self.enem,
            "high_school": self.high_school,
        }


def per_capita_income(monthly_income: float, family_size: int) -> float:
    """Household income split across family members.

    Non-positive income yields 0.0. A household of one (or a non-positive
    size) is not divided.
    """
    if monthly_income <= 0:
        return 0.0
    if family_size <= 1:
        return float(monthly_income)
    return monthly_income / family_size


def final_score(
    internal_score: float,
    enem_score: float,
    high_school_average: float,
    weights: ScoreWeights | None = None,
) -> float:
    effective = weights or ScoreWeights.baseline()
    weighted = (
        internal_score * effective.internal
        + enem_score * effective.enem
        + high_school_average * effective.high_school
    )
    # Rounded so a sum that lands on a threshold compares equal to it.
    return round(weighted, SCORE_PRECISION)
