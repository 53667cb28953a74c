from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.eligibility.scoring import ScoreWeights, final_score, per_capita_income


class ScholarshipType(str, Enum):
    FULL = "full"
    PARTIAL = "partial"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(frozen=True, slots=True)
class Candidate:
    """Validated application data.

    `per_capita_income` and `final_score` are derived in `__post_init__`.
    Use `dataclasses.replace` to change a raw field; it rebuilds both.
    """

    monthly_household_income: float
    internal_selection_score: float
    enem_score: float
    high_school_average: float
    has_disability: bool
    is_public_school_student: bool
    family_size: int
    family_scholarship_recipients: int
    desired_scholarship_type: ScholarshipType
    desired_course: str | None = None
    weights: ScoreWeights = field(default_factory=ScoreWeights.baseline, repr=False)
    per_capita_income: float = field(init=False)
    final_score: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "per_capita_income",
            per_capita_income(self.monthly_household_income, self.family_size),
        )
        object.__setattr__(
            self,
            "final_score",
            final_score(
                self.internal_selection_score,
                self.enem_score,
                self.high_school_average,
                weights=self.weights,
            ),
        )

    @property
    def in_priority_group(self) -> bool:
        return self.is_public_school_student or self.has_disability
