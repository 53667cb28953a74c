from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping

from src.eligibility.candidate import Candidate, ScholarshipType
from src.eligibility.scoring import ScoreWeights

MAX_COURSE_NAME_LENGTH = 99

_TRUE_TOKENS = {"1", "true", "yes", "y", "sim", "s"}
_FALSE_TOKENS = {"0", "false", "no", "n", "nao", "não"}
_SCHOLARSHIP_TYPE_TOKENS = {
    "1": ScholarshipType.FULL,
    "full": ScholarshipType.FULL,
    "integral": ScholarshipType.FULL,
    "2": ScholarshipType.PARTIAL,
    "partial": ScholarshipType.PARTIAL,
    "parcial": ScholarshipType.PARTIAL,
}


class InputErrorCode(Enum):
    INVALID_INPUT = "Value is not a valid number."
    ZERO_OR_NEGATIVE = "Value must be greater than 0."
    OUT_OF_RANGE = "Value must be between 0 and 10."
    BINARY_EXPECTED = "Value must be 0 (no) or 1 (yes)."
    SCHOLARSHIP_TYPE_EXPECTED = "Value must be 1 (FULL) or 2 (PARTIAL)."
    COURSE_NAME_INPUT = "Course name could not be read."
    NEGATIVE_VALUE = "Value cannot be negative."

    @property
    def description(self) -> str:
        return self.value


class CandidateInputError(ValueError):
    def __init__(self, field_name: str, code: InputErrorCode, value: Any = None) -> None:
        self.field_name = field_name
        self.code = code
        self.value = value
        super().__init__(f"Invalid '{field_name}' ({value!r}): {code.description}")


def _to_float(field_name: str, value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise CandidateInputError(field_name, InputErrorCode.INVALID_INPUT, value)
    try:
        numeric = float(str(value).strip().replace(",", ".")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise CandidateInputError(field_name, InputErrorCode.INVALID_INPUT, value) from None
    if not math.isfinite(numeric):
        raise CandidateInputError(field_name, InputErrorCode.INVALID_INPUT, value)
    return numeric


def _to_int(field_name: str, value: Any) -> int:
    numeric = _to_float(field_name, value)
    if not numeric.is_integer():
        raise CandidateInputError(field_name, InputErrorCode.INVALID_INPUT, value)
    return int(numeric)


def parse_income(value: Any, field_name: str = "monthly_household_income") -> float:
    income = _to_float(field_name, value)
    if income <= 0:
        raise CandidateInputError(field_name, InputErrorCode.ZERO_OR_NEGATIVE, value)
    return income


def parse_score(value: Any, field_name: str) -> float:
    score = _to_float(field_name, value)
    if score < 0 or score > 10:
        raise CandidateInputError(field_name, InputErrorCode.OUT_OF_RANGE, value)
    return score


def parse_flag(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    raise CandidateInputError(field_name, InputErrorCode.BINARY_EXPECTED, value)


def parse_family_size(value: Any, field_name: str = "family_size") -> int:
    size = _to_int(field_name, value)
    if size <= 0:
        raise CandidateInputError(field_name, InputErrorCode.ZERO_OR_NEGATIVE, value)
    return size


def parse_family_recipients(value: Any, field_name: str = "family_scholarship_recipients") -> int:
    recipients = _to_int(field_name, value)
    if recipients < 0:
        raise CandidateInputError(field_name, InputErrorCode.NEGATIVE_VALUE, value)
    return recipients


def parse_scholarship_type(value: Any, field_name: str = "desired_scholarship_type") -> ScholarshipType:
    if isinstance(value, ScholarshipType):
        return value
    if isinstance(value, bool) or value is None:
        raise CandidateInputError(field_name, InputErrorCode.SCHOLARSHIP_TYPE_EXPECTED, value)
    token = str(value).strip().lower()
    if token not in _SCHOLARSHIP_TYPE_TOKENS:
        raise CandidateInputError(field_name, InputErrorCode.SCHOLARSHIP_TYPE_EXPECTED, value)
    return _SCHOLARSHIP_TYPE_TOKENS[token]


def parse_course(value: Any, field_name: str = "desired_course") -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or len(value.strip()) > MAX_COURSE_NAME_LENGTH:
        raise CandidateInputError(field_name, InputErrorCode.COURSE_NAME_INPUT, value)
    return value.strip() or None


def candidate_from_mapping(
    payload: Mapping[str, Any],
    *,
    weights: ScoreWeights | None = None,
) -> Candidate:
    """Validate raw field values and build a `Candidate`.

    Fields are checked in the order an applicant fills them in, so the first
    bad field is the one reported.
    """
    return Candidate(
        monthly_household_income=parse_income(payload.get("monthly_household_income")),
        internal_selection_score=parse_score(
            payload.get("internal_selection_score"), "internal_selection_score"
        ),
        enem_score=parse_score(payload.get("enem_score"), "enem_score"),
        high_school_average=parse_score(payload.get("high_school_average"), "high_school_average"),
        has_disability=parse_flag(payload.get("has_disability"), "has_disability"),
        is_public_school_student=parse_flag(
            payload.get("is_public_school_student"), "is_public_school_student"
        ),
        family_size=parse_family_size(payload.get("family_size")),
        family_scholarship_recipients=parse_family_recipients(
            payload.get("family_scholarship_recipients")
        ),
        desired_scholarship_type=parse_scholarship_type(payload.get("desired_scholarship_type")),
        desired_course=parse_course(payload.get("desired_course")),
        weights=weights or ScoreWeights.baseline(),
    )
