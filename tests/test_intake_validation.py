from __future__ import annotations

import pytest

from src.eligibility.candidate import ScholarshipType
from src.intake.validation import (
    CandidateInputError,
    InputErrorCode,
    candidate_from_mapping,
    parse_course,
    parse_flag,
    parse_scholarship_type,
)


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "monthly_household_income": "1000",
        "internal_selection_score": "6,5",
        "enem_score": 6.5,
        "high_school_average": 6.5,
        "has_disability": "0",
        "is_public_school_student": "1",
        "family_size": "1",
        "family_scholarship_recipients": 1,
        "desired_scholarship_type": "2",
        "desired_course": "  Engenharia de Software  ",
    }
    payload.update(overrides)
    return payload


def test_candidate_from_mapping_parses_raw_values() -> None:
    candidate = candidate_from_mapping(_payload())

    assert candidate.monthly_household_income == 1000.0
    assert candidate.internal_selection_score == 6.5
    assert candidate.has_disability is False
    assert candidate.is_public_school_student is True
    assert candidate.family_size == 1
    assert candidate.desired_scholarship_type is ScholarshipType.PARTIAL
    assert candidate.desired_course == "Engenharia de Software"
    assert candidate.per_capita_income == 1000.0


@pytest.mark.parametrize(
    ("field_name", "value", "code"),
    [
        ("monthly_household_income", "abc", InputErrorCode.INVALID_INPUT),
        ("monthly_household_income", "0", InputErrorCode.ZERO_OR_NEGATIVE),
        ("internal_selection_score", "10.5", InputErrorCode.OUT_OF_RANGE),
        ("enem_score", -1, InputErrorCode.OUT_OF_RANGE),
        ("high_school_average", "nan", InputErrorCode.INVALID_INPUT),
        ("has_disability", "2", InputErrorCode.BINARY_EXPECTED),
        ("is_public_school_student", None, InputErrorCode.BINARY_EXPECTED),
        ("family_size", "0", InputErrorCode.ZERO_OR_NEGATIVE),
        ("family_size", "2.5", InputErrorCode.INVALID_INPUT),
        ("family_scholarship_recipients", "-1", InputErrorCode.NEGATIVE_VALUE),
        ("desired_scholarship_type", "3", InputErrorCode.SCHOLARSHIP_TYPE_EXPECTED),
        ("desired_course", "x" * 100, InputErrorCode.COURSE_NAME_INPUT),
    ],
)
def test_candidate_from_mapping_reports_field_and_code(field_name: str, value: object, code: InputErrorCode) -> None:
    with pytest.raises(CandidateInputError) as excinfo:
        candidate_from_mapping(_payload(**{field_name: value}))

    assert excinfo.value.field_name == field_name
    assert excinfo.value.code is code
    assert isinstance(excinfo.value, ValueError)


def test_missing_field_is_invalid_input() -> None:
    payload = _payload()
    del payload["enem_score"]

    with pytest.raises(CandidateInputError, match="enem_score"):
        candidate_from_mapping(payload)


@pytest.mark.parametrize(("value", "expected"), [(True, True), (0, False), ("sim", True), ("No", False)])
def test_parse_flag_accepts_common_spellings(value: object, expected: bool) -> None:
    assert parse_flag(value, "has_disability") is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1", ScholarshipType.FULL),
        ("FULL", ScholarshipType.FULL),
        ("integral", ScholarshipType.FULL),
        (2, ScholarshipType.PARTIAL),
        ("Parcial", ScholarshipType.PARTIAL),
    ],
)
def test_parse_scholarship_type_accepts_codes_and_names(value: object, expected: ScholarshipType) -> None:
    assert parse_scholarship_type(value) is expected


def test_parse_course_treats_blank_as_missing() -> None:
    assert parse_course("   ") is None
    assert parse_course(None) is None
