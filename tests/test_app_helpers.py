from __future__ import annotations

from app.helpers import CHECK_COLUMNS, checks_to_frame, form_payload, summary_metrics
from src.eligibility.evaluator import evaluate
from src.intake.validation import candidate_from_mapping


def _form_values(**overrides: object) -> dict[str, object]:
    values: dict[str, object] = {
        "income": 2000.0,
        "internal_score": 9.0,
        "enem_score": 9.0,
        "high_school_average": 9.0,
        "has_disability": False,
        "is_public_school_student": True,
        "family_size": 1,
        "family_recipients": 0,
        "scholarship_type": "PARTIAL",
        "course": "",
    }
    values.update(overrides)
    return values


def test_form_payload_builds_valid_candidate() -> None:
    candidate = candidate_from_mapping(form_payload(_form_values()))

    assert candidate.desired_course is None
    assert candidate.per_capita_income == 2000.0


def test_checks_to_frame_marks_failed_rules() -> None:
    candidate = candidate_from_mapping(form_payload(_form_values()))
    frame = checks_to_frame(evaluate(candidate))

    assert frame.columns.tolist() == CHECK_COLUMNS
    assert frame["rule"].tolist() == ["INCOME_ABOVE_MAX", "SCORE_BELOW_MIN", "FAMILY_RECIPIENTS_ABOVE_MAX"]
    assert frame["status"].tolist() == ["FAIL", "PASS", "PASS"]
    assert frame.loc[0, "detail"] == "per-capita income exceeds R$1600.00"
    assert frame.loc[1, "detail"] == ""


def test_summary_metrics_formats_scores_and_income() -> None:
    candidate = candidate_from_mapping(form_payload(_form_values(income=1500.0, family_size=3)))

    assert summary_metrics(candidate) == [
        ("Final score", "9.00"),
        ("Per-capita income", "R$ 500.00"),
        ("Family size", "3"),
    ]
