from __future__ import annotations

from typing import Any

import pandas as pd

from src.eligibility.candidate import Candidate
from src.eligibility.evaluator import EligibilityDecision
from src.report.render import format_brl

CHECK_COLUMNS = ["rule", "status", "detail"]


def checks_to_frame(decision: EligibilityDecision) -> pd.DataFrame:
    rows = [
        {
            "rule": check.code,
            "status": "PASS" if check.passed else "FAIL",
            "detail": "" if check.passed else check.message,
        }
        for check in decision.checks
    ]
    return pd.DataFrame(rows, columns=CHECK_COLUMNS)


def summary_metrics(candidate: Candidate) -> list[tuple[str, str]]:
    return [
        ("Final score", f"{candidate.final_score:.2f}"),
        ("Per-capita income", format_brl(candidate.per_capita_income)),
        ("Family size", str(candidate.family_size)),
    ]


def form_payload(values: dict[str, Any]) -> dict[str, Any]:
    """Map form widget state to intake field names."""
    return {
        "monthly_household_income": values.get("income"),
        "internal_selection_score": values.get("internal_score"),
        "enem_score": values.get("enem_score"),
        "high_school_average": values.get("high_school_average"),
        "has_disability": bool(values.get("has_disability")),
        "is_public_school_student": bool(values.get("is_public_school_student")),
        "family_size": values.get("family_size"),
        "family_scholarship_recipients": values.get("family_recipients"),
        "desired_scholarship_type": values.get("scholarship_type"),
        "desired_course": values.get("course") or None,
    }
