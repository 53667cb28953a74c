from __future__ import annotations

from typing import Any

from src.eligibility.candidate import Candidate
from src.eligibility.evaluator import EligibilityDecision

REPORT_TITLE = "===== SCHOLARSHIP APPLICATION RESULT ====="
REPORT_RULE = "=" * len(REPORT_TITLE)


def format_brl(amount: float) -> str:
    return f"R$ {amount:,.2f}"


def render_report(candidate: Candidate, decision: EligibilityDecision) -> str:
    lines = [
        REPORT_TITLE,
        f"Desired course: {candidate.desired_course or 'Not provided'}",
        f"Final score: {candidate.final_score:.2f}",
        f"Per-capita income: {format_brl(candidate.per_capita_income)}",
    ]
    if decision.approved:
        lines.append(f"Result: {decision.scholarship_type.label} scholarship GRANTED!")
    else:
        lines.append("Result: application DENIED!")
        lines.append("Reason(s):")
        lines.extend(f"- {reason}" for reason in decision.reasons)
    lines.append(REPORT_RULE)
    return "\n".join(lines) + "\n"


def decision_to_dict(candidate: Candidate, decision: EligibilityDecision) -> dict[str, Any]:
    return {
        "scholarship_type": decision.scholarship_type.value,
        "approved": decision.approved,
        "desired_course": candidate.desired_course,
        "final_score": round(candidate.final_score, 4),
        "per_capita_income": round(candidate.per_capita_income, 2),
        "reasons": list(decision.reasons),
        "reason_codes": list(decision.reason_codes),
        "checks": [
            {"code": check.code, "passed": check.passed, "message": check.message}
            for check in decision.checks
        ],
    }
