from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.helpers import checks_to_frame, form_payload, summary_metrics
from src.eligibility.evaluator import evaluate
from src.eligibility.scoring import ScoreWeights
from src.eligibility.thresholds import EligibilityThresholds, load_config
from src.intake.validation import CandidateInputError, candidate_from_mapping
from src.report.render import render_report

CONFIG_PATH = ROOT_DIR / "data" / "eligibility_config.json"


def _load_active_config() -> tuple[EligibilityThresholds | None, ScoreWeights | None]:
    if not CONFIG_PATH.exists():
        st.caption("Using baseline thresholds and score weights.")
        return None, None
    try:
        thresholds, weights = load_config(CONFIG_PATH)
    except ValueError as exc:
        st.warning(f"Could not load {CONFIG_PATH.name}: {exc}. Using baseline values.")
        return None, None
    st.caption(f"Loaded thresholds and score weights from {CONFIG_PATH.name}.")
    return thresholds, weights


def main() -> None:
    st.set_page_config(page_title="Scholarship Eligibility", layout="centered")
    st.title("Scholarship Eligibility")
    st.caption("Per-capita income + weighted score -> tier rules -> decision")

    thresholds, weights = _load_active_config()

    with st.form("candidate_form"):
        values = {
            "income": st.number_input("Monthly household income (R$)", min_value=0.01, value=1000.0, step=100.0),
            "internal_score": st.number_input("Internal selection score", min_value=0.0, max_value=10.0, value=0.0, step=0.1),
            "enem_score": st.number_input("ENEM score", min_value=0.0, max_value=10.0, value=0.0, step=0.1),
            "high_school_average": st.number_input("High school average", min_value=0.0, max_value=10.0, value=0.0, step=0.1),
            "has_disability": st.checkbox("Has a disability"),
            "is_public_school_student": st.checkbox("Public-school student"),
            "family_size": st.number_input("People in the household", min_value=1, value=1, step=1),
            "family_recipients": st.number_input("Family members with a scholarship", min_value=0, value=0, step=1),
            "scholarship_type": st.radio("Desired scholarship", ["FULL", "PARTIAL"], horizontal=True),
            "course": st.text_input("Desired course (optional)", max_chars=99),
        }
        submitted = st.form_submit_button("Evaluate")

    if not submitted:
        return

    try:
        candidate = candidate_from_mapping(form_payload(values), weights=weights)
    except CandidateInputError as exc:
        st.error(f"Invalid {exc.field_name}: {exc.code.description}")
        return

    decision = evaluate(candidate, thresholds)

    metric_cols = st.columns(3)
    for col, (label, value) in zip(metric_cols, summary_metrics(candidate)):
        col.metric(label, value)

    if decision.approved:
        st.success(f"{decision.scholarship_type.label} scholarship granted.")
    else:
        st.error(f"Application denied ({len(decision.reasons)} reason(s)).")

    st.subheader("Rule Checklist")
    st.dataframe(checks_to_frame(decision), use_container_width=True, hide_index=True)

    st.subheader("Report")
    st.code(render_report(candidate, decision), language="text")


if __name__ == "__main__":
    main()
