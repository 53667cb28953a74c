from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.eligibility.evaluator import evaluate
from src.eligibility.scoring import ScoreWeights
from src.eligibility.thresholds import EligibilityThresholds, load_config
from src.intake.validation import CandidateInputError, candidate_from_mapping
from src.report.render import decision_to_dict, render_report

logger = logging.getLogger("evaluate_candidate")

EXIT_APPROVED = 0
EXIT_DENIED = 1
EXIT_INPUT_ERROR = 2

FIELD_FLAGS = {
    "monthly_household_income": "--income",
    "internal_selection_score": "--internal-score",
    "enem_score": "--enem-score",
    "high_school_average": "--high-school-average",
    "has_disability": "--disability",
    "is_public_school_student": "--public-school",
    "family_size": "--family-size",
    "family_scholarship_recipients": "--family-recipients",
    "desired_scholarship_type": "--scholarship-type",
    "desired_course": "--course",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate one scholarship application.")
    parser.add_argument(
        "--candidate",
        type=Path,
        default=None,
        help="JSON file with candidate fields. Individual flags override its values.",
    )
    parser.add_argument("--income", dest="monthly_household_income", help="Monthly household income (R$).")
    parser.add_argument("--internal-score", dest="internal_selection_score", help="Internal selection score (0 to 10).")
    parser.add_argument("--enem-score", dest="enem_score", help="ENEM score (0 to 10).")
    parser.add_argument("--high-school-average", dest="high_school_average", help="High school average (0 to 10).")
    parser.add_argument("--disability", dest="has_disability", help="Has a disability (1 yes, 0 no).")
    parser.add_argument("--public-school", dest="is_public_school_student", help="Public-school student (1 yes, 0 no).")
    parser.add_argument("--family-size", dest="family_size", help="Number of people in the household.")
    parser.add_argument(
        "--family-recipients",
        dest="family_scholarship_recipients",
        help="Family members already holding a scholarship.",
    )
    parser.add_argument(
        "--scholarship-type",
        dest="desired_scholarship_type",
        help="Desired scholarship (1 or FULL, 2 or PARTIAL).",
    )
    parser.add_argument("--course", dest="desired_course", help="Desired course (optional).")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON file with thresholds and score_weights overrides.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the decision as JSON instead of the text report.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _load_candidate_payload(candidate_path: Path | None) -> dict[str, Any]:
    if candidate_path is None:
        return {}
    if not candidate_path.exists():
        raise FileNotFoundError(f"Candidate file not found at '{candidate_path}'.")
    payload = json.loads(candidate_path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Candidate file '{candidate_path}' must hold a JSON object.")
    return payload


def build_payload(args: argparse.Namespace) -> dict[str, Any]:
    payload = _load_candidate_payload(args.candidate)
    for field_name in FIELD_FLAGS:
        value = getattr(args, field_name)
        if value is not None:
            payload[field_name] = value
    return payload


def run(args: argparse.Namespace) -> tuple[int, str]:
    thresholds: EligibilityThresholds | None = None
    weights: ScoreWeights | None = None
    try:
        if args.config is not None:
            thresholds, weights = load_config(args.config)
        payload = build_payload(args)
    except ValueError as exc:
        logger.error("Rejected configuration or candidate file: %s", exc)
        return EXIT_INPUT_ERROR, f"Invalid input: {exc}\n"

    try:
        candidate = candidate_from_mapping(payload, weights=weights)
    except CandidateInputError as exc:
        flag = FIELD_FLAGS.get(exc.field_name, exc.field_name)
        logger.error("Rejected input for %s: %s", flag, exc.code.description)
        return EXIT_INPUT_ERROR, f"Invalid input for {flag}: {exc.code.description}\n"

    decision = evaluate(candidate, thresholds)
    if args.json:
        output = json.dumps(decision_to_dict(candidate, decision), indent=2, sort_keys=True) + "\n"
    else:
        output = render_report(candidate, decision)
    return (EXIT_APPROVED if decision.approved else EXIT_DENIED), output


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    exit_code, output = run(args)
    stream = sys.stderr if exit_code == EXIT_INPUT_ERROR else sys.stdout
    stream.write(output)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
