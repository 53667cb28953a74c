"""Scholarship eligibility scoring and rule evaluation."""

from src.eligibility.candidate import Candidate, ScholarshipType
from src.eligibility.evaluator import EligibilityDecision, RuleCheck, evaluate
from src.eligibility.scoring import ScoreWeights, final_score, per_capita_income
from src.eligibility.thresholds import EligibilityThresholds, TierThresholds, load_config

__all__ = [
    "Candidate",
    "EligibilityDecision",
    "EligibilityThresholds",
    "RuleCheck",
    "ScholarshipType",
    "ScoreWeights",
    "TierThresholds",
    "evaluate",
    "final_score",
    "load_config",
    "per_capita_income",
]
