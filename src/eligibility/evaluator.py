from __future__ import annotations

import logging
from dataclasses import dataclass

from src.eligibility.candidate import Candidate, ScholarshipType
from src.eligibility.thresholds import EligibilityThresholds, TierThresholds

logger = logging.getLogger(__name__)

INCOME_ABOVE_MAX = "INCOME_ABOVE_MAX"
SCORE_BELOW_MIN = "SCORE_BELOW_MIN"
NO_PRIORITY_GROUP = "NO_PRIORITY_GROUP"
FAMILY_RECIPIENTS_ABOVE_MAX = "FAMILY_RECIPIENTS_ABOVE_MAX"


@dataclass(frozen=True, slots=True)
class RuleCheck:
    code: str
    passed: bool
    message: str


@dataclass(frozen=True, slots=True)
class EligibilityDecision:
    scholarship_type: ScholarshipType
    checks: tuple[RuleCheck, ...]

    @property
    def failed_checks(self) -> tuple[RuleCheck, ...]:
        return tuple(check for check in self.checks if not check.passed)

    @property
    def reasons(self) -> tuple[str, ...]:
        return tuple(check.message for check in self.failed_checks)

    @property
    def reason_codes(self) -> tuple[str, ...]:
        return tuple(check.code for check in self.failed_checks)

    @property
    def approved(self) -> bool:
        return not self.failed_checks


def _income_check(candidate: Candidate, limits: TierThresholds) -> RuleCheck:
    return RuleCheck(
        code=INCOME_ABOVE_MAX,
        passed=candidate.per_capita_income <= limits.max_per_capita_income,
        message=f"per-capita income exceeds R${limits.max_per_capita_income:.2f}",
    )


def _priority_group_check(candidate: Candidate) -> RuleCheck:
    return RuleCheck(
        code=NO_PRIORITY_GROUP,
        passed=candidate.in_priority_group,
        message="neither public-school student nor has a disability",
    )


def _score_check(candidate: Candidate, limits: TierThresholds, tier: ScholarshipType) -> RuleCheck:
    raised = limits.min_final_score_without_priority
    if raised is not None and not candidate.in_priority_group:
        return RuleCheck(
            code=SCORE_BELOW_MIN,
            passed=candidate.final_score >= raised,
            message=(
                f"final score below {raised:.1f} required for {tier.label} "
                "when neither public-school student nor has a disability"
            ),
        )
    return RuleCheck(
        code=SCORE_BELOW_MIN,
        passed=candidate.final_score >= limits.min_final_score,
        message=f"final score below {limits.min_final_score:.1f}",
    )


def _family_recipients_check(candidate: Candidate, limits: TierThresholds) -> RuleCheck:
    allowed = limits.max_family_recipients
    if allowed == 0:
        message = "family already has a scholarship recipient"
    else:
        message = f"more than {allowed} existing family recipient{'s' if allowed != 1 else ''}"
    return RuleCheck(
        code=FAMILY_RECIPIENTS_ABOVE_MAX,
        passed=candidate.family_scholarship_recipients <= allowed,
        message=message,
    )


def _tier_checks(candidate: Candidate, limits: TierThresholds, tier: ScholarshipType) -> list[RuleCheck]:
    checks: list[RuleCheck] = [
        _income_check(candidate, limits),
        _score_check(candidate, limits, tier),
    ]
    # Without a raised score minimum the priority group is mandatory.
    if limits.min_final_score_without_priority is None:
        checks.append(_priority_group_check(candidate))
    checks.append(_family_recipients_check(candidate, limits))
    return checks


def evaluate(candidate: Candidate, thresholds: EligibilityThresholds | None = None) -> EligibilityDecision:
    """Apply every rule of the requested tier and collect all failures.

    Rules never short-circuit, so a denied applicant sees each deficiency.
    """
    effective = thresholds or EligibilityThresholds.baseline()
    tier = candidate.desired_scholarship_type

    if tier is ScholarshipType.FULL:
        limits = effective.full
    elif tier is ScholarshipType.PARTIAL:
        limits = effective.partial
    else:
        raise ValueError(f"Unsupported scholarship type '{tier}'. Expected FULL or PARTIAL.")

    decision = EligibilityDecision(
        scholarship_type=tier,
        checks=tuple(_tier_checks(candidate, limits, tier)),
    )
    logger.debug(
        "Evaluated %s application: approved=%s reasons=%s",
        tier.label,
        decision.approved,
        list(decision.reason_codes),
    )
    return decision
