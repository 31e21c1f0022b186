"""Feedback generator: verdict reasons rendered as user-facing feedback.

Strengths are always returned. Improvements, detailed feedback and the
item checklist are premium detail; free callers get coarse section-level
hints instead. Entitlement gating happens here and nowhere else.
"""

import logging

from models.requests import Entitlement
from models.responses import DetailedFeedback, Priority
from models.schemas.checklist import ItemOutcome, SectionResult

logger = logging.getLogger(__name__)

# Optional items at or above this weight count as high-weight for strengths
HIGH_WEIGHT = 25.0
OPTIMIZED_THRESHOLD = 8.0
HINT_THRESHOLD = 8.0


def _dedupe(reasons: list[str]) -> list[str]:
    return list(dict.fromkeys(r for r in reasons if r))


def _failure_order(outcomes: list[ItemOutcome]) -> list[ItemOutcome]:
    # Required first, then heavier items; sorted() keeps registry order for ties
    failed = [o for o in outcomes if not o.passed]
    return sorted(failed, key=lambda o: (not o.required, -o.weight))


def build_strengths(results: list[SectionResult]) -> list[str]:
    """Reasons of passed required-or-high-weight items, in registry order.

    Fail-open verdicts only count when nothing else qualifies; they then
    contribute the item description, never the fail-open reason.
    """
    passed = [o for r in results if r.included for o in r.items if o.passed]
    reasons = [o.reason for o in passed if o.assessed and (o.required or o.weight >= HIGH_WEIGHT)]
    if not reasons:
        reasons = [o.description for o in passed if o.required]
    return _dedupe(reasons)


def build_improvements(results: list[SectionResult]) -> list[str]:
    outcomes = [o for r in results if r.included for o in r.items]
    return _dedupe([o.reason for o in _failure_order(outcomes)])


def section_priority(items: list[ItemOutcome]) -> Priority:
    """high: any required failure. medium: two or more optional failures."""
    failed = [o for o in items if not o.passed]
    if any(o.required for o in failed):
        return "high"
    if len(failed) >= 2:
        return "medium"
    return "low"


def build_detailed_feedback(results: list[SectionResult]) -> list[DetailedFeedback]:
    return [
        DetailedFeedback(
            section=r.section,
            current_score=r.sub_score,
            recommendations=_dedupe([o.reason for o in _failure_order(r.items)]),
            priority=section_priority(r.items),
        )
        for r in results
        if r.included
    ]


def build_improvement_hints(results: list[SectionResult]) -> list[str]:
    """Vague nudges for free callers: which sections to look at, not why."""
    weak = [r for r in results if r.included and r.sub_score < HINT_THRESHOLD]
    weak.sort(key=lambda r: r.sub_score)
    return [f"{r.display_name} has room for improvement" for r in weak]


def render_feedback(
    results: list[SectionResult],
    total: float,
    entitlement: Entitlement,
    all_required_passed: bool,
) -> dict:
    """Return the feedback fields of ``ResumeScore`` for this entitlement."""
    premium = entitlement == "premium"
    feedback = {
        "strengths": build_strengths(results),
        "improvements": build_improvements(results) if premium else [],
        "detailed_feedback": build_detailed_feedback(results) if premium else [],
        "checklist": {r.section: r.items for r in results if r.included} if premium else {},
        "improvement_hints": [] if premium else build_improvement_hints(results),
        "is_optimized": premium and all_required_passed and total >= OPTIMIZED_THRESHOLD,
    }
    logger.debug(
        "Feedback rendered for %s caller: %d strengths, %d improvements",
        entitlement, len(feedback["strengths"]), len(feedback["improvements"]),
    )
    return feedback
