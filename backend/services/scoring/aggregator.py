"""Reduce item outcomes to section sub-scores and the overall total.

Sub-score: passed weight / section weight scaled onto 1-10, capped when a
required item fails, rounded to one decimal. The total is the importance-
weighted mean of the already-rounded sub-scores, so the breakdown and the
total shown to the user always agree.
"""

import numpy as np

from models.schemas.checklist import ItemOutcome, SectionResult
from services.scoring.checklist_registry import SectionDefinition

MIN_SCORE = 1.0
MAX_SCORE = 10.0


def _clamp(value: float) -> float:
    return min(MAX_SCORE, max(MIN_SCORE, value))


def section_sub_score(
    items: list[ItemOutcome],
    total_weight: float,
    cap: float,
) -> tuple[float, bool]:
    """Return (sub_score, capped) for one section's outcomes."""
    if not items or total_weight <= 0:
        return MIN_SCORE, False
    passed_weight = sum(i.weight for i in items if i.passed)
    raw = _clamp(MAX_SCORE * passed_weight / total_weight)
    capped = False
    if any(i.required and not i.passed for i in items) and raw > cap:
        raw = cap
        capped = True
    return round(raw, 1), capped


def build_section_result(
    definition: SectionDefinition,
    items: list[ItemOutcome],
    present: bool,
    cap: float,
) -> SectionResult:
    included = present or definition.mandatory
    sub_score, capped = section_sub_score(items, definition.total_weight, cap) if included else (0.0, False)
    return SectionResult(
        section=definition.section,
        display_name=definition.display_name,
        present=present,
        included=included,
        sub_score=sub_score,
        capped=capped,
        items=items,
    )


def total_score(results: list[SectionResult], importance: dict[str, float]) -> float:
    """Importance-weighted mean of included sub-scores, clamped to [1, 10]."""
    included = [r for r in results if r.included]
    if not included:
        return MIN_SCORE
    scores = np.array([r.sub_score for r in included], dtype=float)
    weights = np.array([importance[r.section] for r in included], dtype=float)
    mean = float(np.average(scores, weights=weights))
    return round(_clamp(mean), 1)


def breakdown(results: list[SectionResult]) -> dict[str, float]:
    return {r.section: r.sub_score for r in results if r.included}


def completion_percentage(results: list[SectionResult]) -> int:
    outcomes = [i for r in results if r.included for i in r.items]
    if not outcomes:
        return 0
    return round(100 * sum(1 for i in outcomes if i.passed) / len(outcomes))


def all_required_passed(results: list[SectionResult]) -> bool:
    return all(i.passed for r in results if r.included for i in r.items if i.required)
