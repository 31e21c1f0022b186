"""Scoring engine: wires registry, verifiers, validator, aggregator and feedback.

Flow:
    resume + original_input
      ├─ registry.all_sections()          → included sections (present or mandatory)
      ├─ rule verifiers (per item)        → VerificationResult, defects isolated per item
      ├─ content quality validator        → VerificationResult, concurrent, fail-open
      │                   ↓
      ├─ aggregator                       → SectionResult, total, breakdown
      │                   ↓
      └─ feedback (entitlement-gated)     → ResumeScore
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from config import settings
from models.requests import Entitlement
from models.responses import ResumeScore, ScoreProvenance
from models.schemas.checklist import ChecklistItem, ItemOutcome, VerificationResult
from models.schemas.classification import TokenUsage
from models.schemas.original_input import OriginalInputData
from models.schemas.resume_content import GeneratedResumeContent, SectionType
from services.classifiers.base import TextClassifier
from services.scoring import aggregator, checklist_registry, feedback
from services.scoring.checklist_registry import CONTENT_QUALITY_REF, SectionDefinition
from services.scoring.content_validator import ContentQualityValidator, render_section_text
from services.scoring.score_store import ScoreStore, resume_fingerprint
from services.scoring.verifiers import VERIFIERS

logger = logging.getLogger(__name__)


def _is_present(resume: GeneratedResumeContent, original_input: OriginalInputData, section: SectionType) -> bool:
    if section == "data_integrity":
        return not original_input.is_empty()
    return not resume.is_section_empty(section)


def _unverifiable(item: ChecklistItem) -> VerificationResult:
    return VerificationResult(passed=False, reason=f"{item.label} could not be verified")


def run_verifier(item: ChecklistItem, data: Any, context: OriginalInputData | None) -> VerificationResult:
    """Run one rule-based verifier behind a per-item exception boundary."""
    verifier = VERIFIERS.get(item.verifier_ref)
    if verifier is None:
        logger.warning("No verifier registered for %s (item %s)", item.verifier_ref, item.id)
        return _unverifiable(item)
    try:
        return verifier(data, context)
    except Exception:
        logger.exception("Verifier %s raised for item %s", item.verifier_ref, item.id)
        return _unverifiable(item)


async def _check_content(
    validator: ContentQualityValidator,
    item: ChecklistItem,
    resume: GeneratedResumeContent,
    context: OriginalInputData,
    section_empty: bool,
) -> tuple[VerificationResult, TokenUsage]:
    if section_empty:
        return VerificationResult(passed=False, reason=f"{item.label}: section is empty"), TokenUsage()
    result, usage = await validator.validate(render_section_text(resume, item.section), item.section, context)
    verdict = result.to_verification()
    if verdict.passed and verdict.assessed:
        # Stable, section-specific wording instead of the classifier's free text
        verdict = verdict.model_copy(update={"reason": item.description})
    return verdict, usage


async def _evaluate_sections(
    sections: list[SectionDefinition],
    resume: GeneratedResumeContent,
    context: OriginalInputData,
    validator: ContentQualityValidator,
) -> tuple[dict[str, list[ItemOutcome]], TokenUsage, bool]:
    """Evaluate every item of the given sections.

    Returns outcomes per section (registry order), summed token usage and
    whether any content check failed open.
    """
    verdicts: dict[str, VerificationResult] = {}
    content_items: list[ChecklistItem] = []
    content_calls = []

    for definition in sections:
        section_empty = not _is_present(resume, context, definition.section)
        data = resume.get_section(definition.section)
        for item in definition.items:
            if item.verifier_ref == CONTENT_QUALITY_REF:
                content_items.append(item)
                content_calls.append(_check_content(validator, item, resume, context, section_empty))
            else:
                verdicts[item.id] = run_verifier(item, data, context)

    usage = TokenUsage()
    degraded = False
    for item, (verdict, call_usage) in zip(content_items, await asyncio.gather(*content_calls)):
        verdicts[item.id] = verdict
        usage = usage + call_usage
        degraded = degraded or not verdict.assessed

    outcomes = {
        definition.section: [ItemOutcome.from_verdict(item, verdicts[item.id]) for item in definition.items]
        for definition in sections
    }
    return outcomes, usage, degraded


async def score_resume(
    resume: GeneratedResumeContent,
    original_input: OriginalInputData | None = None,
    entitlement: Entitlement = "free",
    classifier: TextClassifier | None = None,
) -> ResumeScore:
    """Score a generated resume against the current checklist.

    ``classifier`` backs the content quality items; None makes them fail
    open. Each call is independent and keeps no state between runs.
    """
    context = original_input or OriginalInputData()
    validator = ContentQualityValidator(classifier)
    cap = settings.required_item_cap

    definitions = checklist_registry.all_sections()
    presence = {d.section: _is_present(resume, context, d.section) for d in definitions}
    included = [d for d in definitions if presence[d.section] or d.mandatory]

    outcomes, usage, degraded = await _evaluate_sections(included, resume, context, validator)

    results = [
        aggregator.build_section_result(d, outcomes.get(d.section, []), presence[d.section], cap)
        for d in definitions
    ]
    importance = {d.section: d.importance for d in definitions}
    total = aggregator.total_score(results, importance)

    rendered = feedback.render_feedback(
        results, total, entitlement, aggregator.all_required_passed(results)
    )

    score = ResumeScore(
        total_score=total,
        completion_percentage=aggregator.completion_percentage(results),
        breakdown=aggregator.breakdown(results),
        generated_at=datetime.now(timezone.utc).isoformat(),
        provenance=ScoreProvenance(
            checklist_version=checklist_registry.CHECKLIST_VERSION,
            required_item_cap=cap,
            classifier_provider=classifier.provider if classifier else "none",
            classifier_model=classifier.model if classifier else "",
            content_quality_degraded=degraded,
            token_usage=usage,
        ),
        **rendered,
    )
    logger.info(
        "Scored resume: total=%.1f sections=%d degraded=%s tokens=%d",
        total, len(score.breakdown), degraded, usage.total_tokens,
    )
    return score


async def _cached_score(store: ScoreStore, fingerprint: str, entitlement: Entitlement) -> ResumeScore | None:
    try:
        return await store.get(fingerprint, entitlement)
    except Exception:
        logger.exception("Score store lookup failed; scoring from scratch")
        return None


async def _save_score(store: ScoreStore, fingerprint: str, entitlement: Entitlement, score: ResumeScore) -> None:
    try:
        await store.put(fingerprint, entitlement, score)
    except Exception:
        logger.exception("Score store write failed; returning the computed score anyway")


async def score_resume_safely(
    resume: GeneratedResumeContent,
    original_input: OriginalInputData | None = None,
    entitlement: Entitlement = "free",
    classifier: TextClassifier | None = None,
    store: ScoreStore | None = None,
) -> ResumeScore | None:
    """Best-effort scoring for the resume delivery path.

    Any failure is logged and yields None; the caller proceeds without a
    score. Store errors only cost the reuse, never the score. Degraded
    scores are not written to ``store`` so a later run can still flag
    placeholder content.
    """
    try:
        fingerprint = resume_fingerprint(resume, original_input) if store else ""
        if store:
            cached = await _cached_score(store, fingerprint, entitlement)
            if cached is not None:
                return cached
        score = await score_resume(resume, original_input, entitlement, classifier)
        if store and not score.provenance.content_quality_degraded:
            await _save_score(store, fingerprint, entitlement, score)
        return score
    except Exception:
        logger.exception("Resume scoring failed; continuing without a score")
        return None


async def evaluate_item(
    item_id: str,
    resume: GeneratedResumeContent,
    original_input: OriginalInputData | None = None,
    classifier: TextClassifier | None = None,
) -> ItemOutcome:
    """Re-run a single checklist item. Raises KeyError for unknown ids."""
    item = checklist_registry.get_item(item_id)
    context = original_input or OriginalInputData()
    if item.verifier_ref == CONTENT_QUALITY_REF:
        section_empty = not _is_present(resume, context, item.section)
        verdict, _ = await _check_content(ContentQualityValidator(classifier), item, resume, context, section_empty)
    else:
        verdict = run_verifier(item, resume.get_section(item.section), context)
    return ItemOutcome.from_verdict(item, verdict)
