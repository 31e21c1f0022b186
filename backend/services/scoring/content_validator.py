"""Content quality validator: collaborator-backed authenticity check.

Asks the text classifier whether a section is genuine resume content or
placeholder/gibberish and normalizes the answer into the verdict shape
used by the rule-based verifiers. Any failure of the collaborator fails
open: the section is treated as valid but marked unassessed, so it can
lose the chance to be flagged down but is never scored down.
"""

import asyncio
import json
import logging

from config import settings
from models.schemas.checklist import ContentValidationResult
from models.schemas.classification import TokenUsage
from models.schemas.original_input import OriginalInputData
from models.schemas.resume_content import GeneratedResumeContent, SectionType
from services import prompt_builder
from services.classifiers.base import TextClassifier
from services.input_sanitizer import sanitize_section_text

logger = logging.getLogger(__name__)

MAX_REASON_CHARS = 200
FAIL_OPEN_REASON = "Content quality could not be checked"


def fail_open(reason: str = FAIL_OPEN_REASON) -> ContentValidationResult:
    return ContentValidationResult(is_valid=True, confidence=0.0, reason=reason, assessed=False)


def render_section_text(resume: GeneratedResumeContent, section: SectionType) -> str:
    """Flatten one section into the plain text the classifier sees."""
    if section == "summary":
        return resume.professional_summary
    if section == "experience":
        blocks = []
        for e in resume.experience:
            dates = " - ".join(d for d in (e.start_date, "Present" if e.is_current else e.end_date) if d)
            lines = [f"{e.title} at {e.company}" + (f" ({dates})" if dates else "")]
            if e.description:
                lines.append(e.description)
            lines.extend(f"- {b}" for b in e.bullets())
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
    if section == "skills":
        s = resume.skills
        return "\n".join(
            f"{name}: {', '.join(values)}"
            for name, values in (("Technical", s.technical), ("Soft", s.soft), ("Tools", s.tools))
            if values
        )
    if section == "education":
        return "\n".join(
            f"{e.degree} in {e.field}, {e.institution} {e.start_date} {e.end_date}".strip()
            for e in resume.education
        )
    if section == "certifications":
        return "\n".join(f"{c.name} - {c.issuer} {c.date}".strip() for c in resume.certifications)
    if section == "projects":
        return "\n".join(
            f"{p.name}: {p.description} ({', '.join(p.technologies)})" for p in resume.projects
        )
    if section == "achievements":
        return "\n".join(f"- {a}" for a in resume.achievements)
    if section == "languages":
        return "\n".join(f"{lang.language}: {lang.level}" for lang in resume.languages)
    if section == "contact":
        c = resume.contact_info
        return "\n".join(
            f"{label}: {value}"
            for label, value in (
                ("Name", c.full_name),
                ("Email", c.email),
                ("Phone", c.phone),
                ("Location", c.location),
                ("LinkedIn", c.linkedin),
            )
            if value
        )
    return ""


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_classification(content: str, threshold: float) -> ContentValidationResult:
    """Parse the collaborator's JSON answer.

    Malformed or ambiguous answers fail open. A well-formed answer is valid
    only when labelled "valid" with confidence at or above ``threshold``.
    """
    try:
        data = json.loads(_strip_code_fences(content))
    except json.JSONDecodeError as e:
        logger.warning("Content classifier returned non-JSON output: %s", e)
        return fail_open()

    if not isinstance(data, dict):
        logger.warning("Content classifier returned %s instead of an object", type(data).__name__)
        return fail_open()

    label = str(data.get("label", "")).strip().lower()
    if label not in prompt_builder.CONTENT_LABELS:
        logger.warning("Content classifier returned unknown label %r", label)
        return fail_open()

    try:
        confidence = float(data.get("confidence"))
    except (TypeError, ValueError):
        logger.warning("Content classifier returned no usable confidence")
        return fail_open()
    if confidence != confidence:  # NaN
        return fail_open()
    confidence = min(1.0, max(0.0, confidence))

    reason = str(data.get("reason") or "").strip()[:MAX_REASON_CHARS] or None
    is_valid = label == "valid" and confidence >= threshold
    if label == "valid" and not is_valid:
        reason = "Content could not be confirmed as genuine; make it more specific"
    elif not is_valid and reason is None:
        reason = f"Content looks like {label} text"
    return ContentValidationResult(is_valid=is_valid, confidence=confidence, reason=reason)


class ContentQualityValidator:
    """Adapter between the scoring engine and a ``TextClassifier``."""

    def __init__(
        self,
        classifier: TextClassifier | None,
        timeout: float | None = None,
        threshold: float | None = None,
    ) -> None:
        self.classifier = classifier
        self.timeout = timeout if timeout is not None else settings.classifier_timeout_seconds
        self.threshold = threshold if threshold is not None else settings.content_confidence_threshold

    async def validate(
        self,
        section_text: str,
        section: SectionType,
        context: OriginalInputData | None = None,
    ) -> tuple[ContentValidationResult, TokenUsage]:
        """Classify one section. Never raises."""
        if self.classifier is None:
            return fail_open(), TokenUsage()

        text = sanitize_section_text(section_text)
        if not text:
            return ContentValidationResult(
                is_valid=False, confidence=1.0, reason="Section has no readable content"
            ), TokenUsage()

        prompt = prompt_builder.build_content_quality_prompt(
            text,
            section,
            profession=context.profession if context else "",
            language=context.language if context else "en",
        )
        try:
            response = await asyncio.wait_for(self.classifier.classify(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Content check for %s timed out after %.1fs", section, self.timeout)
            return fail_open(), TokenUsage()
        except Exception as e:
            logger.warning("Content check for %s failed (%s): %s", section, type(e).__name__, e)
            return fail_open(), TokenUsage()

        return parse_classification(response.content, self.threshold), response.usage
