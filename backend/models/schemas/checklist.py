"""Checklist items and the verdicts produced for them."""

from pydantic import BaseModel, Field

from models.schemas.resume_content import SectionType


class ChecklistItem(BaseModel):
    """One scoring criterion within a section.

    ``verifier_ref`` names a rule-based verifier in the verifier library,
    or the content quality validator (``CONTENT_QUALITY_REF``).
    """
    id: str
    section: SectionType
    label: str
    description: str
    weight: float = Field(gt=0)
    required: bool = False
    verifier_ref: str

    model_config = {"frozen": True}


class VerificationResult(BaseModel):
    """Uniform output of every verifier and of the content quality validator."""
    passed: bool
    reason: str
    evidence: str | None = None
    # False when the verdict is a fail-open default rather than a real check
    assessed: bool = True

    model_config = {"frozen": True}


class ContentValidationResult(BaseModel):
    """Raw content quality classification before normalization."""
    is_valid: bool
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str | None = None
    assessed: bool = True

    def to_verification(self) -> VerificationResult:
        return VerificationResult(
            passed=self.is_valid,
            reason=self.reason or ("Content reads as authentic" if self.is_valid else "Content looks like placeholder text"),
            evidence=f"confidence={self.confidence:.2f}" if self.assessed else None,
            assessed=self.assessed,
        )


class ItemOutcome(BaseModel):
    """A verdict bound to the checklist item it was produced for."""
    item_id: str
    section: SectionType
    label: str
    description: str
    weight: float
    required: bool
    passed: bool
    reason: str
    evidence: str | None = None
    assessed: bool = True

    @classmethod
    def from_verdict(cls, item: ChecklistItem, verdict: VerificationResult) -> "ItemOutcome":
        return cls(
            item_id=item.id,
            section=item.section,
            label=item.label,
            description=item.description,
            weight=item.weight,
            required=item.required,
            passed=verdict.passed,
            reason=verdict.reason,
            evidence=verdict.evidence,
            assessed=verdict.assessed,
        )


class SectionResult(BaseModel):
    """Per-section reduction of item outcomes."""
    section: SectionType
    display_name: str
    present: bool
    included: bool  # counted in the weighted total
    sub_score: float
    capped: bool = False
    items: list[ItemOutcome] = []
