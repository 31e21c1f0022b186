"""Pydantic contracts shared by the scoring engine stages."""

from models.schemas.checklist import (
    ChecklistItem,
    ContentValidationResult,
    ItemOutcome,
    SectionResult,
    VerificationResult,
)
from models.schemas.classification import ClassificationResponse, TokenUsage
from models.schemas.original_input import OriginalInputData
from models.schemas.resume_content import GeneratedResumeContent, SectionType

__all__ = [
    "ChecklistItem",
    "ClassificationResponse",
    "ContentValidationResult",
    "GeneratedResumeContent",
    "ItemOutcome",
    "OriginalInputData",
    "SectionResult",
    "SectionType",
    "TokenUsage",
    "VerificationResult",
]
