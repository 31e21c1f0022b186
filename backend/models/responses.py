from typing import Literal

from pydantic import BaseModel

from models.schemas.checklist import ItemOutcome
from models.schemas.classification import TokenUsage

Priority = Literal["high", "medium", "low"]


class DetailedFeedback(BaseModel):
    section: str
    current_score: float
    recommendations: list[str] = []
    priority: Priority = "low"


class ScoreProvenance(BaseModel):
    checklist_version: str
    engine: str = "deterministic-checklist"
    required_item_cap: float = 5.0
    classifier_provider: str = "none"
    classifier_model: str = ""
    content_quality_degraded: bool = False
    token_usage: TokenUsage = TokenUsage()


class ResumeScore(BaseModel):
    total_score: float = 1.0  # 1-10
    max_possible_score: float = 10.0
    completion_percentage: int = 0
    is_optimized: bool = False
    breakdown: dict[str, float] = {}
    strengths: list[str] = []
    # Premium only
    improvements: list[str] = []
    detailed_feedback: list[DetailedFeedback] = []
    checklist: dict[str, list[ItemOutcome]] = {}
    # Free only
    improvement_hints: list[str] = []
    generated_at: str = ""
    provenance: ScoreProvenance


class ScoreResponse(BaseModel):
    score: ResumeScore | None = None
    message: str = ""


class ChecklistDefinitionsResponse(BaseModel):
    checklist_version: str
    sections: list[dict] = []
