from typing import Literal

from pydantic import BaseModel

from models.schemas.original_input import OriginalInputData
from models.schemas.resume_content import GeneratedResumeContent

Entitlement = Literal["free", "premium"]


class ScoreRequest(BaseModel):
    resume: GeneratedResumeContent
    original_input: OriginalInputData = OriginalInputData()
    entitlement: Entitlement = "free"


class EvaluateItemRequest(BaseModel):
    resume: GeneratedResumeContent
    original_input: OriginalInputData = OriginalInputData()
