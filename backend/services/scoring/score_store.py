"""External score store interface and the key it must be addressed by.

Scores are never memoized in process memory: the runtime instance is not
guaranteed to survive between calls. Callers that want reuse plug in a
store backed by an external system (database, cache service).
"""

import hashlib
import json
from abc import ABC, abstractmethod

from models.requests import Entitlement
from models.responses import ResumeScore
from models.schemas.original_input import OriginalInputData
from models.schemas.resume_content import GeneratedResumeContent
from services.scoring.checklist_registry import CHECKLIST_VERSION


def resume_fingerprint(
    resume: GeneratedResumeContent,
    original_input: OriginalInputData | None = None,
    checklist_version: str = CHECKLIST_VERSION,
) -> str:
    """SHA-256 over canonical JSON of the inputs plus the checklist version."""
    payload = {
        "checklist_version": checklist_version,
        "resume": resume.model_dump(mode="json"),
        "original_input": (original_input or OriginalInputData()).model_dump(mode="json"),
    }
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class ScoreStore(ABC):
    """Persistent lookup of previously computed scores.

    Keys are ``resume_fingerprint`` values; entitlement is part of the key
    because free and premium scores carry different detail.
    """

    @abstractmethod
    async def get(self, fingerprint: str, entitlement: Entitlement) -> ResumeScore | None:
        ...

    @abstractmethod
    async def put(self, fingerprint: str, entitlement: Entitlement, score: ResumeScore) -> None:
        ...
