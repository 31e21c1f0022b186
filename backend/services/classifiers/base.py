"""Abstract text classifier consumed by the content quality validator."""

from abc import ABC, abstractmethod

from models.schemas.classification import ClassificationResponse


class TextClassifier(ABC):
    """One implementation per text-generation backend.

    Subclasses must implement:
        - classify(prompt): send a classification prompt, return raw content + token usage
    """

    provider: str = ""
    model: str = ""

    @abstractmethod
    async def classify(self, prompt: str) -> ClassificationResponse:
        """Run one classification call. May raise; callers fail open."""
