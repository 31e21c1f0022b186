"""Wire shapes exchanged with the text-generation collaborator."""

from pydantic import BaseModel


class TokenUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
        )


class ClassificationResponse(BaseModel):
    """Raw reply of ``TextClassifier.classify``."""
    content: str = ""
    usage: TokenUsage = TokenUsage()
