"""OpenAI-compatible chat completions backend (OpenAI, Groq)."""

from openai import AsyncOpenAI

from models.schemas.classification import ClassificationResponse, TokenUsage
from services.classifiers.base import TextClassifier

SYSTEM_PROMPT = "You are a resume data validator. Classify the data and return JSON only."


class OpenAICompatibleClassifier(TextClassifier):
    def __init__(self, provider: str, api_key: str, model: str, base_url: str | None = None) -> None:
        self.provider = provider
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def classify(self, prompt: str) -> ClassificationResponse:
        response = await self._client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=0.1,
            max_tokens=256,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content if response.choices else ""
        usage = TokenUsage(
            prompt_tokens=response.usage.prompt_tokens if response.usage else 0,
            completion_tokens=response.usage.completion_tokens if response.usage else 0,
        )
        return ClassificationResponse(content=(content or "").strip(), usage=usage)
