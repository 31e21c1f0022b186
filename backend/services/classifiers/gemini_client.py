"""Google Gemini backend for content classification."""

from google import genai
from google.genai import types

from models.schemas.classification import ClassificationResponse, TokenUsage
from services.classifiers.base import TextClassifier

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiClassifier(TextClassifier):
    provider = "gemini"

    def __init__(self, api_key: str, model: str = "") -> None:
        self.model = model or DEFAULT_MODEL
        self._client = genai.Client(api_key=api_key)

    async def classify(self, prompt: str) -> ClassificationResponse:
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.1,
                max_output_tokens=256,
                response_mime_type="application/json",
            ),
        )
        meta = response.usage_metadata
        usage = TokenUsage(
            prompt_tokens=(meta.prompt_token_count or 0) if meta else 0,
            completion_tokens=(meta.candidates_token_count or 0) if meta else 0,
        )
        return ClassificationResponse(content=(response.text or "").strip(), usage=usage)
