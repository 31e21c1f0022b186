"""Classifier selection at the boundary.

Follows the lazy singleton pattern: the classifier for the configured
provider is created on first use and reused for the process lifetime.
It holds only an API client; no scoring results are cached here.
"""

import logging

from config import settings
from services.classifiers.base import TextClassifier

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
GROQ_DEFAULT_MODEL = "llama-3.3-70b-versatile"

_classifier: TextClassifier | None = None
_created = False


def create_classifier(provider: str) -> TextClassifier | None:
    """Factory: build a classifier by provider name with deferred imports.

    Returns None when the provider is disabled or has no credentials, in
    which case content quality checks fail open.
    """
    if provider == "none":
        return None
    if provider == "gemini":
        if not settings.gemini_api_key:
            logger.warning("No GEMINI_API_KEY set - content quality checks disabled")
            return None
        from services.classifiers.gemini_client import GeminiClassifier
        return GeminiClassifier(api_key=settings.gemini_api_key, model=settings.classifier_model)
    elif provider == "openai":
        if not settings.openai_api_key:
            logger.warning("No OPENAI_API_KEY set - content quality checks disabled")
            return None
        from services.classifiers.openai_client import OpenAICompatibleClassifier
        return OpenAICompatibleClassifier(
            provider="openai",
            api_key=settings.openai_api_key,
            model=settings.classifier_model or OPENAI_DEFAULT_MODEL,
        )
    elif provider == "groq":
        if not settings.groq_api_key:
            logger.warning("No GROQ_API_KEY set - content quality checks disabled")
            return None
        from services.classifiers.openai_client import OpenAICompatibleClassifier
        return OpenAICompatibleClassifier(
            provider="groq",
            api_key=settings.groq_api_key,
            model=settings.classifier_model or GROQ_DEFAULT_MODEL,
            base_url=GROQ_BASE_URL,
        )
    else:
        raise ValueError(f"Unknown classifier provider: {provider}")


def get_classifier() -> TextClassifier | None:
    """Get the configured classifier, creating it on first access."""
    global _classifier, _created
    if not _created:
        _classifier = create_classifier(settings.classifier_provider)
        _created = True
        if _classifier is not None:
            logger.info("Content classifier ready: %s (%s)", _classifier.provider, _classifier.model)
    return _classifier


def clear() -> None:
    """Drop the cached classifier. Useful for testing."""
    global _classifier, _created
    _classifier = None
    _created = False
