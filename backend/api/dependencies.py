"""Shared dependencies for API routes."""

from services.classifiers.base import TextClassifier
from services.classifiers.factory import get_classifier


def get_text_classifier() -> TextClassifier | None:
    return get_classifier()
