"""Shared test configuration, fixtures and a deterministic fake classifier."""

import asyncio
import json

import pytest

from models.schemas.classification import ClassificationResponse, TokenUsage
from models.schemas.original_input import (
    InputEducation,
    InputExperience,
    OriginalInputData,
)
from models.schemas.resume_content import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    GeneratedResumeContent,
    SkillsSection,
)
from services.classifiers.base import TextClassifier

STRONG_SUMMARY = (
    "Backend engineer with 8 years of experience building payment APIs for fintech companies "
    "in Europe and Asia. Delivered a billing service used by 2M customers and improved checkout "
    "performance by 40% across three regions. Known for clear documentation, careful code review "
    "and mentoring new hires through their first quarter on the team."
)


class FakeClassifier(TextClassifier):
    """Scripted ``TextClassifier``: fixed reply, optional error or delay."""

    provider = "fake"
    model = "fake-1"

    def __init__(
        self,
        label: str = "valid",
        confidence: float = 0.95,
        reason: str = "Looks like real resume content",
        content: str | None = None,
        raises: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.content = content if content is not None else json.dumps(
            {"label": label, "confidence": confidence, "reason": reason}
        )
        self.raises = raises
        self.delay = delay
        self.prompts: list[str] = []

    async def classify(self, prompt: str) -> ClassificationResponse:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.raises is not None:
            raise self.raises
        return ClassificationResponse(
            content=self.content,
            usage=TokenUsage(prompt_tokens=100, completion_tokens=20),
        )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring scenarios over full resumes"
    )


@pytest.fixture
def make_classifier():
    """Factory for ``FakeClassifier`` instances."""
    return FakeClassifier


@pytest.fixture
def valid_classifier():
    return FakeClassifier()


@pytest.fixture
def strong_resume() -> GeneratedResumeContent:
    """A resume that satisfies every checklist item of the mandatory sections."""
    return GeneratedResumeContent(
        professional_summary=STRONG_SUMMARY,
        experience=[
            ExperienceEntry(
                title="Senior Software Engineer",
                company="Stripe",
                start_date="2020-01",
                is_current=True,
                achievements=["Reduced payment failures by 25% by rebuilding the retry pipeline"],
                responsibilities=["Designed the ledger reconciliation service"],
            ),
            ExperienceEntry(
                title="Software Engineer",
                company="Shopify",
                start_date="2016-06",
                end_date="2019-12",
                achievements=["Built an inventory sync used by 3,000 stores"],
                responsibilities=["Maintained the order export API"],
            ),
        ],
        education=[
            EducationEntry(
                institution="University of Toronto",
                degree="BSc",
                field="Computer Science",
                start_date="2012",
                end_date="2016",
            ),
        ],
        skills=SkillsSection(
            technical=["Python", "Go", "PostgreSQL"],
            soft=["Mentoring", "Communication"],
            tools=["Docker", "Kubernetes"],
        ),
        contact_info=ContactInfo(
            full_name="Alex Morgan",
            email="alex.morgan@example.com",
            phone="+1 416 555 0199",
            location="Toronto, Canada",
            linkedin="https://www.linkedin.com/in/alexmorgan",
        ),
    )


@pytest.fixture
def original_input() -> OriginalInputData:
    """Wizard input the strong resume was generated from."""
    return OriginalInputData(
        first_name="Alex",
        last_name="Morgan",
        email="alex.morgan@example.com",
        profession="Backend Engineer",
        target_level="senior",
        summary="8 years building payment APIs; improved checkout performance by 40% for 2M customers",
        skills_raw=["Python", "Go", "PostgreSQL", "Docker", "Kubernetes"],
        experience=[
            InputExperience(
                title="Senior Software Engineer",
                company="Stripe",
                start_date="2020-01",
                is_current=True,
                achievements=["Reduced payment failures by 25%"],
            ),
            InputExperience(
                title="Software Engineer",
                company="Shopify",
                start_date="2016-06",
                end_date="2019-12",
                achievements=["Built an inventory sync used by 3,000 stores"],
            ),
        ],
        education=[
            InputEducation(institution="University of Toronto", degree="BSc", field="Computer Science"),
        ],
    )
