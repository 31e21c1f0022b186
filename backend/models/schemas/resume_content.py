"""The generated (enhanced) resume under evaluation."""

from typing import Any, Literal

from pydantic import BaseModel

SectionType = Literal[
    "summary",
    "experience",
    "skills",
    "education",
    "certifications",
    "projects",
    "achievements",
    "languages",
    "contact",
    "data_integrity",
]


class ExperienceEntry(BaseModel):
    """A single work experience entry."""
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""
    achievements: list[str] = []
    responsibilities: list[str] = []
    impact: list[str] = []
    skills: list[str] = []

    def bullets(self) -> list[str]:
        """Achievement, responsibility and impact lines, in that order."""
        return [b for b in self.achievements + self.responsibilities + self.impact if b.strip()]

    def text(self) -> str:
        return " ".join([self.description, *self.bullets()]).strip()


class EducationEntry(BaseModel):
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    duration: str = ""
    gpa: str = ""
    honors: list[str] = []


class SkillsSection(BaseModel):
    technical: list[str] = []
    soft: list[str] = []
    tools: list[str] = []

    def all_skills(self) -> list[str]:
        return [s for s in self.technical + self.soft + self.tools if s.strip()]


class ProjectEntry(BaseModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = []
    duration: str = ""
    url: str = ""
    achievements: list[str] = []
    impact: str = ""


class CertificationEntry(BaseModel):
    name: str = ""
    issuer: str = ""
    date: str = ""
    credential_id: str = ""
    url: str = ""


class LanguageEntry(BaseModel):
    language: str = ""
    level: str = ""


class ContactInfo(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""


class GeneratedResumeContent(BaseModel):
    """Enhanced resume produced by the generation step.

    Immutable input to scoring: the engine never writes to it.
    """
    professional_summary: str = ""
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    skills: SkillsSection = SkillsSection()
    projects: list[ProjectEntry] = []
    certifications: list[CertificationEntry] = []
    achievements: list[str] = []
    languages: list[LanguageEntry] = []
    contact_info: ContactInfo = ContactInfo()

    model_config = {"frozen": True}

    def get_section(self, section: SectionType) -> Any:
        """Return the data a section's verifiers inspect."""
        if section == "summary":
            return self.professional_summary
        if section == "contact":
            return self.contact_info
        if section == "data_integrity":
            return self
        return getattr(self, section)

    def is_section_empty(self, section: SectionType) -> bool:
        data = self.get_section(section)
        if section == "summary":
            return not data.strip()
        if section == "skills":
            return not data.all_skills()
        if section == "contact":
            return not any(v.strip() for v in data.model_dump().values())
        if section == "achievements":
            return not any(a.strip() for a in data)
        if section == "data_integrity":
            return False
        return len(data) == 0
