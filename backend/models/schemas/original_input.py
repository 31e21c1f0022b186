"""User-supplied career data the resume was generated from."""

from pydantic import BaseModel


class InputExperience(BaseModel):
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    achievements: list[str] = []
    responsibilities: list[str] = []


class InputEducation(BaseModel):
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""


class InputCertification(BaseModel):
    name: str = ""
    issuer: str = ""
    date: str = ""


class InputProject(BaseModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = []


class InputLanguage(BaseModel):
    name: str = ""
    level: str = ""


class InputAchievement(BaseModel):
    title: str = ""
    description: str = ""
    year: str = ""


class OriginalInputData(BaseModel):
    """Structured wizard input. Used to cross-check generated facts."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    country: str = ""
    language: str = "en"
    profession: str = ""
    target_level: str = ""  # entry | mid | senior | executive
    summary: str = ""
    skills_raw: list[str] = []
    experience: list[InputExperience] = []
    education: list[InputEducation] = []
    certifications: list[InputCertification] = []
    projects: list[InputProject] = []
    languages: list[InputLanguage] = []
    achievements: list[InputAchievement] = []
    job_description: str = ""

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        """True when there is nothing to cross-check generated content against."""
        return not (
            self.summary.strip()
            or self.skills_raw
            or self.experience
            or self.education
            or self.certifications
            or self.projects
            or self.achievements
        )

    def full_text(self) -> str:
        """All free text in the input, flattened for fact lookups."""
        parts: list[str] = [self.summary, self.job_description, " ".join(self.skills_raw)]
        for exp in self.experience:
            parts.extend([exp.title, exp.company, exp.start_date, exp.end_date])
            parts.extend(exp.achievements + exp.responsibilities)
        for edu in self.education:
            parts.extend([edu.institution, edu.degree, edu.field, edu.start_date, edu.end_date, edu.gpa])
        for cert in self.certifications:
            parts.extend([cert.name, cert.issuer, cert.date])
        for proj in self.projects:
            parts.extend([proj.name, proj.description, " ".join(proj.technologies)])
        for ach in self.achievements:
            parts.extend([ach.title, ach.description, ach.year])
        return "\n".join(p for p in parts if p)
