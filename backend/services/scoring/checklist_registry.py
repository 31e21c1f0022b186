"""Versioned, declarative checklist table.

Maps each section type to its ordered checklist items. Adding or removing
an item is a change to this table only; verifiers and the aggregator stay
untouched. Bump ``CHECKLIST_VERSION`` on any change so stored scores remain
comparable only within one version.
"""

from dataclasses import dataclass, field

from models.schemas.checklist import ChecklistItem
from models.schemas.resume_content import SectionType

CHECKLIST_VERSION = "3.0.0"
SECTION_TOTAL_WEIGHT = 100.0
CONTENT_QUALITY_REF = "content_quality"


@dataclass(frozen=True)
class SectionDefinition:
    section: SectionType
    display_name: str
    importance: float  # weight in the overall mean
    mandatory: bool  # scored even when the resume has no such section
    items: tuple[ChecklistItem, ...] = field(default_factory=tuple)

    @property
    def total_weight(self) -> float:
        return SECTION_TOTAL_WEIGHT


def _items(section: SectionType, *rows: tuple) -> tuple[ChecklistItem, ...]:
    return tuple(
        ChecklistItem(
            id=item_id,
            section=section,
            label=label,
            description=description,
            weight=weight,
            required=required,
            verifier_ref=ref,
        )
        for item_id, label, description, weight, required, ref in rows
    )


SECTIONS: tuple[SectionDefinition, ...] = (
    SectionDefinition("summary", "Professional Summary", importance=20, mandatory=True, items=_items(
        "summary",
        ("summary-length", "Adequate Length", "Summary is substantial without running long", 20, True, "summary.adequate_length"),
        ("summary-no-first-person", "Professional Tone", "Avoids first-person pronouns (I, my, me)", 20, True, "summary.no_first_person"),
        ("summary-metrics", "Contains Metrics", "Includes quantifiable results (percentages, numbers, outcomes)", 20, False, "summary.has_metrics"),
        ("summary-ats-keywords", "ATS Keywords", "Contains action verbs and professional keywords", 15, False, "summary.ats_keywords"),
        ("summary-keyword-density", "Keyword Density", "Keyword density sits inside the ATS target band", 10, False, "summary.keyword_density"),
        ("summary-authentic", "Authentic Content", "Summary is genuine text, not placeholder or gibberish", 15, True, CONTENT_QUALITY_REF),
    )),
    SectionDefinition("experience", "Work Experience", importance=25, mandatory=True, items=_items(
        "experience",
        ("experience-metrics", "Quantifiable Achievements", "Roles include metrics and measurable results", 25, False, "experience.has_metrics"),
        ("experience-action-verbs", "Strong Action Verbs", "Bullets open with verbs like led, built, reduced", 20, False, "experience.action_verbs"),
        ("experience-achievements", "Achievements Listed", "Each role has achievements, not just responsibilities", 25, True, "experience.has_achievements"),
        ("experience-progression", "Career Progression", "Seniority grows or holds steady over time", 10, False, "experience.progression"),
        ("experience-authentic", "Authentic Content", "Companies and titles are real, not placeholders", 20, True, CONTENT_QUALITY_REF),
    )),
    SectionDefinition("skills", "Skills", importance=15, mandatory=True, items=_items(
        "skills",
        ("skills-organized", "Organized Categories", "Skills are grouped into technical, soft and tools", 25, False, "skills.organized"),
        ("skills-technical", "Technical Skills", "At least one technical skill is listed", 25, True, "skills.technical"),
        ("skills-soft", "Soft Skills", "At least one soft skill is listed", 15, False, "skills.soft"),
        ("skills-tools", "Tools & Technologies", "At least one tool or technology is listed", 15, False, "skills.tools"),
        ("skills-authentic", "Authentic Content", "Skills are recognizable, not placeholder values", 20, True, CONTENT_QUALITY_REF),
    )),
    SectionDefinition("education", "Education", importance=10, mandatory=True, items=_items(
        "education",
        ("education-dates", "Complete Dates", "Every entry has dates", 25, True, "education.dates"),
        ("education-institution", "Institution Listed", "Every entry names the institution", 25, True, "education.institution"),
        ("education-degree-field", "Degree & Field", "Every entry has degree and field of study", 30, True, "education.degree_field"),
        ("education-authentic", "Authentic Content", "Institutions and degrees are real credentials", 20, True, CONTENT_QUALITY_REF),
    )),
    SectionDefinition("certifications", "Certifications", importance=5, mandatory=False, items=_items(
        "certifications",
        ("certifications-issuer", "Issuer Listed", "Every certification names its issuer", 35, False, "certifications.issuer"),
        ("certifications-date", "Date Listed", "Every certification is dated", 35, False, "certifications.date"),
        ("certifications-authentic", "Authentic Content", "Certifications are real, not placeholders", 30, True, CONTENT_QUALITY_REF),
    )),
    SectionDefinition("projects", "Projects", importance=8, mandatory=False, items=_items(
        "projects",
        ("projects-descriptions", "Project Descriptions", "Each project has a meaningful description", 35, True, "projects.descriptions"),
        ("projects-technologies", "Technologies Listed", "Projects specify the technologies used", 35, False, "projects.technologies"),
        ("projects-impact", "Measurable Impact", "At least one project states its impact", 30, False, "projects.impact"),
    )),
    SectionDefinition("achievements", "Achievements", importance=7, mandatory=False, items=_items(
        "achievements",
        ("achievements-metrics", "Specific Metrics", "Every achievement carries a specific metric", 50, False, "achievements.metrics"),
        ("achievements-quantifiable", "Quantifiable Results", "Achievements are quantifiable and verifiable", 50, False, "achievements.quantifiable"),
    )),
    SectionDefinition("languages", "Languages", importance=3, mandatory=False, items=_items(
        "languages",
        ("languages-levels", "Proficiency Levels", "Every language states a recognized proficiency level", 100, True, "languages.levels"),
    )),
    SectionDefinition("contact", "Contact Info", importance=7, mandatory=True, items=_items(
        "contact",
        ("contact-email", "Professional Email", "Email address looks professional", 35, True, "contact.professional_email"),
        ("contact-phone", "Phone Number", "Phone number is provided", 25, False, "contact.phone"),
        ("contact-linkedin", "LinkedIn Profile", "LinkedIn profile URL is included", 20, False, "contact.linkedin"),
        ("contact-authentic", "Authentic Content", "Name and contact details are realistic", 20, True, CONTENT_QUALITY_REF),
    )),
    SectionDefinition("data_integrity", "Data Integrity", importance=10, mandatory=False, items=_items(
        "data_integrity",
        ("integrity-metrics-grounded", "Grounded Metrics", "Metrics appear in your original input", 40, False, "integrity.metrics_grounded"),
        ("integrity-experience-grounded", "Grounded Experience", "Roles match positions from your original input", 35, True, "integrity.experience_grounded"),
        ("integrity-education-grounded", "Grounded Education", "Education matches your original input", 25, False, "integrity.education_grounded"),
    )),
)

_BY_SECTION: dict[str, SectionDefinition] = {s.section: s for s in SECTIONS}
_BY_ITEM: dict[str, ChecklistItem] = {i.id: i for s in SECTIONS for i in s.items}


def get_section(section: str) -> SectionDefinition:
    """Return the definition for a section type."""
    if section not in _BY_SECTION:
        raise KeyError(f"Unknown section: {section}")
    return _BY_SECTION[section]


def get_items(section: str) -> tuple[ChecklistItem, ...]:
    """Ordered checklist items for a section type."""
    return get_section(section).items


def get_item(item_id: str) -> ChecklistItem:
    if item_id not in _BY_ITEM:
        raise KeyError(f"Unknown checklist item: {item_id}")
    return _BY_ITEM[item_id]


def all_sections() -> tuple[SectionDefinition, ...]:
    return SECTIONS


def describe() -> list[dict]:
    """Serializable view of the registry (for clients rendering checklists)."""
    return [
        {
            "section": s.section,
            "display_name": s.display_name,
            "importance": s.importance,
            "mandatory": s.mandatory,
            "total_weight": s.total_weight,
            "items": [i.model_dump() for i in s.items],
        }
        for s in SECTIONS
    ]
