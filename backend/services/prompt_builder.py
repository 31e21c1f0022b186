"""Prompt templates for content quality classification."""

from services.input_sanitizer import SECURITY_PREAMBLE

CONTENT_LABELS = ("valid", "placeholder", "gibberish")

SECTION_GUIDANCE: dict[str, str] = {
    "summary": "a professional summary paragraph",
    "experience": "work experience entries (titles, companies, bullet points)",
    "skills": "a list of skills",
    "education": "education entries (institutions, degrees, fields of study)",
    "certifications": "professional certifications and their issuers",
    "contact": "a person's name and contact details",
}


def build_content_quality_prompt(
    section_text: str,
    section: str,
    profession: str = "",
    language: str = "en",
) -> str:
    """Classification-only prompt: is this section real content?

    ``section_text`` must already be sanitized.
    """
    kind = SECTION_GUIDANCE.get(section, f"the {section} section of a resume")
    context_line = f"The candidate's stated profession is: {profession}\n" if profession else ""

    return f"""You are a resume data validator. Your only job is classification; do not rewrite or generate content.

{SECURITY_PREAMBLE}

The data below is {kind}, written in language code "{language}".
{context_line}
Classify it as exactly one of:
- "valid": real, plausible resume content (it may be short or imperfect)
- "placeholder": template filler such as "Lorem ipsum", "Company Name", "XYZ Corp", "Your Name", "test", "N/A"
- "gibberish": random characters, keyboard mashing, or text with no meaning

<section_text>
{section_text}
</section_text>

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "label": "<valid | placeholder | gibberish>",
  "confidence": <number between 0 and 1, how sure you are of the label>,
  "reason": "<one short sentence a candidate could act on>"
}}"""
