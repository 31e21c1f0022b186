"""Rule-based verifiers, one per checklist item.

Every verifier is a pure function ``(section, context) -> VerificationResult``:
no I/O, no randomness, no mutation. ``context`` is the original input data
and may be None. An empty section fails every verifier with a descriptive
reason; absence of data is never treated as "not applicable".
"""

import math
import re
from typing import Callable

from rapidfuzz import fuzz

from models.schemas.checklist import VerificationResult
from models.schemas.original_input import OriginalInputData
from models.schemas.resume_content import (
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    GeneratedResumeContent,
    LanguageEntry,
    ProjectEntry,
    SkillsSection,
)
from services import text_signals

Verifier = Callable[..., VerificationResult]

SUMMARY_MIN_CHARS = 150
SUMMARY_MAX_CHARS = 1000
MIN_ATS_KEYWORDS = 3
KEYWORD_DENSITY_BAND = (0.02, 0.15)
ACTION_VERB_RATIO = 0.6
PROJECT_MIN_DESCRIPTION_CHARS = 30
MIN_PHONE_DIGITS = 7
FUZZY_MATCH_THRESHOLD = 80

LANGUAGE_LEVELS = frozenset({
    "basic", "elementary", "beginner", "intermediate", "conversational",
    "upper intermediate", "advanced", "fluent", "proficient", "professional",
    "native", "bilingual", "a1", "a2", "b1", "b2", "c1", "c2",
})

# Seniority ladder for the progression heuristic, lowest first
SENIORITY_LEVELS: list[re.Pattern] = [
    re.compile(r"\b(?:intern|trainee|apprentice)\b", re.IGNORECASE),
    re.compile(r"\b(?:junior|jr\.?|associate|entry|assistant)\b", re.IGNORECASE),
    re.compile(r"\b(?:senior|sr\.?|lead|principal|staff)\b", re.IGNORECASE),
    re.compile(r"\b(?:manager|head|director|vp|vice president|chief|cto|ceo|cfo|coo|partner)\b", re.IGNORECASE),
]
_MID_LEVEL = 1.5  # untagged titles sit between junior and senior

DISPOSABLE_EMAIL_DOMAINS = frozenset({
    "mailinator.com", "10minutemail.com", "guerrillamail.com", "tempmail.com",
    "temp-mail.org", "yopmail.com", "trashmail.com", "throwawaymail.com",
    "getnada.com", "sharklasers.com", "dispostable.com", "maildrop.cc",
})
_INFORMAL_EMAIL_RE = re.compile(r"sexy|hot|cool|crazy|baby|love|cute|sweetie|princess|gamer|420|69", re.IGNORECASE)
_ROLE_EMAIL_RE = re.compile(r"^(?:admin|test|info|contact|noreply|no-reply)@", re.IGNORECASE)
_EMAIL_RE = re.compile(r"^[\w.+-]+@[\w-]+(?:\.[\w-]+)+$")
_LINKEDIN_RE = re.compile(r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/[\w%-]+/?", re.IGNORECASE)
_DUTY_RE = re.compile(r"^(?:responsible for|duties|tasked with|in charge of)\b", re.IGNORECASE)
_IMPACT_RE = re.compile(
    r"\b(?:resulting in|result(?:ed|s)? in|impact|improv(?:ed|ing)|increas(?:ed|ing)|reduc(?:ed|ing)|"
    r"sav(?:ed|ing)|adopted by|used by|enabl(?:ed|ing))\b",
    re.IGNORECASE,
)
_QUANTIFIABLE_WORD_RE = re.compile(
    r"\b(?:first|second|third|top|best|highest|record|award(?:ed)?|winner|finalist|ranked)\b",
    re.IGNORECASE,
)


def _fail(reason: str, evidence: str | None = None) -> VerificationResult:
    return VerificationResult(passed=False, reason=reason, evidence=evidence)


def _pass(reason: str, evidence: str | None = None) -> VerificationResult:
    return VerificationResult(passed=True, reason=reason, evidence=evidence)


def _blank(value: str | None) -> bool:
    return not (value or "").strip()


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def summary_adequate_length(summary: str, context: OriginalInputData | None = None) -> VerificationResult:
    text = (summary or "").strip()
    if not text:
        return _fail("Professional summary is empty")
    n = len(text)
    if n < SUMMARY_MIN_CHARS:
        return _fail(f"Summary is too short ({n} characters); aim for at least {SUMMARY_MIN_CHARS}")
    if n > SUMMARY_MAX_CHARS:
        return _fail(f"Summary is too long ({n} characters); keep it under {SUMMARY_MAX_CHARS}")
    return _pass(f"Summary length is well balanced ({n} characters)")


def summary_no_first_person(summary: str, context: OriginalInputData | None = None) -> VerificationResult:
    if _blank(summary):
        return _fail("Professional summary is empty")
    found = text_signals.find_first_person(summary)
    if found:
        shown = ", ".join(dict.fromkeys(found[:5]))
        return _fail(
            f"Summary uses first-person pronouns ({shown}); rewrite with an implied subject",
            evidence=shown,
        )
    return _pass("Summary uses a professional implied-subject voice")


def summary_has_metrics(summary: str, context: OriginalInputData | None = None) -> VerificationResult:
    if _blank(summary):
        return _fail("Professional summary is empty")
    metrics = text_signals.find_metrics(summary)
    if not metrics:
        return _fail("No quantifiable metric found in the summary (percentages, amounts, counts)")
    return _pass(f"Summary cites {len(metrics)} quantifiable result(s)", evidence=", ".join(metrics[:3]))


def _profession_terms(context: OriginalInputData | None) -> set[str]:
    if context is None:
        return set()
    return {w.lower() for w in text_signals.words(context.profession) if len(w) > 2}


def summary_has_ats_keywords(summary: str, context: OriginalInputData | None = None) -> VerificationResult:
    if _blank(summary):
        return _fail("Professional summary is empty")
    distinct = sorted(set(text_signals.ats_keywords_in(summary, _profession_terms(context))))
    if len(distinct) < MIN_ATS_KEYWORDS:
        return _fail(
            f"Only {len(distinct)} ATS keyword(s) in the summary; include at least {MIN_ATS_KEYWORDS}",
            evidence=", ".join(distinct) or None,
        )
    return _pass(f"Summary includes {len(distinct)} ATS-friendly keywords", evidence=", ".join(distinct[:5]))


def summary_keyword_density(summary: str, context: OriginalInputData | None = None) -> VerificationResult:
    if _blank(summary):
        return _fail("Professional summary is empty")
    tokens = text_signals.words(summary)
    if not tokens:
        return _fail("Summary has no readable words")
    hits = text_signals.ats_keywords_in(summary, _profession_terms(context))
    density = len(hits) / len(tokens)
    low, high = KEYWORD_DENSITY_BAND
    evidence = f"density={density:.1%}"
    if density < low:
        return _fail("Keyword density is too low for ATS matching", evidence=evidence)
    if density > high:
        return _fail("Keyword density is too high and reads as keyword stuffing", evidence=evidence)
    return _pass("Keyword density is within the ATS target range", evidence=evidence)


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def experience_has_metrics(entries: list[ExperienceEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No work experience provided")
    with_metrics = [e for e in entries if text_signals.has_metric(e.text())]
    needed = math.ceil(len(entries) / 2)
    evidence = ", ".join(e.title or e.company for e in with_metrics) or None
    if len(with_metrics) < needed:
        if not with_metrics:
            return _fail("No quantifiable metric found in work experience")
        return _fail(
            f"Only {len(with_metrics)} of {len(entries)} roles include a quantifiable metric",
            evidence=evidence,
        )
    return _pass(f"{len(with_metrics)} of {len(entries)} roles include quantifiable results", evidence=evidence)


def experience_action_verbs(entries: list[ExperienceEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No work experience provided")
    bullets = [b for e in entries for b in e.bullets()]
    if not bullets:
        return _fail("Work experience has no bullet points to evaluate")
    qualities = [text_signals.opening_verb_quality(b) for b in bullets]
    strong = qualities.count("strong")
    weak = [b for b, q in zip(bullets, qualities) if q == "weak"]
    ratio = strong / len(bullets)
    if ratio < ACTION_VERB_RATIO:
        evidence = text_signals.strip_bullet(weak[0])[:60] if weak else None
        return _fail(
            f"Only {strong} of {len(bullets)} bullets start with a strong action verb",
            evidence=evidence,
        )
    return _pass(f"{strong} of {len(bullets)} bullets open with a strong action verb")


def _is_distinct_achievement(achievement: str, responsibilities: set[str]) -> bool:
    text = achievement.strip()
    if not text:
        return False
    return text.lower() not in responsibilities and not _DUTY_RE.match(text_signals.strip_bullet(text))


def experience_has_achievements(entries: list[ExperienceEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No work experience provided")
    missing: list[str] = []
    for entry in entries:
        duties = {r.strip().lower() for r in entry.responsibilities}
        if not any(_is_distinct_achievement(a, duties) for a in entry.achievements):
            missing.append(entry.title or entry.company or "untitled role")
    if missing:
        return _fail(
            f"{len(missing)} role(s) list responsibilities but no distinct achievement",
            evidence=", ".join(missing),
        )
    return _pass("Every role lists at least one achievement beyond its responsibilities")


def _seniority(title: str) -> float | None:
    level = None
    for index, pattern in enumerate(SENIORITY_LEVELS):
        if pattern.search(title or ""):
            level = index
    return level


def experience_shows_progression(entries: list[ExperienceEntry], context: OriginalInputData | None = None) -> VerificationResult:
    """Heuristic: seniority should not decrease over time.

    Entries are ordered by start year when every entry has one; otherwise the
    listing is assumed to be most recent first.
    """
    if not entries:
        return _fail("No work experience provided")
    if len(entries) < 2:
        return _pass("Single role listed; progression not applicable")
    years = [text_signals.first_year(e.start_date) for e in entries]
    if all(y is not None for y in years):
        order = sorted(range(len(entries)), key=lambda i: (years[i], i))
        chronological = [entries[i] for i in order]
    else:
        chronological = list(reversed(entries))
    levels = [_seniority(e.title) for e in chronological]
    levels = [_MID_LEVEL if lvl is None else lvl for lvl in levels]
    for earlier, later in zip(levels, levels[1:]):
        if later < earlier:
            return _fail(
                "Job titles suggest a step down in seniority over time",
                evidence=" -> ".join(e.title for e in chronological),
            )
    return _pass(f"Career progression is consistent across {len(entries)} roles")


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

def skills_organized(skills: SkillsSection, context: OriginalInputData | None = None) -> VerificationResult:
    all_skills = skills.all_skills()
    if not all_skills:
        return _fail("No skills provided")
    counts = {"technical": len(skills.technical), "soft": len(skills.soft), "tools": len(skills.tools)}
    populated = sum(1 for n in counts.values() if n)
    evidence = ", ".join(f"{k}: {v}" for k, v in counts.items())
    if populated < 2:
        return _fail("Skills are listed as a single unsorted group; split them into categories", evidence=evidence)
    return _pass(f"Skills are organized into {populated} categories", evidence=evidence)


def skills_has_technical(skills: SkillsSection, context: OriginalInputData | None = None) -> VerificationResult:
    if not skills.all_skills():
        return _fail("No skills provided")
    if not [s for s in skills.technical if s.strip()]:
        return _fail("No technical skills listed")
    return _pass(f"Lists {len(skills.technical)} technical skill(s)", evidence=", ".join(skills.technical[:5]))


def skills_has_soft(skills: SkillsSection, context: OriginalInputData | None = None) -> VerificationResult:
    if not skills.all_skills():
        return _fail("No skills provided")
    if not [s for s in skills.soft if s.strip()]:
        return _fail("No soft skills listed (e.g. communication, leadership)")
    return _pass(f"Lists {len(skills.soft)} soft skill(s)", evidence=", ".join(skills.soft[:5]))


def skills_has_tools(skills: SkillsSection, context: OriginalInputData | None = None) -> VerificationResult:
    if not skills.all_skills():
        return _fail("No skills provided")
    if not [s for s in skills.tools if s.strip()]:
        return _fail("No tools or technologies listed")
    return _pass(f"Lists {len(skills.tools)} tool(s) and technologies", evidence=", ".join(skills.tools[:5]))


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

def _count_missing(entries: list, predicate: Callable[[object], bool]) -> int:
    return sum(1 for e in entries if not predicate(e))


def education_has_dates(entries: list[EducationEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No education entries provided")
    missing = _count_missing(entries, lambda e: not (_blank(e.start_date) and _blank(e.end_date) and _blank(e.duration)))
    if missing:
        return _fail(f"{missing} of {len(entries)} education entries have no dates")
    return _pass(f"All {len(entries)} education entries have dates")


def education_has_institution(entries: list[EducationEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No education entries provided")
    missing = _count_missing(entries, lambda e: not _blank(e.institution))
    if missing:
        return _fail(f"{missing} of {len(entries)} education entries are missing the institution")
    return _pass("Every education entry names its institution")


def education_has_degree_field(entries: list[EducationEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No education entries provided")
    missing = _count_missing(entries, lambda e: not (_blank(e.degree) or _blank(e.field)))
    if missing:
        return _fail(f"{missing} of {len(entries)} education entries are missing degree or field of study")
    return _pass("Every education entry states degree and field of study")


# ---------------------------------------------------------------------------
# Certifications
# ---------------------------------------------------------------------------

def certifications_have_issuer(entries: list[CertificationEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No certifications listed")
    missing = _count_missing(entries, lambda c: not _blank(c.issuer))
    if missing:
        return _fail(f"{missing} of {len(entries)} certifications are missing the issuing organization")
    return _pass("Every certification names its issuer")


def certifications_have_date(entries: list[CertificationEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No certifications listed")
    missing = _count_missing(entries, lambda c: not _blank(c.date))
    if missing:
        return _fail(f"{missing} of {len(entries)} certifications have no date")
    return _pass("Every certification is dated")


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

def projects_have_descriptions(entries: list[ProjectEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No projects listed")
    thin = [p.name or "untitled project" for p in entries if len(p.description.strip()) < PROJECT_MIN_DESCRIPTION_CHARS]
    if thin:
        return _fail(f"{len(thin)} project(s) lack a meaningful description", evidence=", ".join(thin))
    return _pass(f"All {len(entries)} projects have meaningful descriptions")


def projects_have_technologies(entries: list[ProjectEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No projects listed")
    bare = [p.name or "untitled project" for p in entries if not [t for t in p.technologies if t.strip()]]
    if bare:
        return _fail(f"{len(bare)} project(s) do not list the technologies used", evidence=", ".join(bare))
    return _pass("Every project lists the technologies used")


def projects_have_impact(entries: list[ProjectEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No projects listed")
    with_impact = [
        p.name for p in entries
        if not _blank(p.impact)
        or text_signals.has_metric(p.description)
        or _IMPACT_RE.search(" ".join([p.description, *p.achievements]))
    ]
    if not with_impact:
        return _fail("No project states its impact or results")
    return _pass(f"{len(with_impact)} of {len(entries)} projects state their impact", evidence=", ".join(with_impact))


# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------

def achievements_have_metrics(achievements: list[str], context: OriginalInputData | None = None) -> VerificationResult:
    items = [a for a in achievements if a.strip()]
    if not items:
        return _fail("No standalone achievements listed")
    without = [a for a in items if not text_signals.has_metric(a, strict=True)]
    if without:
        return _fail(
            f"{len(without)} of {len(items)} achievements lack a specific metric",
            evidence=without[0][:60],
        )
    return _pass(f"All {len(items)} achievements carry specific metrics")


def achievements_quantifiable(achievements: list[str], context: OriginalInputData | None = None) -> VerificationResult:
    items = [a for a in achievements if a.strip()]
    if not items:
        return _fail("No standalone achievements listed")
    quantified = [a for a in items if re.search(r"\d", a) or _QUANTIFIABLE_WORD_RE.search(a)]
    if len(quantified) < math.ceil(len(items) / 2):
        return _fail("Most achievements are not quantifiable; add numbers, rankings or awards")
    return _pass(f"{len(quantified)} of {len(items)} achievements are quantifiable")


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------

def languages_have_levels(entries: list[LanguageEntry], context: OriginalInputData | None = None) -> VerificationResult:
    if not entries:
        return _fail("No languages listed")
    unknown = [lang.language or "unnamed" for lang in entries if lang.level.strip().lower() not in LANGUAGE_LEVELS]
    if unknown:
        return _fail(
            f"{len(unknown)} language(s) lack a recognized proficiency level",
            evidence=", ".join(unknown),
        )
    return _pass(f"All {len(entries)} languages state a proficiency level")


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

def contact_professional_email(contact: ContactInfo, context: OriginalInputData | None = None) -> VerificationResult:
    email = (contact.email or "").strip().lower()
    if not email:
        return _fail("No email address provided")
    if not _EMAIL_RE.match(email):
        return _fail("Email address is not valid", evidence=email)
    domain = email.rsplit("@", 1)[1]
    local = email.rsplit("@", 1)[0]
    if domain in DISPOSABLE_EMAIL_DOMAINS:
        return _fail("Email uses a disposable domain; use a permanent address", evidence=domain)
    if _ROLE_EMAIL_RE.match(email) or _INFORMAL_EMAIL_RE.search(local) or re.search(r"\d{4,}", local):
        return _fail("Consider a more professional email address (e.g. firstname.lastname)", evidence=email)
    return _pass("Professional email address")


def contact_has_phone(contact: ContactInfo, context: OriginalInputData | None = None) -> VerificationResult:
    digits = re.sub(r"\D", "", contact.phone or "")
    if len(digits) < MIN_PHONE_DIGITS:
        return _fail("No valid phone number provided")
    return _pass("Phone number included")


def contact_has_linkedin(contact: ContactInfo, context: OriginalInputData | None = None) -> VerificationResult:
    url = (contact.linkedin or "").strip()
    if not url:
        return _fail("Add a LinkedIn profile URL")
    if not _LINKEDIN_RE.search(url):
        return _fail("LinkedIn entry is not a profile URL (linkedin.com/in/...)", evidence=url)
    return _pass("LinkedIn profile included", evidence=url)


# ---------------------------------------------------------------------------
# Data integrity: cross-checks against the original input
# ---------------------------------------------------------------------------

def _no_input(context: OriginalInputData | None) -> bool:
    return context is None or context.is_empty()


def integrity_metrics_grounded(resume: GeneratedResumeContent, context: OriginalInputData | None = None) -> VerificationResult:
    if _no_input(context):
        return _fail("No original input available to cross-check metrics")
    generated_text = " ".join([
        resume.professional_summary,
        *(e.text() for e in resume.experience),
        *resume.achievements,
        *(p.description for p in resume.projects),
    ])
    claimed: set[str] = set()
    for snippet in text_signals.find_metrics(generated_text):
        claimed |= text_signals.numbers_in(snippet)
    unsupported = sorted(claimed - text_signals.numbers_in(context.full_text()))
    if unsupported:
        return _fail(
            f"{len(unsupported)} metric(s) do not appear in your original input; confirm they are accurate",
            evidence=", ".join(unsupported[:5]),
        )
    return _pass("Every metric is backed by your original input")


def _fuzzy_in(value: str, candidates: list[str]) -> bool:
    return any(fuzz.token_set_ratio(value.lower(), c.lower()) >= FUZZY_MATCH_THRESHOLD for c in candidates if c.strip())


def integrity_experience_grounded(resume: GeneratedResumeContent, context: OriginalInputData | None = None) -> VerificationResult:
    if _no_input(context):
        return _fail("No original input available to cross-check experience")
    if not resume.experience:
        return _fail("No work experience provided")
    companies = [e.company for e in context.experience]
    titles = [e.title for e in context.experience]
    unmatched = [
        e.title or e.company for e in resume.experience
        if not (_fuzzy_in(e.company, companies) or (_blank(e.company) and _fuzzy_in(e.title, titles)))
    ]
    if unmatched:
        return _fail(
            f"{len(unmatched)} role(s) do not match any position in your original input",
            evidence=", ".join(unmatched),
        )
    return _pass("Every role matches a position from your original input")


def integrity_education_grounded(resume: GeneratedResumeContent, context: OriginalInputData | None = None) -> VerificationResult:
    if _no_input(context):
        return _fail("No original input available to cross-check education")
    if not resume.education:
        return _fail("No education entries provided")
    institutions = [e.institution for e in context.education]
    unmatched = [e.institution or "unnamed" for e in resume.education if not _fuzzy_in(e.institution, institutions)]
    if unmatched:
        return _fail(
            f"{len(unmatched)} education entr(ies) do not match your original input",
            evidence=", ".join(unmatched),
        )
    return _pass("Every education entry matches your original input")


VERIFIERS: dict[str, Verifier] = {
    "summary.adequate_length": summary_adequate_length,
    "summary.no_first_person": summary_no_first_person,
    "summary.has_metrics": summary_has_metrics,
    "summary.ats_keywords": summary_has_ats_keywords,
    "summary.keyword_density": summary_keyword_density,
    "experience.has_metrics": experience_has_metrics,
    "experience.action_verbs": experience_action_verbs,
    "experience.has_achievements": experience_has_achievements,
    "experience.progression": experience_shows_progression,
    "skills.organized": skills_organized,
    "skills.technical": skills_has_technical,
    "skills.soft": skills_has_soft,
    "skills.tools": skills_has_tools,
    "education.dates": education_has_dates,
    "education.institution": education_has_institution,
    "education.degree_field": education_has_degree_field,
    "certifications.issuer": certifications_have_issuer,
    "certifications.date": certifications_have_date,
    "projects.descriptions": projects_have_descriptions,
    "projects.technologies": projects_have_technologies,
    "projects.impact": projects_have_impact,
    "achievements.metrics": achievements_have_metrics,
    "achievements.quantifiable": achievements_quantifiable,
    "languages.levels": languages_have_levels,
    "contact.professional_email": contact_professional_email,
    "contact.phone": contact_has_phone,
    "contact.linkedin": contact_has_linkedin,
    "integrity.metrics_grounded": integrity_metrics_grounded,
    "integrity.experience_grounded": integrity_experience_grounded,
    "integrity.education_grounded": integrity_education_grounded,
}
