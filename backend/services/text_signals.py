"""Lexical signals shared by the verifiers: metrics, action verbs, pronouns, keywords."""

import re

# Bullet markers stripped before inspecting the opening word
BULLET_MARKERS = "•-–—►▪✓*○◆⚫→▸▹◇■□● "

# Strong action verbs accepted at the start of a bullet
ACTION_VERBS = frozenset({
    "accelerated", "achieved", "administered", "advanced", "analyzed", "architected",
    "automated", "built", "championed", "collaborated", "completed", "conducted",
    "configured", "consolidated", "coordinated", "created", "cut", "decreased",
    "delivered", "deployed", "designed", "developed", "directed", "doubled",
    "drove", "eliminated", "enabled", "engineered", "enhanced", "established",
    "evaluated", "executed", "expanded", "facilitated", "founded", "generated",
    "grew", "headed", "identified", "implemented", "improved", "increased",
    "influenced", "initiated", "innovated", "integrated", "introduced", "launched",
    "led", "maintained", "managed", "mentored", "migrated", "modernized",
    "negotiated", "optimized", "orchestrated", "organized", "overhauled", "oversaw",
    "partnered", "pioneered", "planned", "produced", "programmed", "reduced",
    "refactored", "resolved", "restructured", "revamped", "saved", "scaled",
    "secured", "shipped", "simplified", "spearheaded", "standardized", "streamlined",
    "strengthened", "supervised", "surpassed", "trained", "transformed", "tripled",
    "upgraded", "won",
})

# Weak openers that read as duties rather than actions
WEAK_OPENERS = (
    "responsible for",
    "duties included",
    "duties include",
    "tasked with",
    "worked on",
    "helped",
    "assisted",
    "participated in",
    "involved in",
    "was",
    "were",
    "in charge of",
)

# Quantified metrics: percentages, money, multipliers, counts with units
METRIC_PATTERNS = [
    re.compile(r"\d+(?:\.\d+)?\s?%"),
    re.compile(r"[$€£]\s?\d[\d,]*(?:\.\d+)?\s?[KMB]?\b", re.IGNORECASE),
    re.compile(r"\b\d+(?:\.\d+)?x\b", re.IGNORECASE),
    re.compile(
        r"\b\d[\d,]*\+?\s*(?:users?|clients?|customers?|projects?|teams?|members?|engineers?|people|"
        r"employees|requests|transactions|accounts|downloads|countries|markets|stores|sites|products)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b\d+\+?\s*(?:years?|months?|weeks?|days?|hours?)\b", re.IGNORECASE),
    re.compile(
        r"\b(?:increased?|improved?|reduced?|saved?|generated?|grew|grown|cut|boosted?|achieved?)"
        r"\s+(?:\w+\s+){0,3}?(?:by\s+)?\d+",
        re.IGNORECASE,
    ),
]

# Stricter variant for standalone achievements: unit-bearing numbers or rankings only
STRICT_METRIC_PATTERNS = METRIC_PATTERNS[:4] + [re.compile(r"#\d+\b")]

# Capital "I" only, and not inside tokens like I/O, i.e. or "Phase I"
FIRST_PERSON_RE = re.compile(
    r"(?<![\w/.])(?<!Phase )I(?:'m|'ve|'ll|'d)?(?![\w/.'])"
    r"|\b(?i:myself|mine|my|me)\b"
)

# Profession-agnostic ATS vocabulary
ATS_KEYWORDS = frozenset({
    # action / result
    "delivered", "achieved", "implemented", "developed", "managed", "led", "drove",
    "created", "designed", "optimized", "improved", "established", "built",
    "launched", "executed", "coordinated",
    # qualities
    "experienced", "skilled", "proficient", "expert", "specialized", "certified",
    "qualified", "accomplished",
    # business impact
    "revenue", "growth", "efficiency", "performance", "results", "success",
    "innovation", "strategy", "strategic", "leadership", "collaboration",
    "stakeholders", "cross-functional", "customer", "quality",
    # technical indicators
    "technology", "technologies", "system", "systems", "solution", "solutions",
    "platform", "platforms", "tools", "framework", "frameworks", "methodology",
    "methodologies", "processes", "operations",
})

_WORD_RE = re.compile(r"[A-Za-z][A-Za-z'+#-]*")
_NUMBER_RE = re.compile(r"\d[\d,]*(?:\.\d+)?")
_YEAR_RE = re.compile(r"^(?:19|20)\d{2}$")


def words(text: str) -> list[str]:
    return _WORD_RE.findall(text or "")


def find_metrics(text: str, strict: bool = False) -> list[str]:
    """Return metric snippets found in text, in pattern order."""
    patterns = STRICT_METRIC_PATTERNS if strict else METRIC_PATTERNS
    found: list[str] = []
    for pattern in patterns:
        found.extend(m.group(0).strip() for m in pattern.finditer(text or ""))
    return found


def has_metric(text: str, strict: bool = False) -> bool:
    return bool(find_metrics(text, strict=strict))


def find_first_person(text: str) -> list[str]:
    return FIRST_PERSON_RE.findall(text or "")


def strip_bullet(bullet: str) -> str:
    return bullet.strip().lstrip(BULLET_MARKERS).strip()


def opening_verb_quality(bullet: str) -> str:
    """Classify a bullet's opener as ``strong``, ``weak`` or ``neutral``."""
    cleaned = strip_bullet(bullet).lower()
    if not cleaned:
        return "neutral"
    for opener in WEAK_OPENERS:
        if cleaned == opener or cleaned.startswith(opener + " "):
            return "weak"
    first = words(cleaned)
    if first and first[0] in ACTION_VERBS:
        return "strong"
    return "neutral"


def ats_keywords_in(text: str, extra: set[str] | None = None) -> list[str]:
    """ATS keyword occurrences (with repeats) in text."""
    vocabulary = ATS_KEYWORDS | (extra or set())
    return [w for w in (t.lower() for t in words(text)) if w in vocabulary]


def numbers_in(text: str) -> set[str]:
    """Normalized numeric tokens, excluding calendar years."""
    found: set[str] = set()
    for raw in _NUMBER_RE.findall(text or ""):
        value = raw.replace(",", "")
        if "." in value:
            value = value.rstrip("0").rstrip(".")
        if _YEAR_RE.match(value):
            continue
        found.add(value)
    return found


def first_year(text: str) -> int | None:
    match = re.search(r"(?:19|20)\d{2}", text or "")
    return int(match.group(0)) if match else None
