"""Ordered scales for education and language proficiency.

Free-text degree and proficiency strings coming out of document extraction
are mapped onto two totally ordered scales so the engine can compare them
against catalog minimums:

    education: highschool < diploma < bachelors < masters < phd
    language:  A1 < A2 < B1 < B2 < C1 < C2   (CEFR)

IELTS bands, CLB/CELPIP levels and TOEFL iBT totals are converted to CEFR.
"""

import re

EDUCATION_RANKS: dict[str, int] = {
    "highschool": 1,
    "diploma": 2,
    "bachelors": 3,
    "masters": 4,
    "phd": 5,
}

CEFR_RANKS: dict[str, int] = {"A1": 1, "A2": 2, "B1": 3, "B2": 4, "C1": 5, "C2": 6}

DEGREE_PATTERNS: dict[str, list[str]] = {
    "phd": [
        r"ph\.?\s?d", r"doctorate", r"doctoral", r"doctor of philosophy", r"d\.?phil",
    ],
    "masters": [
        r"master(?:'?s)?", r"m\.?sc", r"m\.s\.?", r"m\.?tech", r"m\.?eng", r"mba",
        r"m\.a\.?", r"llm",
    ],
    "bachelors": [
        r"bachelor(?:'?s)?", r"b\.?sc", r"b\.s\.?", r"b\.?tech", r"b\.?eng", r"b\.e\.?",
        r"b\.a\.?", r"bba", r"undergraduate degree",
    ],
    "diploma": [
        r"diploma", r"associate(?:'?s)?", r"vocational", r"apprenticeship",
        r"trade certificate",
    ],
    "highschool": [
        r"high\s*school", r"secondary(?:\s+school)?", r"a[\s-]?levels?", r"abitur",
    ],
}

_DEGREE_COMPILED: dict[str, re.Pattern] = {}
for _level, _patterns in DEGREE_PATTERNS.items():
    _combined = "|".join(_patterns)
    _DEGREE_COMPILED[_level] = re.compile(rf"\b(?:{_combined})\b", re.IGNORECASE)

# Order matters: check highest first
_DEGREE_PRIORITY = ["phd", "masters", "bachelors", "diploma", "highschool"]

_CEFR_RE = re.compile(r"\b([ABC][12])\b", re.IGNORECASE)

# Descriptive proficiency words commonly found on resumes
_PROFICIENCY_WORDS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\b(?:native|mother\s*tongue|bilingual)\b", re.IGNORECASE), "C2"),
    (re.compile(r"\b(?:fluent|advanced|proficient)\b", re.IGNORECASE), "C1"),
    (re.compile(r"\b(?:professional|upper[\s-]intermediate)\b", re.IGNORECASE), "B2"),
    (re.compile(r"\bintermediate\b", re.IGNORECASE), "B1"),
    (re.compile(r"\b(?:elementary|basic)\b", re.IGNORECASE), "A2"),
    (re.compile(r"\bbeginner\b", re.IGNORECASE), "A1"),
]

# (lower bound, CEFR) pairs, highest first
_IELTS_BANDS: list[tuple[float, str]] = [
    (8.5, "C2"), (7.0, "C1"), (5.5, "B2"), (4.0, "B1"), (3.0, "A2"), (0.0, "A1"),
]
_CLB_LEVELS: list[tuple[float, str]] = [
    (10, "C2"), (9, "C1"), (7, "B2"), (5, "B1"), (3, "A2"), (0, "A1"),
]
_TOEFL_IBT: list[tuple[float, str]] = [
    (114, "C2"), (95, "C1"), (72, "B2"), (42, "B1"), (0, "A2"),
]


def parse_education_level(text: str | None) -> str | None:
    """Return the highest canonical education level mentioned, or None."""
    if not text:
        return None
    for level in _DEGREE_PRIORITY:
        if _DEGREE_COMPILED[level].search(text):
            return level
    return None


def education_rank(level: str | None) -> int:
    return EDUCATION_RANKS.get(level or "", 0)


def _lookup_band(value: float, table: list[tuple[float, str]]) -> str:
    for lower, cefr in table:
        if value >= lower:
            return cefr
    return table[-1][1]


def score_to_cefr(score: float, test_type: str | None = None) -> str | None:
    """Convert a numeric test result to CEFR based on the test type."""
    test = (test_type or "").lower()
    if "clb" in test or "celpip" in test:
        return _lookup_band(score, _CLB_LEVELS)
    if "toefl" in test:
        return _lookup_band(score, _TOEFL_IBT)
    if "ielts" in test or (not test and 0 < score <= 9):
        return _lookup_band(score, _IELTS_BANDS)
    return None


def parse_cefr(text: str | None) -> str | None:
    """Extract a CEFR level from text such as 'German B2' or 'Fluent'."""
    if not text:
        return None
    match = _CEFR_RE.search(text)
    if match:
        return match.group(1).upper()
    for pattern, level in _PROFICIENCY_WORDS:
        if pattern.search(text):
            return level
    return None


def language_level(proficiency: str | None, score: float | None, test_type: str | None) -> str | None:
    """Best CEFR estimate for one language entry; explicit CEFR wins over scores."""
    level = parse_cefr(proficiency)
    if level:
        return level
    if score is not None:
        return score_to_cefr(score, test_type)
    return None


def cefr_rank(level: str | None) -> int:
    return CEFR_RANKS.get((level or "").upper(), 0)
