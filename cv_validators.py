# cv_validators.py
# Standalone checks shared by the scorers and reusable on their own
# (e.g. inline form validation of a single bullet or date field).

import re
from typing import Iterable, Optional

from cv_models import BulletValidation
from cv_vocabulary import DEFAULT_LANGUAGE, PRESENT_MARKERS, get_vocabulary

# MM.YYYY, month 01-12
DATE_FORMAT_PATTERN = re.compile(r"(0[1-9]|1[0-2])\.\d{4}", re.ASCII)
DIGIT_PATTERN = re.compile(r"\d", re.ASCII)

MIN_BULLET_LENGTH = 20
MAX_BULLET_LENGTH = 150


# ==============================================
# TEXT PREDICATES
# ==============================================

def is_valid_date_format(date: Optional[str]) -> bool:
    """True iff `date` is exactly MM.YYYY ("01.2024"); ISO dates, slashes and 1-digit months fail."""
    if not date:
        return False
    return DATE_FORMAT_PATTERN.fullmatch(date) is not None


def is_present_marker(value: Optional[str]) -> bool:
    return bool(value) and value.strip().casefold() in PRESENT_MARKERS


def starts_uppercase(text: str) -> bool:
    # str.isupper covers accented capitals (Ä, Ö, Ü, É, ...)
    return bool(text) and text[0].isupper()


def has_digit(text: str) -> bool:
    return DIGIT_PATTERN.search(text) is not None


def contains_any(text: str, words: Iterable[str]) -> bool:
    """Case-insensitive substring match against a word list"""
    lowered = text.lower()
    return any(word in lowered for word in words)


# ==============================================
# BULLET LINTER
# ==============================================

def validate_bullet_point(bullet: str, language: str = DEFAULT_LANGUAGE) -> BulletValidation:
    """
    Lint a single bullet point.
    Checks run independently, so one bullet can collect several issues:
    length bounds, leading capital, quantification (digit or %), action verb.
    """
    vocab = get_vocabulary(language)
    issues = []

    if len(bullet) < MIN_BULLET_LENGTH:
        issues.append(vocab.message("issue.too_short"))
    if len(bullet) > MAX_BULLET_LENGTH:
        issues.append(vocab.message("issue.too_long"))
    if not starts_uppercase(bullet):
        issues.append(vocab.message("issue.capitalization"))
    if not has_digit(bullet) and "%" not in bullet:
        issues.append(vocab.message("issue.quantification"))
    if not contains_any(bullet, vocab.action_verbs):
        issues.append(vocab.message("issue.action_verb"))

    return BulletValidation(valid=not issues, issues=issues)
