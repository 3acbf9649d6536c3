# dimension_scorers.py
# Five independent CV quality dimensions.
#
# Every scorer starts at 100, subtracts fixed penalties for each deficiency
# it finds and floors the result at 0. Pass a list as `log` to collect one
# (dimension, reason, points) tuple per penalty applied.

import re
from typing import List, Optional, Tuple

from cv_models import CV
from cv_validators import (
    MAX_BULLET_LENGTH,
    MIN_BULLET_LENGTH,
    contains_any,
    has_digit,
    is_present_marker,
    is_valid_date_format,
    starts_uppercase,
)

DeductionLog = Optional[List[Tuple[str, str, int]]]

BASE_SCORE = 100

# Characters a parseable phone number may contain
PHONE_PATTERN = re.compile(r"[\d\s+\-()]+", re.ASCII)

MIN_TOTAL_SKILL_ITEMS = 5


def _deduct(log: DeductionLog, dimension: str, reason: str, points: int) -> int:
    if log is not None:
        log.append((dimension, reason, -points))
    return points


def _floor(score: int) -> int:
    return max(0, score)


# ==============================================
# STRUCTURE
# ==============================================

def score_structure(cv: CV, log: DeductionLog = None) -> int:
    """Required fields and sections present, experience dates in MM.YYYY."""
    score = BASE_SCORE

    if not cv.personal.full_name:
        score -= _deduct(log, "structure", "Missing full name", 20)
    if not cv.personal.email:
        score -= _deduct(log, "structure", "Missing email", 20)
    if not cv.experience:
        score -= _deduct(log, "structure", "No experience entries", 15)
    if not cv.education:
        score -= _deduct(log, "structure", "No education entries", 15)
    if not cv.skills:
        score -= _deduct(log, "structure", "No skill categories", 10)

    for exp in cv.experience:
        if not is_valid_date_format(exp.start):
            score -= _deduct(log, "structure", f"Invalid start date for {exp.role!r}", 5)
        if exp.end and not is_present_marker(exp.end) and not is_valid_date_format(exp.end):
            score -= _deduct(log, "structure", f"Invalid end date for {exp.role!r}", 5)

    return _floor(score)


# ==============================================
# CONTENT
# ==============================================

def score_content(cv: CV, log: DeductionLog = None) -> int:
    """Action verbs, quantified results and vague wording across all experience bullets."""
    score = BASE_SCORE
    vocab = cv.vocabulary
    bullets = cv.experience_bullets

    action_verb_count = sum(1 for b in bullets if contains_any(b, vocab.action_verbs))
    if action_verb_count == 0:
        score -= _deduct(log, "content", "No action verbs", 30)
    elif action_verb_count < 3:
        score -= _deduct(log, "content", f"Only {action_verb_count} bullet(s) with action verbs", 15)

    quantified = sum(1 for b in bullets if has_digit(b))
    if quantified == 0:
        score -= _deduct(log, "content", "No quantified bullets", 25)
    elif quantified < 2:
        score -= _deduct(log, "content", "Only 1 quantified bullet", 10)

    vague_count = sum(1 for b in bullets if contains_any(b, vocab.vague_words))
    if vague_count:
        score -= _deduct(log, "content", f"{vague_count} bullet(s) with vague wording", vague_count * 5)

    return _floor(score)


# ==============================================
# LANGUAGE QUALITY
# ==============================================

def score_language(cv: CV, log: DeductionLog = None) -> int:
    """Bullet length and capitalization (max ~2 lines per bullet)."""
    score = BASE_SCORE

    for bullet in cv.experience_bullets:
        if len(bullet) > MAX_BULLET_LENGTH:
            score -= _deduct(log, "language", f"Bullet longer than {MAX_BULLET_LENGTH} chars", 3)
        if len(bullet) < MIN_BULLET_LENGTH:
            score -= _deduct(log, "language", f"Bullet shorter than {MIN_BULLET_LENGTH} chars", 5)
        if bullet and not starts_uppercase(bullet):
            score -= _deduct(log, "language", "Bullet not capitalized", 2)

    return _floor(score)


# ==============================================
# ATS COMPATIBILITY
# ==============================================

def score_ats(cv: CV, log: DeductionLog = None) -> int:
    """How reliably an applicant tracking system can parse the document."""
    score = BASE_SCORE
    email = cv.personal.email
    phone = cv.personal.phone

    if not email or "@" not in email:
        score -= _deduct(log, "ats", "Missing or malformed email", 20)
    if not phone or not PHONE_PATTERN.fullmatch(phone) or not has_digit(phone):
        score -= _deduct(log, "ats", "Missing or malformed phone", 10)

    # skills should be single comma-free tokens
    for item in cv.skill_items:
        if "," in item.name:
            score -= _deduct(log, "ats", f"Skill {item.name!r} contains a comma", 2)

    if not cv.experience:
        score -= _deduct(log, "ats", "No experience section", 20)
    if not cv.education:
        score -= _deduct(log, "ats", "No education section", 20)
    if len(cv.skill_items) < MIN_TOTAL_SKILL_ITEMS:
        score -= _deduct(log, "ats", f"Fewer than {MIN_TOTAL_SKILL_ITEMS} skills", 10)

    return _floor(score)


# ==============================================
# COMPLIANCE
# ==============================================

def score_compliance(cv: CV, log: DeductionLog = None) -> int:
    """
    Privacy and contact compliance.
    The schema carries no birth date, marital status or religion, so a CV
    starts out privacy-compliant; only contact and photo consistency are checked.
    """
    score = BASE_SCORE

    if not cv.personal.email:
        score -= _deduct(log, "compliance", "Missing email", 30)
    if cv.personal.include_photo and not cv.personal.photo_url:
        score -= _deduct(log, "compliance", "Photo enabled but no photo provided", 10)

    return _floor(score)


SCORERS = (
    ("structure", score_structure),
    ("content", score_content),
    ("language", score_language),
    ("ats", score_ats),
    ("compliance", score_compliance),
)
