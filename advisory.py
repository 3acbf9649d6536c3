# advisory.py
# Human-facing guidance generated from the raw CV content.
# Independent of the dimension scores; all messages follow the CV language.

from typing import List

from cv_models import CV, ImprovedBullet, SectionFeedback
from cv_validators import has_digit, is_valid_date_format, starts_uppercase

MAX_KEYWORDS = 3
MIN_SKILL_CATEGORIES = 5
MIN_BULLETS_PER_POSITION = 2


def red_flags(cv: CV) -> List[str]:
    """Critical omissions, ordered name, email, experience, education."""
    vocab = cv.vocabulary
    flags = []
    if not cv.personal.full_name:
        flags.append(vocab.message("red_flag.full_name"))
    if not cv.personal.email:
        flags.append(vocab.message("red_flag.email"))
    if not cv.experience:
        flags.append(vocab.message("red_flag.experience"))
    if not cv.education:
        flags.append(vocab.message("red_flag.education"))
    return flags


def quick_wins(cv: CV) -> List[str]:
    vocab = cv.vocabulary
    wins = []
    # counts categories, not individual skill items
    if len(cv.skills) < MIN_SKILL_CATEGORIES:
        wins.append(vocab.message("quick_win.skills"))
    if not cv.languages:
        wins.append(vocab.message("quick_win.languages"))
    if not any(has_digit(b) for b in cv.experience_bullets):
        wins.append(vocab.message("quick_win.quantify"))
    return wins


def section_feedback(cv: CV) -> List[SectionFeedback]:
    vocab = cv.vocabulary
    comments = []
    for exp in cv.experience:
        if len(exp.bullets) < MIN_BULLETS_PER_POSITION:
            comments.append(vocab.message("feedback.few_bullets", role=exp.role))
        if not is_valid_date_format(exp.start):
            comments.append(vocab.message("feedback.start_date", role=exp.role))

    if not comments:
        return []
    return [SectionFeedback(section=vocab.message("section.experience"), comments=comments)]


def improved_bullets(cv: CV) -> List[ImprovedBullet]:
    """
    One demonstrative rewrite: only the first bullet of the first position is
    inspected, and the suggestion is a fixed example rather than a rewrite of it.
    """
    if not cv.experience or not cv.experience[0].bullets:
        return []

    first_bullet = cv.experience[0].bullets[0]
    if starts_uppercase(first_bullet):
        return []

    vocab = cv.vocabulary
    return [ImprovedBullet(
        section=vocab.message("section.experience"),
        original=first_bullet,
        suggestion=vocab.message("bullet.suggestion"),
        rationale=vocab.message("bullet.rationale"),
    )]


def keywords_to_add(cv: CV) -> List[str]:
    """Up to three candidate keywords not yet covered by any skill name, in table order."""
    skill_names = [item.name.lower() for item in cv.skill_items]
    missing = [
        keyword for keyword in cv.vocabulary.keyword_candidates
        if not any(keyword.lower() in name for name in skill_names)
    ]
    return missing[:MAX_KEYWORDS]
