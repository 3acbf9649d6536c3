# cv_vocabulary.py
# Domain vocabulary for CV scoring, one table per CV working language.
#
# Every table is immutable and built once at import time. Scorers, advisory
# generators and validators look vocabulary up through get_vocabulary() so a
# CV written in German is judged against German verbs and receives German
# messages.

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "de")

# ==============================================
# ENGLISH
# ==============================================

EN_ACTION_VERBS = (
    "developed", "implemented", "supervised", "optimized", "reduced",
    "increased", "coordinated", "analyzed", "improved", "automated",
    "initiated", "managed", "organized", "directed", "designed",
)

EN_VAGUE_WORDS = (
    "various", "several", "diverse", "different", "a number of",
    "responsible for", "in charge of", "team player", "motivated", "dedicated",
)

EN_KEYWORD_CANDIDATES = (
    "Project management",
    "Team leadership",
    "Process optimization",
    "Customer service",
    "Quality assurance",
)

EN_MESSAGES = {
    "red_flag.full_name": "Full name is missing",
    "red_flag.email": "Email address is missing",
    "red_flag.experience": "No work experience listed",
    "red_flag.education": "No education listed",
    "quick_win.skills": "Add more relevant skills (at least 5-8)",
    "quick_win.languages": "Add language skills with CEFR levels",
    "quick_win.quantify": "Quantify your achievements with numbers and percentages",
    "section.experience": "Experience",
    "feedback.few_bullets": 'Position "{role}" needs at least 2-3 bullet points',
    "feedback.start_date": 'Wrong date format for "{role}" - use MM.YYYY',
    "bullet.suggestion": "Developed and implemented new processes that increased efficiency by 25%",
    "bullet.rationale": "Start with an action verb and quantify the result",
    "issue.too_short": "Too short - at least 20 characters",
    "issue.too_long": "Too long - at most 150 characters",
    "issue.capitalization": "Should start with a capital letter",
    "issue.quantification": "No quantification found",
    "issue.action_verb": "No action verb found",
}

EN_LEVEL_LABELS = {
    "A1": "Basic", "A2": "Basic",
    "B1": "Conversational", "B2": "Conversational",
    "C1": "Fluent", "C2": "Proficient",
}

# ==============================================
# GERMAN
# ==============================================

DE_ACTION_VERBS = (
    "entwickelte", "implementierte", "führte", "optimierte", "reduzierte",
    "steigerte", "koordinierte", "analysierte", "verbesserte", "automatisierte",
    "initiierte", "verwaltete", "organisierte", "leitete", "gestaltete",
)

DE_VAGUE_WORDS = (
    "verschiedene", "einige", "mehrere", "diverse", "unterschiedliche",
    "verantwortlich", "zuständig", "teamplayer", "motiviert", "engagiert",
)

DE_KEYWORD_CANDIDATES = (
    "Projektmanagement",
    "Teamführung",
    "Prozessoptimierung",
    "Kundenbetreuung",
    "Qualitätssicherung",
)

DE_MESSAGES = {
    "red_flag.full_name": "Name fehlt",
    "red_flag.email": "E-Mail-Adresse fehlt",
    "red_flag.experience": "Keine Berufserfahrung angegeben",
    "red_flag.education": "Keine Ausbildung angegeben",
    "quick_win.skills": "Fügen Sie mehr relevante Fähigkeiten hinzu (mindestens 5-8)",
    "quick_win.languages": "Sprachkenntnisse hinzufügen mit GER-Stufen",
    "quick_win.quantify": "Quantifizieren Sie Ihre Erfolge mit Zahlen und Prozentangaben",
    "section.experience": "Berufserfahrung",
    "feedback.few_bullets": 'Position "{role}" braucht mindestens 2-3 Aufzählungspunkte',
    "feedback.start_date": 'Falsches Datumsformat bei "{role}" - verwenden Sie MM.YYYY',
    "bullet.suggestion": "Entwickelte und implementierte neue Prozesse, die die Effizienz um 25% steigerten",
    "bullet.rationale": "Beginnen Sie mit einem Aktionsverb und quantifizieren Sie das Ergebnis",
    "issue.too_short": "Zu kurz - mindestens 20 Zeichen",
    "issue.too_long": "Zu lang - maximal 150 Zeichen",
    "issue.capitalization": "Sollte mit Großbuchstaben beginnen",
    "issue.quantification": "Keine Quantifizierung gefunden",
    "issue.action_verb": "Kein Aktionsverb gefunden",
}

DE_LEVEL_LABELS = {
    "A1": "Grundkenntnisse", "A2": "Grundkenntnisse",
    "B1": "Konversation", "B2": "Konversation",
    "C1": "Fließend", "C2": "Verhandlungssicher",
}

# ==============================================
# SHARED
# ==============================================

# "end" values that mark an ongoing position, compared case-insensitively
PRESENT_MARKERS: FrozenSet[str] = frozenset({"present", "current", "heute", "aktuell"})


@dataclass(frozen=True)
class Vocabulary:
    """Scoring vocabulary and advisory messages for one working language"""
    language: str
    action_verbs: Tuple[str, ...]
    vague_words: Tuple[str, ...]
    keyword_candidates: Tuple[str, ...]
    messages: Mapping[str, str]
    level_labels: Mapping[str, str]

    def message(self, key: str, **fields) -> str:
        return self.messages[key].format(**fields)


VOCABULARIES: Mapping[str, Vocabulary] = MappingProxyType({
    "en": Vocabulary(
        language="en",
        action_verbs=EN_ACTION_VERBS,
        vague_words=EN_VAGUE_WORDS,
        keyword_candidates=EN_KEYWORD_CANDIDATES,
        messages=MappingProxyType(EN_MESSAGES),
        level_labels=MappingProxyType(EN_LEVEL_LABELS),
    ),
    "de": Vocabulary(
        language="de",
        action_verbs=DE_ACTION_VERBS,
        vague_words=DE_VAGUE_WORDS,
        keyword_candidates=DE_KEYWORD_CANDIDATES,
        messages=MappingProxyType(DE_MESSAGES),
        level_labels=MappingProxyType(DE_LEVEL_LABELS),
    ),
})


def get_vocabulary(language: str = DEFAULT_LANGUAGE) -> Vocabulary:
    """Return the vocabulary for `language`; unknown codes raise ValueError."""
    try:
        return VOCABULARIES[language]
    except KeyError:
        raise ValueError(
            f"Unsupported CV language {language!r} (expected one of {', '.join(SUPPORTED_LANGUAGES)})"
        ) from None


def language_level_label(level: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Display label for a CEFR tier. Labels never decrease from A1 to C2."""
    return get_vocabulary(language).level_labels[getattr(level, "value", level)]
