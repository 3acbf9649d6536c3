"""
CV Evaluation Models
pydantic models for the CV document (input) and the evaluation result (output)
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from cv_vocabulary import DEFAULT_LANGUAGE, Vocabulary, get_vocabulary
from errors import CVValidationError


class CVModel(BaseModel):
    """Immutable document model. JSON keys are camelCase, attributes snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ResultModel(BaseModel):
    """Engine output model, serialized with camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


# ==============================================
# CV DOCUMENT
# ==============================================

class LanguageLevel(str, Enum):
    """CEFR proficiency tiers, A1 (beginner) < ... < C2 (mastery)"""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        return list(LanguageLevel).index(self)


class Address(CVModel):
    street: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class Link(CVModel):
    label: str
    url: str


class PersonalInfo(CVModel):
    full_name: str
    email: str
    role: Optional[str] = None
    city: Optional[str] = None  # legacy, superseded by address.city
    address: Optional[Address] = None
    phone: Optional[str] = None
    nationality: Optional[str] = None
    photo_url: Optional[str] = None
    include_photo: bool = False
    website_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    links: Tuple[Link, ...] = ()
    signature_url: Optional[str] = None


class Profile(CVModel):
    summary: str = ""


class ExperienceEntry(CVModel):
    role: str
    company: str
    start: str  # "MM.YYYY"
    city: Optional[str] = None
    end: Optional[str] = None  # "MM.YYYY" or a present marker
    bullets: Tuple[str, ...]


class EducationEntry(CVModel):
    degree: str
    school: str
    city: Optional[str] = None
    graduation: Optional[str] = None
    notes: Tuple[str, ...] = ()


class SkillItem(CVModel):
    name: str
    level: int = Field(ge=0, le=100, strict=True)


class SkillCategory(CVModel):
    category: str
    items: Tuple[SkillItem, ...]


class LanguageEntry(CVModel):
    name: str
    level: LanguageLevel = Field(validation_alias=AliasChoices("level", "proficiency"))


class Certificate(CVModel):
    name: str
    issuer: Optional[str] = None
    date: Optional[str] = None


class Project(CVModel):
    name: str
    description: str = ""
    bullets: Tuple[str, ...] = ()
    date: Optional[str] = None


class Volunteering(CVModel):
    org: str
    role: str
    bullets: Tuple[str, ...] = ()
    date: Optional[str] = None


class Reference(CVModel):
    note: str


class Closing(CVModel):
    place: Optional[str] = None
    date: Optional[str] = None


class CV(CVModel):
    """
    Complete structured résumé.
    Optional sections default to empty so scorers never special-case absence.
    """
    personal: PersonalInfo
    profile: Optional[Profile] = None
    experience: Tuple[ExperienceEntry, ...]
    education: Tuple[EducationEntry, ...]
    skills: Tuple[SkillCategory, ...]
    languages: Tuple[LanguageEntry, ...]
    internships: Tuple[ExperienceEntry, ...] = ()
    certificates: Tuple[Certificate, ...] = ()
    projects: Tuple[Project, ...] = ()
    volunteering: Tuple[Volunteering, ...] = ()
    references: Tuple[Reference, ...] = ()
    closing: Optional[Closing] = None
    language: Literal["en", "de"] = DEFAULT_LANGUAGE

    @property
    def vocabulary(self) -> Vocabulary:
        return get_vocabulary(self.language)

    @property
    def experience_bullets(self) -> Tuple[str, ...]:
        """Every experience bullet, in document order"""
        return tuple(b for exp in self.experience for b in exp.bullets)

    @property
    def skill_items(self) -> Tuple[SkillItem, ...]:
        return tuple(item for category in self.skills for item in category.items)


# ==============================================
# EVALUATION RESULT
# ==============================================

class SectionFeedback(ResultModel):
    section: str
    comments: List[str] = Field(default_factory=list)


class ImprovedBullet(ResultModel):
    section: str
    original: str
    suggestion: str
    rationale: str


class EvaluationResult(ResultModel):
    overall_score: int = Field(ge=0, le=100)
    ats_score: int = Field(ge=0, le=100)
    red_flags: List[str] = Field(default_factory=list)
    quick_wins: List[str] = Field(default_factory=list)
    section_feedback: List[SectionFeedback] = Field(default_factory=list)
    improved_bullets: List[ImprovedBullet] = Field(default_factory=list)
    keywords_to_add: List[str] = Field(default_factory=list, max_length=3)


class PartialEvaluation(ResultModel):
    """What an external enhancement provider may contribute; every field optional"""
    overall_score: Optional[int] = Field(default=None, ge=0, le=100)
    ats_score: Optional[int] = Field(default=None, ge=0, le=100)
    red_flags: Optional[List[str]] = None
    quick_wins: Optional[List[str]] = None
    section_feedback: Optional[List[SectionFeedback]] = None
    improved_bullets: Optional[List[ImprovedBullet]] = None
    keywords_to_add: Optional[List[str]] = None


class DimensionScores(ResultModel):
    structure: int
    content: int
    language: int
    ats: int
    compliance: int


class Deduction(ResultModel):
    dimension: str
    reason: str
    points: int


class Determinism(ResultModel):
    content_hash: str
    scoring_version: Dict[str, str]


class EvaluationReport(ResultModel):
    """Evaluation plus per-dimension diagnostics"""
    evaluation: EvaluationResult
    dimensions: DimensionScores
    weights: Dict[str, float]
    deductions: List[Deduction] = Field(default_factory=list)
    determinism: Determinism


class BulletValidation(ResultModel):
    valid: bool
    issues: List[str] = Field(default_factory=list)


# ==============================================
# INPUT BOUNDARY
# ==============================================

def _error_details(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]) or "<root>", "message": err["msg"]}
        for err in exc.errors()
    ]


def load_cv(payload: Any) -> CV:
    """
    Validate a raw CV document and apply optional-section defaults.
    Raises CVValidationError describing every schema violation.
    """
    if isinstance(payload, CV):
        return payload
    if not isinstance(payload, Mapping):
        raise CVValidationError(
            f"CV document must be a mapping, got {type(payload).__name__}",
            details=[{"field": "<root>", "message": "expected an object"}],
        )
    try:
        return CV.model_validate(dict(payload))
    except ValidationError as exc:
        raise CVValidationError("Invalid CV document", details=_error_details(exc)) from exc
