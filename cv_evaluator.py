# cv_evaluator.py
# Composes the five dimension scores and the advisory generators into one
# EvaluationResult, and merges that result with an optional external
# (e.g. AI-sourced) partial evaluation.
#
# Deterministic: the same document always yields the same result. Scores are
# combined in integer percent arithmetic so rounding never depends on float
# representation.

import hashlib
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

import advisory
from cv_models import (
    CV,
    Deduction,
    Determinism,
    DimensionScores,
    EvaluationReport,
    EvaluationResult,
    PartialEvaluation,
    load_cv,
)
from dimension_scorers import SCORERS

logger = logging.getLogger(__name__)

# =========================
# ===== VERSION STAMP =====
# =========================

VERSIONS = {
    "engine": "cv_eval_v1.0",
    "weights": "W_0.25_0.25_0.20_0.20_0.10",
    "vocabulary": "vocab_en_de_v1",
}
RULESET_HASH = "rsh_4c2e9"  # bump if you change rules materially

# Weights in percent, summing to 100
WEIGHTS = {"structure": 25, "content": 25, "language": 20, "ats": 20, "compliance": 10}

LIST_FIELDS = ("red_flags", "quick_wins", "section_feedback", "improved_bullets", "keywords_to_add")
LIST_STRATEGIES = ("override", "concatenate")

CVInput = Union[CV, Mapping[str, Any]]
EnhancementProvider = Callable[[CV], Union[PartialEvaluation, Mapping[str, Any], None]]


def version_block() -> Dict[str, str]:
    out = dict(VERSIONS)
    out["ruleset_hash"] = RULESET_HASH
    return out


def round_half_up(numerator: int, denominator: int) -> int:
    """Round a non-negative fraction to the nearest int, .5 going up."""
    return (2 * numerator + denominator) // (2 * denominator)


def content_hash(cv: CV) -> str:
    return hashlib.sha256(cv.model_dump_json(by_alias=True).encode("utf-8")).hexdigest()


# ==============================================
# COMPOSER
# ==============================================

def dimension_scores(cv: CV, log: Optional[list] = None) -> DimensionScores:
    """Run every scorer; all five are computed even though only two are public."""
    return DimensionScores(**{name: scorer(cv, log) for name, scorer in SCORERS})


def overall_score(dimensions: DimensionScores) -> int:
    weighted = sum(WEIGHTS[name] * getattr(dimensions, name) for name in WEIGHTS)
    return round_half_up(weighted, 100)


def _compose(cv: CV, log: Optional[list] = None) -> Tuple[EvaluationResult, DimensionScores]:
    dimensions = dimension_scores(cv, log)
    overall = overall_score(dimensions)
    logger.debug("CV dimension scores %s -> overall %d", dimensions.model_dump(), overall)

    result = EvaluationResult(
        overall_score=overall,
        ats_score=dimensions.ats,
        red_flags=advisory.red_flags(cv),
        quick_wins=advisory.quick_wins(cv),
        section_feedback=advisory.section_feedback(cv),
        improved_bullets=advisory.improved_bullets(cv),
        keywords_to_add=advisory.keywords_to_add(cv),
    )
    return result, dimensions


def evaluate_cv(cv: CVInput) -> EvaluationResult:
    """
    Evaluate a CV document.

    Args:
        cv: a CV model or a raw mapping (validated via load_cv)

    Returns:
        A fresh EvaluationResult

    Raises:
        CVValidationError: the document is structurally invalid
    """
    result, _ = _compose(load_cv(cv))
    return result


def evaluate_cv_detailed(cv: CVInput) -> EvaluationReport:
    """Evaluation plus dimension scores, weights, the deduction log and a content hash."""
    cv = load_cv(cv)
    log = []
    result, dimensions = _compose(cv, log)
    return EvaluationReport(
        evaluation=result,
        dimensions=dimensions,
        weights={name: weight / 100 for name, weight in WEIGHTS.items()},
        deductions=[Deduction(dimension=d, reason=r, points=p) for d, r, p in log],
        determinism=Determinism(content_hash=content_hash(cv), scoring_version=version_block()),
    )


# ==============================================
# ENHANCEMENT MERGE
# ==============================================

def _average(base: int, other: Optional[int]) -> int:
    return round_half_up(base + (base if other is None else other), 2)


def merge_evaluations(base: EvaluationResult,
                      enhancement: Union[PartialEvaluation, Mapping[str, Any]],
                      list_strategy: str = "override") -> EvaluationResult:
    """
    Blend the deterministic result with an external partial evaluation.

    overallScore and atsScore become the rounded mean of both sources (a
    missing enhancement score counts as the base score). List fields the
    enhancement supplies either replace the base list ("override") or are
    appended after it ("concatenate"). keywordsToAdd stays capped at 3.
    """
    if list_strategy not in LIST_STRATEGIES:
        raise ValueError(f"Unknown list strategy {list_strategy!r} (expected one of {', '.join(LIST_STRATEGIES)})")
    if not isinstance(enhancement, PartialEvaluation):
        enhancement = PartialEvaluation.model_validate(dict(enhancement))

    base_data = base.model_dump()
    extra = enhancement.model_dump(exclude_none=True)

    merged = {
        "overall_score": _average(base.overall_score, enhancement.overall_score),
        "ats_score": _average(base.ats_score, enhancement.ats_score),
    }
    for field in LIST_FIELDS:
        if field not in extra:
            merged[field] = base_data[field]
        elif list_strategy == "override":
            merged[field] = extra[field]
        else:
            merged[field] = base_data[field] + extra[field]
    merged["keywords_to_add"] = merged["keywords_to_add"][:advisory.MAX_KEYWORDS]

    return EvaluationResult.model_validate(merged)


def evaluate_with_enhancement(cv: CVInput,
                              provider: EnhancementProvider,
                              list_strategy: str = "override") -> EvaluationResult:
    """Deterministic evaluation merged with whatever `provider` returns for the same CV."""
    cv = load_cv(cv)
    base = evaluate_cv(cv)
    enhancement = provider(cv)
    if enhancement is None:
        logger.info("Enhancement provider returned nothing, keeping deterministic result")
        return base
    return merge_evaluations(base, enhancement, list_strategy)
