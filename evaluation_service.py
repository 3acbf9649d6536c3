# evaluation_service.py
# HTTP adapter for the CV evaluation engine.
#
# Run:
#   pip install -e .
#   uvicorn evaluation_service:app --reload
#
# Endpoints:
#   POST /evaluate           (CV document -> evaluation, ?verbose=true for diagnostics)
#   POST /evaluate/merge     (CV + external partial evaluation -> merged evaluation)
#   POST /validate/bullet
#   POST /validate/date

import logging
import os
from typing import Any, Dict, Literal

from fastapi import Body, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.middleware.base import BaseHTTPMiddleware

from cv_evaluator import VERSIONS, evaluate_cv, evaluate_cv_detailed, merge_evaluations, version_block
from cv_models import BulletValidation, EvaluationResult, PartialEvaluation
from cv_validators import is_valid_date_format, validate_bullet_point
from cv_vocabulary import DEFAULT_LANGUAGE
from errors import CVValidationError

logger = logging.getLogger(__name__)

# The key is read from the environment; an empty key disables the check
API_KEY = os.getenv("CV_EVAL_API_KEY", "")
LOG_LEVEL = os.getenv("CV_EVAL_LOG_LEVEL", "INFO")

PUBLIC_PATHS = ("/health", "/docs", "/openapi.json", "/redoc")

app = FastAPI(
    title="CV Evaluation Engine",
    version=VERSIONS["engine"],
    description="Deterministic rule-based CV scoring with red flags, quick wins and section feedback",
)


class APIKeyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        # Allow docs, health and the OpenAPI schema without a key
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)
        if API_KEY and request.headers.get("x-api-key") != API_KEY:
            logger.warning("Rejected %s %s: invalid or missing API key", request.method, request.url.path)
            return JSONResponse({"detail": "Unauthorized"}, status_code=401)
        return await call_next(request)


app.add_middleware(APIKeyMiddleware)


@app.exception_handler(CVValidationError)
async def cv_validation_error_handler(request: Request, exc: CVValidationError):
    logger.info("Invalid CV document on %s: %d problem(s)", request.url.path, len(exc.details))
    return JSONResponse(exc.to_dict(), status_code=400)


# ----- Request models -----

class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MergeRequest(RequestModel):
    cv: Dict[str, Any]
    enhancement: PartialEvaluation
    list_strategy: Literal["override", "concatenate"] = "override"


class BulletRequest(RequestModel):
    bullet: str
    language: Literal["en", "de"] = DEFAULT_LANGUAGE


class DateRequest(RequestModel):
    date: str


class DateValidation(RequestModel):
    date: str
    valid: bool


# ----- Endpoints -----

@app.get("/")
def root():
    return {
        "service": "CV Evaluation Engine",
        "version": VERSIONS["engine"],
        "description": "Deterministic rule-based CV scoring",
        "features": [
            "Five-dimension scoring (structure, content, language, ATS, compliance)",
            "Red flags, quick wins and section feedback",
            "Merging with external partial evaluations",
            "Bullet point and date format validation",
        ],
        "scoring_version": version_block(),
    }


@app.get("/health")
def health():
    return {"status": "ok", "version": VERSIONS["engine"]}


@app.post("/evaluate")
def evaluate(cv: Dict[str, Any] = Body(...), verbose: bool = Query(False)):
    """Score a CV. With verbose=true the response is the full diagnostic report."""
    if verbose:
        report = evaluate_cv_detailed(cv)
        logger.info("Evaluated CV (verbose): overall=%d ats=%d",
                    report.evaluation.overall_score, report.evaluation.ats_score)
        return JSONResponse(report.to_dict())

    result = evaluate_cv(cv)
    logger.info("Evaluated CV: overall=%d ats=%d", result.overall_score, result.ats_score)
    return JSONResponse(result.to_dict())


@app.post("/evaluate/merge", response_model=EvaluationResult)
def evaluate_merge(req: MergeRequest):
    """Merge the deterministic evaluation with a partial evaluation from an external provider."""
    base = evaluate_cv(req.cv)
    return merge_evaluations(base, req.enhancement, req.list_strategy)


@app.post("/validate/bullet", response_model=BulletValidation)
def validate_bullet(req: BulletRequest):
    return validate_bullet_point(req.bullet, req.language)


@app.post("/validate/date", response_model=DateValidation)
def validate_date(req: DateRequest):
    return DateValidation(date=req.date, valid=is_valid_date_format(req.date))


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
