"""
CV Evaluation Errors
Exceptions raised at the engine boundary
"""

from typing import Any, Dict, List, Optional


class CVEvaluationError(ValueError):
    """Base class for every error the evaluation engine raises"""


class CVValidationError(CVEvaluationError):
    """
    The supplied CV document is structurally invalid.
    `details` lists one {field, message} entry per problem found.
    """

    def __init__(self, message: str = "Invalid CV document",
                 details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "Validation failed", "message": self.message, "details": self.details}
