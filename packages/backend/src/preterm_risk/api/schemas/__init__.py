"""Public API schemas."""

from preterm_risk.api.schemas.assessment import (
    BatchAssessmentRequest,
    BatchAssessmentResponse,
    BatchAssessmentRow,
    BatchMetadata,
    DisplayBlock,
    HorizonItem,
    RecommendationItem,
    RiskAssessmentResponse,
    RiskInputPayload,
)
from preterm_risk.api.schemas.common import ErrorResponse, StatusResponse

__all__ = [
    "BatchAssessmentRequest",
    "BatchAssessmentResponse",
    "BatchAssessmentRow",
    "BatchMetadata",
    "DisplayBlock",
    "ErrorResponse",
    "HorizonItem",
    "RecommendationItem",
    "RiskAssessmentResponse",
    "RiskInputPayload",
    "StatusResponse",
]
