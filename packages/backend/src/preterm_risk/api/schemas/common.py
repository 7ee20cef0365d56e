"""Common API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class APIBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class StatusResponse(APIBaseModel):
    status: str = Field(..., description="Status indicator")
    service: str = Field(..., description="Service name")
    timestamp: datetime = Field(..., description="Server time in UTC")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    base_risk: float = Field(..., gt=0, description="Base risk of the scoring model")
    elevated_thresholds_pct: List[float] = Field(
        ..., description="One-week and two-week percentages that open the elevated panel"
    )


class ErrorResponse(APIBaseModel):
    detail: str
    error_code: Optional[str] = None
