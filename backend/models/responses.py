from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReadinessLevel(str, Enum):
    BEGINNER = "Beginner"
    BUILDING = "Building"
    READY = "Ready"


class CategoryBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    weight: float
    weighted_score: float


class ReadinessResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Overall readiness score (0-100)", examples=[72])
    level: ReadinessLevel = Field(..., description="Readiness level category", examples=["Building"])
    recommendation: str = Field(
        ...,
        min_length=1,
        description="Personalized recommendation based on progress",
        examples=["You are strong in teamwork. Your next focus could be career skills to build a more balanced foundation."],
    )
    # Breakdown of scores by category, keyed by category name
    breakdown: dict[str, CategoryBreakdown]
