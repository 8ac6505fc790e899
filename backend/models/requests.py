from pydantic import BaseModel, ConfigDict, Field

_SCORE = dict(ge=0, le=100, allow_inf_nan=False)


class LearnerProgress(BaseModel):
    """Learner progress across the seven readiness categories (0-100 each)."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    academics: float = Field(..., **_SCORE, description="Academic performance score", examples=[80])
    career_skills: float = Field(..., **_SCORE, description="Career skills proficiency score", examples=[60])
    life_skills: float = Field(..., **_SCORE, description="Life skills competency score", examples=[70])
    technical_skills: float = Field(..., **_SCORE, description="Technical and digital literacy score", examples=[75])
    communication: float = Field(..., **_SCORE, description="Communication and presentation skills score", examples=[65])
    teamwork: float = Field(..., **_SCORE, description="Teamwork and collaboration score", examples=[85])
    critical_thinking: float = Field(..., **_SCORE, description="Critical thinking and problem-solving score", examples=[70])
