from fastapi import APIRouter, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import LearnerProgress
from models.responses import ReadinessResponse
from services import readiness_scorer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post(
    "/api/readiness/calculate",
    response_model=ReadinessResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["readiness"],
    summary="Calculate readiness score",
    description=(
        "Accepts learner progress data and returns an overall readiness score "
        "with personalized recommendations"
    ),
    responses={
        400: {"description": "Invalid input data"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(settings.rate_limit)
def calculate_readiness(request: Request, body: LearnerProgress):
    return readiness_scorer.compute_readiness(body)
