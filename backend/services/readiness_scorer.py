"""Readiness scorer: weighted score, level and recommendation.

Pure template engine, no model to load. Given the seven learner-progress
scores it produces:
    - per-category breakdown (score, weight, weighted_score)
    - overall score (rounded weighted sum, 0-100)
    - readiness level (Beginner / Building / Ready)
    - recommendation text from a fixed decision table
"""

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from models.requests import LearnerProgress
from models.responses import CategoryBreakdown, ReadinessLevel, ReadinessResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    name: str
    weight: float
    label: str


@dataclass(frozen=True)
class CategoryScore:
    name: str
    score: float
    label: str


# Table order is the tie-break order for strongest/weakest selection.
CATEGORIES: tuple[Category, ...] = (
    Category("academics", 0.25, "academics"),
    Category("career_skills", 0.20, "career skills"),
    Category("life_skills", 0.15, "life skills"),
    Category("technical_skills", 0.15, "technical skills"),
    Category("communication", 0.10, "communication"),
    Category("teamwork", 0.10, "teamwork"),
    Category("critical_thinking", 0.05, "critical thinking"),
)

# Level thresholds on the overall score
READY_THRESHOLD = 75
BUILDING_THRESHOLD = 50

# Per-category thresholds, used only to pick recommendation text
STRONG_THRESHOLD = 75
WEAK_THRESHOLD = 60


def verify_weights(categories: tuple[Category, ...] = CATEGORIES) -> None:
    """Check the weight table against the input model.

    Raises RuntimeError if the weights do not sum to 1.0 or the category
    names differ from the LearnerProgress fields.
    """
    total = math.fsum(c.weight for c in categories)
    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=1e-9):
        raise RuntimeError(f"Category weights must sum to 1.0, got {total}")

    names = [c.name for c in categories]
    if len(set(names)) != len(names):
        raise RuntimeError(f"Duplicate category names in weight table: {names}")

    expected = set(LearnerProgress.model_fields)
    if set(names) != expected:
        raise RuntimeError(
            f"Weight table categories {sorted(names)} do not match "
            f"LearnerProgress fields {sorted(expected)}"
        )


verify_weights()


def compute_readiness(progress: LearnerProgress) -> ReadinessResponse:
    """Score a learner's progress and attach a recommendation."""
    breakdown = build_breakdown(progress)
    score = _round_half_up(_exact_total(progress))
    level = determine_level(score)
    recommendation = build_recommendation(_category_scores(progress), level)

    logger.debug("Readiness computed: score=%d level=%s", score, level.value)

    return ReadinessResponse(
        score=score,
        level=level,
        recommendation=recommendation,
        breakdown=breakdown,
    )


def build_breakdown(progress: LearnerProgress) -> dict[str, CategoryBreakdown]:
    """Weighted contribution of every category, in table order."""
    breakdown: dict[str, CategoryBreakdown] = {}
    for category in CATEGORIES:
        score = getattr(progress, category.name)
        breakdown[category.name] = CategoryBreakdown(
            score=score,
            weight=category.weight,
            weighted_score=score * category.weight,
        )
    return breakdown


def determine_level(score: int) -> ReadinessLevel:
    """Map an overall score to its readiness level."""
    if score >= READY_THRESHOLD:
        return ReadinessLevel.READY
    elif score >= BUILDING_THRESHOLD:
        return ReadinessLevel.BUILDING
    else:
        return ReadinessLevel.BEGINNER


def rank_categories(
    categories: list[CategoryScore],
) -> tuple[CategoryScore, CategoryScore, list[CategoryScore]]:
    """Return (strongest, weakest, weakest_two).

    Ties go to the category that comes first in table order.
    """
    strongest = categories[0]
    weakest = categories[0]
    for cat in categories[1:]:
        if cat.score > strongest.score:
            strongest = cat
        if cat.score < weakest.score:
            weakest = cat

    # sorted() is stable, so equal scores keep table order
    weakest_two = sorted(categories, key=lambda c: c.score)[:2]
    return strongest, weakest, weakest_two


# ---------------------------------------------------------------------------
# Recommendation templates
# ---------------------------------------------------------------------------

def build_recommendation(categories: list[CategoryScore], level: ReadinessLevel) -> str:
    """Pick the recommendation text for a level and set of category scores."""
    strongest, weakest, weakest_two = rank_categories(categories)
    weak_count = sum(1 for cat in categories if cat.score < WEAK_THRESHOLD)

    if level == ReadinessLevel.READY:
        return _ready_recommendation(categories, weakest)
    elif level == ReadinessLevel.BUILDING:
        return _building_recommendation(strongest, weakest, weakest_two, weak_count)
    else:
        return _beginner_recommendation(weakest_two, weak_count)


def _ready_recommendation(categories: list[CategoryScore], weakest: CategoryScore) -> str:
    if all(cat.score >= STRONG_THRESHOLD for cat in categories):
        return (
            "Excellent work! You are ready across all areas. "
            "Consider taking on advanced challenges or mentoring others."
        )
    return (
        f"You are ready overall! To reach excellence, consider strengthening "
        f"your {weakest.label} (currently at {_format_score(weakest.score)})."
    )


def _building_recommendation(
    strongest: CategoryScore,
    weakest: CategoryScore,
    weakest_two: list[CategoryScore],
    weak_count: int,
) -> str:
    if strongest.score < STRONG_THRESHOLD:
        return (
            f"You are building across several areas. Keep engaging with "
            f"{weakest.label} modules to strengthen your foundation."
        )
    if weak_count >= 2:
        return (
            f"You are strong in {strongest.label}. Focus on {weakest_two[0].label} "
            f"and {weakest_two[1].label} to build a more balanced foundation."
        )
    return (
        f"You are strong in {strongest.label}. Your next focus could be "
        f"{weakest.label} to build a more balanced foundation."
    )


def _beginner_recommendation(weakest_two: list[CategoryScore], weak_count: int) -> str:
    if weak_count >= 2:
        return (
            f"You're just getting started! Focus on building foundational skills in "
            f"{weakest_two[0].label} and {weakest_two[1].label} to accelerate your progress."
        )
    return (
        "You're on your learning journey! Consistent engagement across all "
        "areas will help you build momentum."
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _category_scores(progress: LearnerProgress) -> list[CategoryScore]:
    return [
        CategoryScore(c.name, getattr(progress, c.name), c.label)
        for c in CATEGORIES
    ]


def _exact_total(progress: LearnerProgress) -> Decimal:
    # Decimal products avoid float drift, so x.5 totals stay exactly x.5
    return sum(
        (Decimal(str(getattr(progress, c.name))) * Decimal(str(c.weight)) for c in CATEGORIES),
        Decimal(0),
    )


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _format_score(score: float) -> str:
    if float(score).is_integer():
        return str(int(score))
    return f"{score:g}"
