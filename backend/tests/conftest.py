"""Shared test configuration and fixtures."""

import os

# Must be set before the app (and its settings) are imported by test modules
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture
def sample_progress() -> dict:
    return {
        "academics": 80,
        "career_skills": 60,
        "life_skills": 70,
        "technical_skills": 75,
        "communication": 65,
        "teamwork": 85,
        "critical_thinking": 70,
    }
