"""
Pytest fixtures for BioAge Calculator tests.
"""
import sys
import pytest
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ and the project root are on sys.path so tests can import
# the bioage package and the server.bioage_api service.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from bioage.scorer import (  # noqa: E402
    ActivityLevel,
    BioAgeInput,
    DietQuality,
    Sex,
    SleepQuality,
    StressLevel,
)


# ============================================================================
# Scorer Fixtures
# ============================================================================

# 45 year old male, healthy BMI, no optional measurements.
# Scores to bio age 40: sleep band -2, good sleep -1, BMI -1, good diet -1.
BASELINE_FIELDS = {
    "chronoAge": 45,
    "sex": "male",
    "height": 175,
    "weight": 70,
    "sleepHours": 7.5,
    "sleepQuality": "good",
    "hrv": 0,
    "vo2max": 0,
    "gripStrength": 0,
    "walkSpeed": 0,
    "activityLevel": "moderate",
    "stressLevel": "moderate",
    "dietQuality": "good",
}


@pytest.fixture
def baseline_input() -> BioAgeInput:
    """Domain input matching BASELINE_FIELDS."""
    return BioAgeInput(
        chrono_age=45,
        sex=Sex.MALE,
        height=175,
        weight=70,
        sleep_hours=7.5,
        sleep_quality=SleepQuality.GOOD,
        activity_level=ActivityLevel.MODERATE,
        stress_level=StressLevel.MODERATE,
        diet_quality=DietQuality.GOOD,
    )


@pytest.fixture
def baseline_fields() -> dict:
    """Camel-case form submission matching baseline_input."""
    return dict(BASELINE_FIELDS)


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def leads_db(tmp_path, monkeypatch):
    """
    Point the shared database manager at a temporary leads database.

    Returns the Settings in use so tests can open their own LeadStore.
    """
    from server.bioage_api.config import Settings
    from server.bioage_api.database import db_manager

    settings = Settings(data_path=str(tmp_path))
    monkeypatch.setattr(db_manager, "settings", settings)
    return settings


@pytest.fixture
def api_client():
    """
    Factory for an in-process HTTP client bound to the FastAPI app.

    Usage:
        async with api_client() as client:
            response = await client.get("/health")
    """
    import httpx
    from server.bioage_api.main import app

    def _client() -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://testserver",
        )

    return _client
