"""
Pytest configuration and shared fixtures for the EuroStudy estimator tests.
"""

import os
from unittest.mock import patch

import pytest

from eurostudy import create_app
from eurostudy.config import Settings, reset_global_settings
from eurostudy.models.country_catalog import create_reference_data
from eurostudy.models.merge_resolver import DataMergeResolver
from eurostudy.models.metrics import MetricsCalculator
from eurostudy.models.study_config import UserConfig
from eurostudy.services.estimate_service import EstimateService


@pytest.fixture
def settings():
    """Create settings from a clean test environment."""
    reset_global_settings()
    with patch.dict(
        os.environ,
        {"SECRET_KEY": "test-secret-key-123", "APP_ENV": "testing"},
        clear=True,
    ):
        yield Settings(_env_file=None)
    reset_global_settings()


@pytest.fixture
def app(settings):
    """Create a Flask app configured for testing."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def reference_data():
    """Create a fresh reference data store from the bundled catalog."""
    return create_reference_data()


@pytest.fixture
def resolver(reference_data):
    """Create a merge resolver with default rules."""
    return DataMergeResolver(reference_data)


@pytest.fixture
def calculator():
    """Create a metrics calculator with default thresholds."""
    return MetricsCalculator()


@pytest.fixture
def service(reference_data):
    """Create an estimate service over the bundled catalog."""
    return EstimateService(reference_data=reference_data)


@pytest.fixture
def germany_config():
    """Non-EU undergraduate in a mid-sized German city, not working."""
    return UserConfig(
        country="Germany",
        student_origin="Non-EU",
        course_level="Undergraduate",
        duration_years=3,
        city_tier="Mid-sized",
        target_currency="EUR",
        work_hours_per_week=0,
        hourly_wage=13.5,
        holiday_work_weeks=0,
    )


@pytest.fixture
def france_working_config():
    """EU undergraduate in France working term-time and holidays."""
    return UserConfig(
        country="France",
        student_origin="EU",
        course_level="Undergraduate",
        duration_years=3,
        city_tier="Mid-sized",
        target_currency="EUR",
        work_hours_per_week=20,
        hourly_wage=12,
        holiday_work_weeks=10,
    )
