"""
Pytest configuration and shared fixtures for the elder-care planner tests.
"""

import os
from unittest.mock import patch

import pytest

from eldercare_planner.config import reset_global_settings
from eldercare_planner.models.scenario import PlannerConfig, create_default_config


@pytest.fixture
def default_config() -> PlannerConfig:
    """The default planning configuration."""
    return create_default_config()


@pytest.fixture
def app():
    """Create a Flask app configured for testing."""
    from eldercare_planner import create_app

    reset_global_settings()
    with patch.dict(os.environ, {"APP_ENV": "testing"}, clear=True):
        application = create_app()
    yield application
    reset_global_settings()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
