# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds services against a temporary data directory
# - Provides a TestClient wired to those services
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("APP_NAME", "Test Hiring System")
# Tests never talk to a real SMTP server
for _key in ("EMAIL_HOST", "EMAIL_USER", "EMAIL_PASS"):
    os.environ.pop(_key, None)

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_data_service, get_email_service
from app.main import app
from core.services.data_service import DataService
from core.services.email_service import EmailService
from lib.email_transport import ConsoleSink


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def data_dir(tmp_path):
    """Empty directory for the JSON collection files."""
    return tmp_path / "data"


@pytest.fixture
def data_service(data_dir):
    """DataService seeded with the default teams."""
    return DataService(data_dir)


@pytest.fixture
def engineering_only_service(data_dir):
    """DataService whose teams file holds only Engineering."""
    data_dir.mkdir(parents=True)
    (data_dir / "teams.json").write_text(json.dumps([
        {
            "id": "engineering",
            "name": "Engineering",
            "description": "Software development and technical roles",
            "executives": ["cto@company.com"],
            "projectLeads": ["eng-lead@company.com"],
            "createdAt": "2024-01-15T10:00:00Z",
        }
    ]))
    return DataService(data_dir)


@pytest.fixture
def email_service():
    """EmailService that logs instead of sending."""
    return EmailService(
        sink=ConsoleSink(),
        from_address="hiring@company.com",
        app_name="Test Hiring System",
    )


@pytest.fixture
def client(data_service, email_service):
    """TestClient using the fixture services instead of the lifespan ones."""
    app.dependency_overrides[get_data_service] = lambda: data_service
    app.dependency_overrides[get_email_service] = lambda: email_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_application_payload():
    """A complete, valid submission body."""
    return {
        "applicantName": "Sarah Chen",
        "applicantEmail": "sarah.chen@example.com",
        "position": "Senior Full Stack Developer",
        "team": "Engineering",
        "resumeUrl": "https://example.com/sarah-resume.pdf",
        "coverLetter": "I have 6 years of experience in React, Node.js, and cloud technologies.",
    }


@pytest.fixture
def sample_team_payload():
    """A complete, valid team body."""
    return {
        "name": "Design",
        "description": "UX and visual design roles",
        "executives": ["cdo@company.com"],
        "projectLeads": ["design-lead@company.com"],
    }
