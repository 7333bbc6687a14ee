# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Email Backend API:
# - test_models.py: Application/Team validation and serialization
# - test_utils.py: Identifier, email pattern and time helpers
# - test_data_service.py: JSON file store
# - test_email_service.py: Notification composition and sinks
# - test_applications_api.py / test_teams_api.py: Endpoint integration tests
#
# Run tests with: poetry run pytest
# =============================================================================
