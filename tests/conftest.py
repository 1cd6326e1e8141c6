"""
Pytest configuration and fixtures for fieldcheck tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from fieldcheck.core.validators import CustomValidator, ValidatorRegistry, default_registry


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that drive a full Validation session"
    )


# =======================
# REGISTRY FIXTURES
# =======================

@pytest.fixture
def registry() -> ValidatorRegistry:
    """Fresh registry populated with the built-in validators"""
    return default_registry()


@pytest.fixture
def even_validator() -> CustomValidator:
    """Custom validator accepting even integers"""
    return CustomValidator(
        validates=lambda value, modifier: value != "" and int(value) % 2 == 0,
        error=lambda label, modifier: f"{label} must be even.",
        name="even",
    )


# =======================
# DATA FIXTURES
# =======================

@pytest.fixture
def sample_fields() -> dict:
    """A signup form with every field valid"""
    return {
        "email": "asko@bien.ee",
        "password": "correct-horse-battery",
        "starts_at": "2020-09-17 15:00:12",
    }


@pytest.fixture
def sample_rules() -> dict:
    """Rules matching sample_fields"""
    return {
        "email": "required|email",
        "password": "required|len:8",
        "starts_at": "date-format:Y-m-d H:i:s",
    }
