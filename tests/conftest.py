"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared fixtures for the unit tests.
"""
import textwrap
from pathlib import Path

import pytest


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# PARAMS FIXTURES
# =======================

@pytest.fixture
def signup_params() -> dict:
    """
    Params of a valid signup form

    Returns:
        Mapping of field name to submitted value
    """
    return {
        "login": "jdoe",
        "email": "jdoe@example.com",
        "password": "s3cret-pass",
        "password_confirmation": "s3cret-pass",
        "zip_code": "94110",
        "honeypot": "",
    }


@pytest.fixture
def rules_yaml(tmp_path) -> Path:
    """
    YAML rule file for the signup form

    Returns:
        Path to the written rule file
    """
    path = tmp_path / "signup_rules.yaml"
    path.write_text(textwrap.dedent("""
        rules:
          login:
            - type: present
              message: Login is required
          password:
            - type: length
              qualifier:
                min: 8
                max: 64
            - type: confirmed
              qualifier: password_confirmation
          zip_code:
            - type: format
              qualifier: "^[0-9]{5}$"
          honeypot:
            - type: absent
              name: no_bots
    """))
    return path
