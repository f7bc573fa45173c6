"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides environment mappings and an isolated process environment for all tests
"""

import os
from unittest.mock import patch

import pytest


@pytest.fixture
def test_env_vars():
    """Provide a fully configured environment."""
    return {
        "NEXT_PUBLIC_SUPABASE_URL": "https://abcd1234.supabase.co",
        "NEXT_PUBLIC_SUPABASE_ANON_KEY": "anon-key-value",
        "SUPABASE_SERVICE_ROLE_KEY": "service-role-value",
        "NEXT_PUBLIC_SITE_URL": "https://example.org",
        "NODE_ENV": "development",
    }


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Replace the process environment with the test variables only."""
    with patch.dict(os.environ, test_env_vars, clear=True):
        yield test_env_vars


@pytest.fixture
def empty_env():
    """Run with an empty process environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty temporary directory so no dotenv files are picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
