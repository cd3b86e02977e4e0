"""Shared fixtures for the stepwise test suite."""

import os

import pytest

from stepwise import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test default settings, independent of the host environment."""
    for key in list(os.environ):
        if key.startswith("STEPWISE_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
