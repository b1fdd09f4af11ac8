# This project was developed with assistance from AI tools.
"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from loanmatch.core.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.APP_NAME == "loanmatch"
    assert s.OFFER_AMOUNT_CEILING == 1.5
    assert s.BUNDLE_AMOUNT_CEILING == 2.0
    assert s.SEED_DEMO_DATA is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("OFFER_AMOUNT_CEILING", "2.5")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    s = Settings(_env_file=None)
    assert s.OFFER_AMOUNT_CEILING == 2.5
    assert s.SEED_DEMO_DATA is False


def test_ceiling_must_be_positive(monkeypatch):
    monkeypatch.setenv("OFFER_AMOUNT_CEILING", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
