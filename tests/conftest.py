"""Pytest fixtures for eitherio tests."""

from __future__ import annotations

import pytest

from helpers import Calls


@pytest.fixture
def calls() -> Calls:
    return Calls()
