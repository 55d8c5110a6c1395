"""Tests for application start-up settings."""

import logging

import pytest

from tictactoe.app import resolve_log_level


@pytest.mark.parametrize("name, level", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    (" error ", logging.ERROR),
])
def test_known_log_levels(name, level):
    assert resolve_log_level(name) == level


@pytest.mark.parametrize("name", ["verbose", "", None, "Level 5"])
def test_unknown_log_level_falls_back_to_warning(name):
    assert resolve_log_level(name) == logging.WARNING


def test_resolved_level_is_always_numeric():
    # basicConfig rejects unknown level names
    assert isinstance(resolve_log_level("verbose"), int)
