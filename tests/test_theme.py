"""
Tests for the light/dark theme preference.
"""

from __future__ import annotations

from fastapi import Response

from app.application.utils.theme import get_preferred_theme, prefers_dark_scheme, set_preference, toggle
from app.domain.entities.theme import Theme


def test_saved_preference_wins_over_system():
    assert get_preferred_theme("dark", prefers_dark=False) is Theme.dark
    assert get_preferred_theme("light", prefers_dark=True) is Theme.light


def test_system_preference_used_without_saved_choice():
    assert get_preferred_theme(None, prefers_dark=True) is Theme.dark
    assert get_preferred_theme(None, prefers_dark=False) is Theme.light
    assert get_preferred_theme("", prefers_dark=True) is Theme.dark


def test_unrecognized_saved_value_means_light():
    """Test that any saved value other than dark selects the light theme."""
    assert get_preferred_theme("purple", prefers_dark=True) is Theme.light


def test_client_hint_parsing():
    assert prefers_dark_scheme('"dark"') is True
    assert prefers_dark_scheme("light") is False
    assert prefers_dark_scheme(None) is False


def test_toggle_flips_theme():
    assert toggle(Theme.dark) is Theme.light
    assert toggle(Theme.light) is Theme.dark


def test_set_preference_writes_cookie():
    response = Response()
    set_preference(response, Theme.dark)

    assert "theme=dark" in response.headers["set-cookie"]
