# tests/test_config.py
from __future__ import annotations

import pytest

from config import Settings, parse_leading_int


@pytest.mark.parametrize(
    "value, expected",
    [
        ("5000", 5000),
        (" 42", 42),
        ("12abc", 12),
        ("-3", -3),
        (7, 7),
        ("unknown", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value) == expected


def test_defaults(settings):
    assert settings.debug is True
    assert settings.timeout_ms == 5000
    assert settings.timeout_seconds == 5.0
    assert settings.port == 3000


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    assert Settings().port == 8081


def test_cli_flags(settings):
    settings.apply_cli_args(["--no-debug", "--timeout", "250"])

    assert settings.debug is False
    assert settings.timeout_ms == 250
    assert settings.timeout_seconds == 0.25


def test_non_numeric_timeout_disables_it(settings, caplog):
    settings.apply_cli_args(["--timeout", "soon"])

    assert settings.timeout_ms is None
    assert settings.timeout_seconds is None
    assert "timeout disabled" in caplog.text


def test_trailing_timeout_flag_and_unknown_args_are_ignored(settings):
    settings.apply_cli_args(["--verbose", "--timeout"])

    assert settings.debug is True
    assert settings.timeout_ms == 5000


def test_zero_timeout_means_no_timeout(settings):
    settings.apply_cli_args(["--timeout", "0"])

    assert settings.timeout_ms == 0
    assert settings.timeout_seconds is None


def test_timeout_takes_next_token_even_if_it_is_a_flag(settings):
    settings.apply_cli_args(["--timeout", "--no-debug"])

    assert settings.timeout_ms is None
    assert settings.timeout_seconds is None
    assert settings.debug is False


def test_non_positive_timeout_warning_names_the_value(settings, caplog):
    settings.apply_cli_args(["--timeout", "-5"])

    assert settings.timeout_seconds is None
    assert "Non-positive --timeout -5: request timeout disabled" in caplog.text
    assert "Non-numeric" not in caplog.text
