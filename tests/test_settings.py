"""Tests for rps_game.settings"""
import pytest

from rps_game import settings


def test_defaults_when_unset(env_settings):
    env_settings(RPS_SEED=None, RPS_LOG_LEVEL=None)
    assert settings.SEED == ""
    assert settings.parse_seed(settings.SEED) is None
    assert settings.LOG_LEVEL == "WARNING"


def test_log_level_is_upper_cased(env_settings):
    env_settings(RPS_LOG_LEVEL=" debug ")
    assert settings.LOG_LEVEL == "DEBUG"


def test_seed_read_from_env(env_settings):
    env_settings(RPS_SEED="42")
    assert settings.parse_seed(settings.SEED) == 42


def test_bad_values_do_not_break_import(env_settings):
    env_settings(RPS_SEED="abc", RPS_LOG_LEVEL="loud")
    assert settings.SEED == "abc"
    assert settings.LOG_LEVEL == "LOUD"


@pytest.mark.parametrize("raw, expected", [(None, None), ("", None), ("0", 0), ("-3", -3), ("17", 17)])
def test_parse_seed(raw, expected):
    assert settings.parse_seed(raw) == expected


def test_parse_seed_rejects_text():
    with pytest.raises(ValueError):
        settings.parse_seed("abc")
