import pytest

from ridematch.application.config import ConfigError, env_int, env_positive_float


def test_unset_or_blank_values_mean_default(monkeypatch):
    monkeypatch.delenv("CARPOOL_MAX_SWAP_PASSES", raising=False)
    monkeypatch.setenv("CARPOOL_SWAP_TIME_BUDGET_S", "  ")
    assert env_int("CARPOOL_MAX_SWAP_PASSES", minimum=1) is None
    assert env_positive_float("CARPOOL_SWAP_TIME_BUDGET_S") is None


def test_valid_values_are_parsed(monkeypatch):
    monkeypatch.setenv("CARPOOL_MAX_SWAP_PASSES", "50")
    monkeypatch.setenv("CARPOOL_FETCH_TIMEOUT_S", "2.5")
    assert env_int("CARPOOL_MAX_SWAP_PASSES", minimum=1) == 50
    assert env_positive_float("CARPOOL_FETCH_TIMEOUT_S") == 2.5


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "1.5"])
def test_bad_pass_limit_names_the_variable(monkeypatch, raw):
    monkeypatch.setenv("CARPOOL_MAX_SWAP_PASSES", raw)
    with pytest.raises(ConfigError, match="CARPOOL_MAX_SWAP_PASSES"):
        env_int("CARPOOL_MAX_SWAP_PASSES", minimum=1)


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "nan", "inf"])
def test_bad_seconds_name_the_variable(monkeypatch, raw):
    monkeypatch.setenv("CARPOOL_FETCH_TIMEOUT_S", raw)
    with pytest.raises(ConfigError, match="CARPOOL_FETCH_TIMEOUT_S"):
        env_positive_float("CARPOOL_FETCH_TIMEOUT_S")
