"""Tests for helper utilities and parameter classes."""

import dataclasses
import logging

import numpy as np
import pytest

from option_pricers.enums import ExerciseType
from option_pricers.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    InvalidSampleCountError,
    OptionPricingError,
    ValidationError,
)
from option_pricers.pricing import BinomialParams, MonteCarloParams, binomial_price
from option_pricers.utils import (
    as_output,
    forward_price,
    log_timing,
    put_call_parity_gap,
    put_call_parity_rhs,
    validate_sample_count,
)


def test_forward_price_continuous_dividend_yield():
    fwd = forward_price(spot=100.0, risk_free_rate=0.05, time_to_maturity=2.0, dividend_yield=0.02)
    assert np.isclose(fwd, 100.0 * np.exp(0.03 * 2.0))


def test_put_call_parity_rhs_and_gap():
    rhs = put_call_parity_rhs(spot=100.0, strike=100.0, risk_free_rate=0.05, time_to_maturity=1.0)
    assert np.isclose(rhs, 100.0 - 100.0 * np.exp(-0.05))

    call_price = 10.0
    put_price = call_price - rhs
    gap = put_call_parity_gap(
        call_price=call_price,
        put_price=put_price,
        spot=100.0,
        strike=100.0,
        risk_free_rate=0.05,
        time_to_maturity=1.0,
    )
    assert np.isclose(gap, 0.0)


def test_parity_helpers_vectorize():
    spots = np.array([90.0, 100.0])
    rhs = put_call_parity_rhs(spot=spots, strike=100.0, risk_free_rate=0.0, time_to_maturity=1.0)
    np.testing.assert_allclose(rhs, [-10.0, 0.0])


def test_parity_rhs_accepts_sequence_rates_and_maturities():
    rhs = put_call_parity_rhs(
        spot=[1.0, 2.0],
        strike=1.0,
        risk_free_rate=[0.05, 0.05],
        time_to_maturity=[1.0, 2.0],
    )
    expected = np.array([1.0, 2.0]) - np.exp(-0.05 * np.array([1.0, 2.0]))
    np.testing.assert_allclose(rhs, expected)


def test_as_output():
    assert isinstance(as_output(np.float64(1.5)), float)
    assert isinstance(as_output(np.array([1.0, 2.0])), np.ndarray)


def test_validate_sample_count():
    assert validate_sample_count("n", np.int32(7)) == 7
    with pytest.raises(InvalidSampleCountError):
        validate_sample_count("n", 0)


def test_exception_hierarchy():
    assert issubclass(InvalidParameterError, ValidationError)
    assert issubclass(InvalidSampleCountError, ValidationError)
    assert issubclass(ValidationError, OptionPricingError)
    assert issubclass(ConfigurationError, OptionPricingError)


def test_log_timing_enabled(caplog):
    logger = logging.getLogger("option_pricers.tests.timing")
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with log_timing(logger, "block", True):
            pass
        with log_timing(logger, "silent", False):
            pass
    messages = [rec.getMessage() for rec in caplog.records]
    assert len(messages) == 1
    assert messages[0].startswith("Timing block:")


class TestBinomialParams:
    def test_defaults(self):
        params = BinomialParams()
        assert params.num_steps == 500
        assert params.exercise_type is ExerciseType.EUROPEAN

    @pytest.mark.parametrize("num_steps", [0, -3, 10.0])
    def test_invalid_num_steps(self, num_steps):
        with pytest.raises(InvalidSampleCountError):
            BinomialParams(num_steps=num_steps)

    def test_exercise_type_must_be_enum(self):
        with pytest.raises(ConfigurationError):
            BinomialParams(exercise_type="american")

    def test_frozen(self):
        params = BinomialParams()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.num_steps = 10

    def test_as_kwargs_round_trip(self, market):
        params = BinomialParams(num_steps=64, exercise_type=ExerciseType.AMERICAN)
        assert binomial_price(**market, **params.as_kwargs()) == binomial_price(
            **market, num_steps=64, exercise_type=ExerciseType.AMERICAN
        )


class TestMonteCarloParams:
    def test_defaults(self):
        params = MonteCarloParams()
        assert params.num_paths == 100_000
        assert params.random_seed is None

    def test_invalid_num_paths(self):
        with pytest.raises(InvalidSampleCountError):
            MonteCarloParams(num_paths=0)

    def test_invalid_warn_ratio(self):
        with pytest.raises(ValidationError):
            MonteCarloParams(std_error_warn_ratio=0.0)
