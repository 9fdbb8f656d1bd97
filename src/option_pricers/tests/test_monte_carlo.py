"""Tests for the Monte Carlo European pricer."""

import logging

import numpy as np
import pytest

from option_pricers.enums import OptionType
from option_pricers.exceptions import InvalidParameterError, InvalidSampleCountError
from option_pricers.pricing import (
    MonteCarloEstimate,
    MonteCarloParams,
    bsm_price,
    monte_carlo_estimate,
    monte_carlo_price,
)


class TestMonteCarloValuation:
    @pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
    def test_converges_to_bsm(self, market, option_type):
        mc = monte_carlo_price(
            **market, num_paths=1_000_000, option_type=option_type, random_seed=42
        )
        closed = bsm_price(**market, option_type=option_type)
        assert abs(mc - closed) / closed < 1e-2

    def test_blog_example(self, blog_market):
        mc = monte_carlo_price(**blog_market, num_paths=1_000_000, random_seed=2024)
        closed = bsm_price(**blog_market)
        assert abs(mc - closed) / closed < 1e-2

    def test_with_dividend_yield(self, market):
        with_div = {**market, "dividend_yield": 0.04}
        est = monte_carlo_estimate(**with_div, num_paths=500_000, random_seed=11)
        closed = bsm_price(**with_div)
        assert abs(est.price - closed) < 4 * est.std_error

    def test_seed_is_deterministic(self, market):
        a = monte_carlo_price(**market, num_paths=10_000, random_seed=123)
        b = monte_carlo_price(**market, num_paths=10_000, random_seed=123)
        c = monte_carlo_price(**market, num_paths=10_000, random_seed=124)
        assert a == b
        assert a != c

    def test_estimate_fields(self, market):
        est = monte_carlo_estimate(**market, num_paths=50_000, random_seed=5)
        assert isinstance(est, MonteCarloEstimate)
        assert est.num_paths == 50_000
        assert est.price > 0
        # payoff std of an ATM call is ~14.7, so std error ~ 14.7 / sqrt(50_000)
        assert 0.03 < est.std_error < 0.1
        assert est.price == monte_carlo_price(**market, num_paths=50_000, random_seed=5)

    def test_std_error_shrinks_with_paths(self, market):
        small = monte_carlo_estimate(**market, num_paths=10_000, random_seed=1)
        large = monte_carlo_estimate(**market, num_paths=1_000_000, random_seed=1)
        assert large.std_error < small.std_error / 5

    def test_single_path_has_undefined_std_error(self, market):
        est = monte_carlo_estimate(**market, num_paths=1, random_seed=0)
        assert np.isnan(est.std_error)

    def test_sweep_reuses_draws(self, market):
        spots = np.linspace(80.0, 120.0, 5)
        prices = monte_carlo_price(
            **{**market, "spot": spots}, num_paths=20_000, random_seed=9
        )
        assert isinstance(prices, np.ndarray)
        assert prices.shape == (5,)
        # common random numbers make the call estimate monotone in spot
        assert np.all(np.diff(prices) > 0)
        single = monte_carlo_price(
            **{**market, "spot": float(spots[2])}, num_paths=20_000, random_seed=9
        )
        assert np.isclose(prices[2], single)

    def test_params_unpack_into_pricer(self, market):
        params = MonteCarloParams(num_paths=5_000, random_seed=3)
        assert monte_carlo_price(**market, **params.as_kwargs()) == monte_carlo_price(
            **market, num_paths=5_000, random_seed=3
        )

    def test_high_std_error_logs_warning(self, market, caplog):
        with caplog.at_level(logging.WARNING, logger="option_pricers.pricing.monte_carlo"):
            monte_carlo_price(
                **market, num_paths=1_000, random_seed=0, std_error_warn_ratio=1e-6
            )
        assert any("standard error high" in rec.getMessage() for rec in caplog.records)

    def test_no_warning_below_ratio(self, market, caplog):
        with caplog.at_level(logging.WARNING, logger="option_pricers.pricing.monte_carlo"):
            monte_carlo_price(**market, num_paths=1_000, random_seed=0, std_error_warn_ratio=10.0)
        assert not caplog.records


class TestMonteCarloValidation:
    @pytest.mark.parametrize("num_paths", [0, -1, 1e6, None])
    def test_invalid_path_count(self, market, num_paths):
        with pytest.raises(InvalidSampleCountError):
            monte_carlo_price(**market, num_paths=num_paths)

    @pytest.mark.parametrize("override", [{"volatility": -0.1}, {"time_to_maturity": 0.0}])
    def test_invalid_parameters(self, market, override):
        with pytest.raises(InvalidParameterError):
            monte_carlo_price(**{**market, **override}, num_paths=10)
