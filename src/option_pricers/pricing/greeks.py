"""Analytical Black-Scholes-Merton Greeks.

All functions share the signature of :func:`~option_pricers.pricing.bsm.bsm_price`
and broadcast over array inputs the same way.

Scaling conventions:

- vega is per 1% point change in volatility
- theta is per calendar day (annual theta / 365)
- rho is per 1% change in the risk-free rate
"""

from __future__ import annotations
from typing import NamedTuple
import numpy as np
from scipy.stats import norm

from ..enums import OptionType
from ..utils import as_output, validate_enum, validate_market_inputs
from .bsm import _d_values


class _BSMInputs(NamedTuple):
    """Pre-computed inputs shared across all BSM Greek calculations."""

    spot: np.ndarray
    strike: np.ndarray
    risk_free_rate: np.ndarray
    time_to_maturity: np.ndarray
    volatility: np.ndarray
    dividend_yield: np.ndarray
    df_r: np.ndarray
    df_q: np.ndarray
    d1: np.ndarray
    d2: np.ndarray


def _bsm_inputs(
    spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield
) -> _BSMInputs:
    S, K, r, T, sigma, q = validate_market_inputs(
        spot=spot,
        strike=strike,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
        dividend_yield=dividend_yield,
    )
    d1, d2 = _d_values(S, K, r, T, sigma, q)
    return _BSMInputs(
        spot=S,
        strike=K,
        risk_free_rate=r,
        time_to_maturity=T,
        volatility=sigma,
        dividend_yield=q,
        df_r=np.exp(-r * T),
        df_q=np.exp(-q * T),
        d1=d1,
        d2=d2,
    )


def bsm_delta(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    option_type: OptionType = OptionType.CALL,
) -> float | np.ndarray:
    """delta = e^(-qT) N(d1) for calls, e^(-qT) (N(d1) - 1) for puts."""
    validate_enum("option_type", option_type, OptionType)
    inp = _bsm_inputs(spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)
    if option_type is OptionType.CALL:
        return as_output(inp.df_q * norm.cdf(inp.d1))
    return as_output(inp.df_q * (norm.cdf(inp.d1) - 1.0))


def bsm_gamma(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    option_type: OptionType = OptionType.CALL,
) -> float | np.ndarray:
    """gamma = e^(-qT) N'(d1) / (S sigma sqrt(T)); identical for calls and puts."""
    validate_enum("option_type", option_type, OptionType)
    inp = _bsm_inputs(spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)
    return as_output(
        inp.df_q * norm.pdf(inp.d1) / (inp.spot * inp.volatility * np.sqrt(inp.time_to_maturity))
    )


def bsm_vega(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    option_type: OptionType = OptionType.CALL,
) -> float | np.ndarray:
    """vega = S e^(-qT) N'(d1) sqrt(T) / 100 (per vol point)."""
    validate_enum("option_type", option_type, OptionType)
    inp = _bsm_inputs(spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)
    return as_output(inp.spot * inp.df_q * norm.pdf(inp.d1) * np.sqrt(inp.time_to_maturity) / 100)


def bsm_theta(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    option_type: OptionType = OptionType.CALL,
) -> float | np.ndarray:
    """Calculate analytical theta, per calendar day.

    For call:
        theta = -(S N'(d1) sigma e^(-qT)) / (2 sqrt(T))
                - r K e^(-rT) N(d2)
                + q S e^(-qT) N(d1)

    For put:
        theta = -(S N'(d1) sigma e^(-qT)) / (2 sqrt(T))
                + r K e^(-rT) N(-d2)
                - q S e^(-qT) N(-d1)
    """
    validate_enum("option_type", option_type, OptionType)
    inp = _bsm_inputs(spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)

    term1 = -(
        inp.spot
        * inp.df_q
        * norm.pdf(inp.d1)
        * inp.volatility
        / (2 * np.sqrt(inp.time_to_maturity))
    )
    if option_type is OptionType.CALL:
        term2 = -inp.risk_free_rate * inp.strike * inp.df_r * norm.cdf(inp.d2)
        term3 = inp.dividend_yield * inp.spot * inp.df_q * norm.cdf(inp.d1)
    else:  # PUT
        term2 = inp.risk_free_rate * inp.strike * inp.df_r * norm.cdf(-inp.d2)
        term3 = -inp.dividend_yield * inp.spot * inp.df_q * norm.cdf(-inp.d1)

    return as_output((term1 + term2 + term3) / 365)


def bsm_rho(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    option_type: OptionType = OptionType.CALL,
) -> float | np.ndarray:
    """rho = K T e^(-rT) N(d2) / 100 for calls, -K T e^(-rT) N(-d2) / 100 for puts."""
    validate_enum("option_type", option_type, OptionType)
    inp = _bsm_inputs(spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)
    if option_type is OptionType.CALL:
        return as_output(inp.strike * inp.time_to_maturity * inp.df_r * norm.cdf(inp.d2) / 100)
    return as_output(-inp.strike * inp.time_to_maturity * inp.df_r * norm.cdf(-inp.d2) / 100)
