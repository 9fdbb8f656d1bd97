"""Black-Scholes-Merton European option pricing with continuous dividend yield."""

from __future__ import annotations
import numpy as np
from scipy.stats import norm

from ..enums import OptionType
from ..utils import as_output, validate_enum, validate_market_inputs


def _d_values(
    spot: np.ndarray,
    strike: np.ndarray,
    risk_free_rate: np.ndarray,
    time_to_maturity: np.ndarray,
    volatility: np.ndarray,
    dividend_yield: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """d1 and d2 on already-validated float arrays."""
    denominator = volatility * np.sqrt(time_to_maturity)
    numerator = (
        np.log(spot / strike)
        + (risk_free_rate - dividend_yield + 0.5 * volatility**2) * time_to_maturity
    )
    d1 = numerator / denominator
    d2 = d1 - denominator
    return d1, d2


def _bsm_value(
    option_type: OptionType,
    spot: np.ndarray,
    strike: np.ndarray,
    risk_free_rate: np.ndarray,
    time_to_maturity: np.ndarray,
    volatility: np.ndarray,
    dividend_yield: np.ndarray,
) -> np.ndarray:
    d1, d2 = _d_values(spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)
    df_r = np.exp(-risk_free_rate * time_to_maturity)
    df_q = np.exp(-dividend_yield * time_to_maturity)

    if option_type is OptionType.CALL:
        return spot * df_q * norm.cdf(d1) - strike * df_r * norm.cdf(d2)
    return strike * df_r * norm.cdf(-d2) - spot * df_q * norm.cdf(-d1)


def bsm_d_values(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
) -> tuple[float | np.ndarray, float | np.ndarray]:
    """Calculate d1 and d2 for the BSM model.

    Parameters
    ----------
    spot
        Current spot price.
    strike
        Strike price.
    risk_free_rate
        Continuously compounded risk-free rate.
    time_to_maturity
        Time to maturity in years.
    volatility
        Volatility (annualized).
    dividend_yield
        Continuous dividend yield.

    Returns
    -------
    tuple
        Pair ``(d1, d2)``; floats for scalar inputs, arrays otherwise.
    """
    d1, d2 = _d_values(
        *validate_market_inputs(
            spot=spot,
            strike=strike,
            risk_free_rate=risk_free_rate,
            time_to_maturity=time_to_maturity,
            volatility=volatility,
            dividend_yield=dividend_yield,
        )
    )
    return as_output(d1), as_output(d2)


def bsm_price(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    option_type: OptionType = OptionType.CALL,
) -> float | np.ndarray:
    """Closed-form Black-Scholes-Merton price of a European call or put.

    Call = S e^(-qT) N(d1) - K e^(-rT) N(d2)
    Put  = K e^(-rT) N(-d2) - S e^(-qT) N(-d1)

    Every numeric argument may be a scalar or an array; arrays broadcast with numpy
    rules (the usual case is a sweep over ``spot``).

    Returns
    -------
    float | np.ndarray
        Option value; a float when all inputs are scalars.

    Raises
    ------
    InvalidParameterError
        If T <= 0, volatility <= 0, or spot/strike are non-positive.
    """
    validate_enum("option_type", option_type, OptionType)
    inputs = validate_market_inputs(
        spot=spot,
        strike=strike,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
        dividend_yield=dividend_yield,
    )
    return as_output(_bsm_value(option_type, *inputs))
