"""Down-and-in / down-and-out barrier call valuation.

Closed forms for continuously monitored down barriers on a call (Merton 1973;
Rubinstein-Reiner 1991, in the notation of Hull, *Options, Futures and Other
Derivatives*, ch. 26):

    lambda = (r - q + sigma^2 / 2) / sigma^2
    x1 = ln(S/H) / (sigma sqrt(T)) + lambda sigma sqrt(T)
    y1 = ln(H/S) / (sigma sqrt(T)) + lambda sigma sqrt(T)
    y  = ln(H^2 / (S K)) / (sigma sqrt(T)) + lambda sigma sqrt(T)

For H >= K the down-and-out call is built from four terms and the knock-in follows
from in/out parity (c_di = c - c_do). For H < K the knock-in has its own two-term
closed form and the knock-out follows from parity. A spot at or below the barrier
means the barrier has already been touched: the knock-in is the vanilla call and
the knock-out is worthless.
"""

from __future__ import annotations
import logging
import numpy as np
from scipy.stats import norm

from ..enums import BarrierType, OptionType
from ..utils import as_output, validate_enum, validate_market_inputs, validate_positive
from .bsm import _bsm_value


logger = logging.getLogger(__name__)


def _vanilla_and_knock_out(
    spot: np.ndarray,
    strike: np.ndarray,
    barrier: np.ndarray,
    risk_free_rate: np.ndarray,
    time_to_maturity: np.ndarray,
    volatility: np.ndarray,
    dividend_yield: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (vanilla call, down-and-out call) on validated float arrays."""
    S, K, H = spot, strike, barrier
    r, T, sigma, q = risk_free_rate, time_to_maturity, volatility, dividend_yield

    vanilla = _bsm_value(OptionType.CALL, S, K, r, T, sigma, q)

    vol_sqrt_t = sigma * np.sqrt(T)
    lam = (r - q + 0.5 * sigma**2) / sigma**2
    df_r = np.exp(-r * T)
    df_q = np.exp(-q * T)
    ratio = H / S

    x1 = np.log(S / H) / vol_sqrt_t + lam * vol_sqrt_t
    y1 = np.log(H / S) / vol_sqrt_t + lam * vol_sqrt_t
    y = np.log(H**2 / (S * K)) / vol_sqrt_t + lam * vol_sqrt_t

    # H >= K
    knock_out_high = (
        S * df_q * norm.cdf(x1)
        - K * df_r * norm.cdf(x1 - vol_sqrt_t)
        - S * df_q * ratio ** (2 * lam) * norm.cdf(y1)
        + K * df_r * ratio ** (2 * lam - 2) * norm.cdf(y1 - vol_sqrt_t)
    )

    # H < K
    knock_in_low = S * df_q * ratio ** (2 * lam) * norm.cdf(y) - K * df_r * ratio ** (
        2 * lam - 2
    ) * norm.cdf(y - vol_sqrt_t)
    knock_out_low = vanilla - knock_in_low

    knock_out = np.where(H >= K, knock_out_high, knock_out_low)
    knock_out = np.where(S <= H, 0.0, knock_out)
    # Round-off can push the knock-out marginally outside [0, vanilla].
    knock_out = np.clip(knock_out, 0.0, vanilla)
    return vanilla, knock_out


def _validated(spot, strike, barrier, risk_free_rate, time_to_maturity, volatility, dividend_yield):
    S, K, r, T, sigma, q = validate_market_inputs(
        spot=spot,
        strike=strike,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
        dividend_yield=dividend_yield,
    )
    H = validate_positive("barrier", barrier)
    return S, K, H, r, T, sigma, q


def down_and_out_call(
    spot,
    strike,
    barrier,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
) -> float | np.ndarray:
    """Price a continuously monitored down-and-out call.

    Parameters
    ----------
    spot : float | array-like
        Current spot price
    strike : float
        Strike price
    barrier : float
        Barrier level H
    risk_free_rate : float
        Risk-free rate
    time_to_maturity : float
        Time to maturity in years
    volatility : float
        Volatility (annualized)
    dividend_yield : float, optional
        Continuous dividend yield (default: 0.0)

    Returns
    -------
    float | np.ndarray
        Down-and-out call price
    """
    _, knock_out = _vanilla_and_knock_out(
        *_validated(
            spot, strike, barrier, risk_free_rate, time_to_maturity, volatility, dividend_yield
        )
    )
    return as_output(knock_out)


def down_and_in_call(
    spot,
    strike,
    barrier,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
) -> float | np.ndarray:
    """Price a continuously monitored down-and-in call as vanilla minus down-and-out.

    Takes the same parameters as :func:`down_and_out_call`.
    """
    vanilla, knock_out = _vanilla_and_knock_out(
        *_validated(
            spot, strike, barrier, risk_free_rate, time_to_maturity, volatility, dividend_yield
        )
    )
    return as_output(vanilla - knock_out)


def barrier_price(
    spot,
    strike,
    barrier,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    barrier_type: BarrierType = BarrierType.DOWN_AND_IN,
) -> float | np.ndarray:
    """Price a down barrier call of the given ``barrier_type``."""
    validate_enum("barrier_type", barrier_type, BarrierType)
    logger.debug("Barrier %s call H=%s K=%s", barrier_type.value, barrier, strike)
    if barrier_type is BarrierType.DOWN_AND_OUT:
        return down_and_out_call(
            spot, strike, barrier, risk_free_rate, time_to_maturity, volatility, dividend_yield
        )
    return down_and_in_call(
        spot, strike, barrier, risk_free_rate, time_to_maturity, volatility, dividend_yield
    )
