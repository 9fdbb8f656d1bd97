"""Implied volatility by inverting the Black-Scholes-Merton price."""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np
from scipy import optimize

from ..enums import OptionType
from ..exceptions import (
    ConfigurationError,
    ConvergenceError,
    InvalidParameterError,
    ValidationError,
)
from ..utils import log_timing, validate_enum, validate_finite, validate_positive
from .bsm import bsm_price


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImpliedVolResult:
    """Result container for implied volatility calculation."""

    implied_vol: float
    iterations: int
    converged: bool


def _scalar(name: str, arr: np.ndarray) -> float:
    if arr.ndim != 0:
        raise ConfigurationError(f"{name} must be a scalar, got shape {arr.shape}")
    return float(arr)


def _price_bounds(
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    dividend_yield: float,
    option_type: OptionType,
) -> tuple[float, float]:
    """No-arbitrage (lower, upper) bounds for a European option price."""
    df_r = np.exp(-risk_free_rate * time_to_maturity)
    df_q = np.exp(-dividend_yield * time_to_maturity)
    if option_type is OptionType.CALL:
        return max(0.0, spot * df_q - strike * df_r), spot * df_q
    return max(0.0, strike * df_r - spot * df_q), strike * df_r


def implied_volatility(
    price: float,
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    dividend_yield: float = 0.0,
    option_type: OptionType = OptionType.CALL,
    vol_bounds: tuple[float, float] = (1.0e-4, 5.0),
    tol: float = 1.0e-10,
    max_iter: int = 200,
    log_timings: bool = False,
) -> ImpliedVolResult:
    """Solve for the volatility that reproduces ``price`` under BSM.

    Parameters
    ----------
    price
        Observed option price.
    vol_bounds
        Lower/upper bounds for the volatility search interval.
    tol
        Absolute tolerance on volatility passed to ``scipy.optimize.brentq``.
    max_iter
        Maximum number of Brent iterations.

    Returns
    -------
    ImpliedVolResult
        Solver output including implied volatility, iteration count, and
        convergence status.

    Raises
    ------
    InvalidParameterError
        If ``price`` is outside the no-arbitrage bounds.
    ConvergenceError
        If the price is not bracketed by ``vol_bounds`` or Brent fails to converge.
    ConfigurationError
        If any market input is not a scalar.
    """
    validate_enum("option_type", option_type, OptionType)
    price = _scalar("price", validate_finite("price", price))
    spot = _scalar("spot", validate_positive("spot", spot))
    strike = _scalar("strike", validate_positive("strike", strike))
    risk_free_rate = _scalar("risk_free_rate", validate_finite("risk_free_rate", risk_free_rate))
    time_to_maturity = _scalar(
        "time_to_maturity", validate_positive("time_to_maturity", time_to_maturity)
    )
    dividend_yield = _scalar("dividend_yield", validate_finite("dividend_yield", dividend_yield))

    low, high = vol_bounds
    if low <= 0 or high <= 0 or low >= high:
        raise ValidationError("vol_bounds must be positive and satisfy low < high")

    min_price, max_price = _price_bounds(
        spot, strike, risk_free_rate, time_to_maturity, dividend_yield, option_type
    )
    if price < min_price or price > max_price:
        raise InvalidParameterError(
            f"price {price:.6g} is outside no-arbitrage bounds [{min_price:.6g}, {max_price:.6g}]"
        )

    def f(vol: float) -> float:
        return (
            bsm_price(
                spot, strike, risk_free_rate, time_to_maturity, vol, dividend_yield, option_type
            )
            - price
        )

    f_low, f_high = f(low), f(high)
    if f_low > 0 or f_high < 0:
        raise ConvergenceError("Price not bracketed by vol_bounds; adjust bounds.")

    with log_timing(logger, "Implied vol solver", log_timings):
        try:
            implied, r = optimize.brentq(
                f, low, high, xtol=tol, maxiter=max_iter, full_output=True
            )
        except RuntimeError as exc:
            raise ConvergenceError(f"brentq failed to converge: {exc}") from exc

    result = ImpliedVolResult(
        implied_vol=float(implied),
        iterations=int(r.iterations),
        converged=bool(r.converged),
    )
    logger.debug(
        "Implied vol converged=%s iterations=%d implied_vol=%.6g",
        result.converged,
        result.iterations,
        result.implied_vol,
    )
    return result
