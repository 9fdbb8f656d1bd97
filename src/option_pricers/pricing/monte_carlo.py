"""Monte Carlo Simulation option valuation under geometric Brownian motion."""

from __future__ import annotations
from typing import NamedTuple
import logging
import numpy as np

from ..enums import OptionType
from ..utils import (
    as_output,
    log_timing,
    validate_enum,
    validate_market_inputs,
    validate_sample_count,
)


logger = logging.getLogger(__name__)


class MonteCarloEstimate(NamedTuple):
    """Monte Carlo price together with its sampling error."""

    price: float | np.ndarray
    std_error: float | np.ndarray
    num_paths: int


def _warn_if_high_std_error(
    *,
    price: np.ndarray,
    std_error: np.ndarray,
    num_paths: int,
    std_error_warn_ratio: float | None,
) -> None:
    """Emit a warning log if MC standard error is high relative to the PV estimate."""
    if std_error_warn_ratio is None or num_paths < 2:
        return
    scale = np.maximum(np.abs(price), 1.0e-12)
    ratio = float(np.max(std_error / scale))
    logger.debug("MC std_error ratio=%.6g paths=%d", ratio, num_paths)
    if ratio > std_error_warn_ratio:
        logger.warning(
            "MC standard error high: ratio=%.6g (>%.3g) paths=%d",
            ratio,
            std_error_warn_ratio,
            num_paths,
        )


def monte_carlo_estimate(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    num_paths: int = 100_000,
    option_type: OptionType = OptionType.CALL,
    random_seed: int | None = None,
    std_error_warn_ratio: float | None = None,
    log_timings: bool = False,
) -> MonteCarloEstimate:
    """Estimate a European option price by sampling terminal GBM prices.

    Each of the ``num_paths`` standard normal draws z maps to

        S_T = S exp((r - q - sigma^2/2) T + sigma sqrt(T) z)

    and the estimate is ``e^(-rT) mean(payoff(S_T))``. No variance reduction is
    applied, so the sampling error shrinks like 1/sqrt(num_paths).

    When inputs are arrays (e.g. a sweep over spot), the same draws are reused for
    every element so the estimates vary smoothly across the sweep.

    Returns
    -------
    MonteCarloEstimate
        ``(price, std_error, num_paths)``; price and std_error are floats for scalar
        inputs and arrays otherwise.
    """
    num_paths = validate_sample_count("num_paths", num_paths)
    validate_enum("option_type", option_type, OptionType)
    S, K, r, T, sigma, q = np.broadcast_arrays(
        *validate_market_inputs(
            spot=spot,
            strike=strike,
            risk_free_rate=risk_free_rate,
            time_to_maturity=time_to_maturity,
            volatility=volatility,
            dividend_yield=dividend_yield,
        )
    )
    logger.debug(
        "MC European %s paths=%d seed=%s", option_type.value, num_paths, random_seed
    )

    with log_timing(logger, "MC monte_carlo_estimate", log_timings):
        rng = np.random.default_rng(random_seed)
        z = rng.standard_normal(num_paths)

        drift = ((r - q - 0.5 * sigma**2) * T)[..., None]
        diffusion = (sigma * np.sqrt(T))[..., None]
        terminal = S[..., None] * np.exp(drift + diffusion * z)

        if option_type is OptionType.CALL:
            payoffs = np.maximum(terminal - K[..., None], 0.0)
        else:
            payoffs = np.maximum(K[..., None] - terminal, 0.0)

        discounted = np.exp(-r * T)[..., None] * payoffs
        price = discounted.mean(axis=-1)
        if num_paths > 1:
            std_error = discounted.std(axis=-1, ddof=1) / np.sqrt(num_paths)
        else:
            std_error = np.full_like(price, np.nan)

    _warn_if_high_std_error(
        price=price,
        std_error=std_error,
        num_paths=num_paths,
        std_error_warn_ratio=std_error_warn_ratio,
    )
    return MonteCarloEstimate(as_output(price), as_output(std_error), num_paths)


def monte_carlo_price(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    num_paths: int = 100_000,
    option_type: OptionType = OptionType.CALL,
    random_seed: int | None = None,
    std_error_warn_ratio: float | None = None,
    log_timings: bool = False,
) -> float | np.ndarray:
    """Monte Carlo price of a European call or put; see :func:`monte_carlo_estimate`."""
    return monte_carlo_estimate(
        spot,
        strike,
        risk_free_rate,
        time_to_maturity,
        volatility,
        dividend_yield,
        num_paths=num_paths,
        option_type=option_type,
        random_seed=random_seed,
        std_error_warn_ratio=std_error_warn_ratio,
        log_timings=log_timings,
    ).price
