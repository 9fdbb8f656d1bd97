"""Helper functions shared by the pricing modules."""

from __future__ import annotations

from contextlib import contextmanager
from collections.abc import Iterator
import numbers
import time
import numpy as np

from .exceptions import ConfigurationError, InvalidParameterError, InvalidSampleCountError

__all__ = [
    "log_timing",
    "as_output",
    "validate_positive",
    "validate_finite",
    "validate_sample_count",
    "validate_enum",
    "validate_market_inputs",
    "forward_price",
    "put_call_parity_rhs",
    "put_call_parity_gap",
]


@contextmanager
def log_timing(logger, label: str, enabled: bool) -> Iterator[None]:
    """Log timing for a code block when enabled is True."""
    if not enabled:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("Timing %s: %.6fs", label, elapsed)


def as_output(value) -> float | np.ndarray:
    """Return a Python float for 0-d results and an ndarray otherwise."""
    arr = np.asarray(value, dtype=float)
    if arr.ndim == 0:
        return float(arr)
    return arr


def _as_float_array(name: str, value) -> np.ndarray:
    try:
        return np.asarray(value, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be numeric") from exc


def validate_finite(name: str, value) -> np.ndarray:
    """Coerce *value* to a float array and require every element to be finite."""
    arr = _as_float_array(name, value)
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return arr


def validate_positive(name: str, value) -> np.ndarray:
    """Coerce *value* to a float array and require every element to be finite and > 0."""
    arr = validate_finite(name, value)
    if np.any(arr <= 0.0):
        raise InvalidParameterError(f"{name} must be positive, got {value!r}")
    return arr


def validate_sample_count(name: str, value) -> int:
    """Require a positive integer step / path count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidSampleCountError(f"{name} must be a positive integer, got {value!r}")
    if value < 1:
        raise InvalidSampleCountError(f"{name} must be >= 1, got {value}")
    return int(value)


def validate_enum(name: str, value, enum_cls: type):
    if not isinstance(value, enum_cls):
        raise ConfigurationError(
            f"{name} must be {enum_cls.__name__} enum, got {type(value).__name__}"
        )
    return value


def validate_market_inputs(
    *,
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Validate the common (S, K, r, T, sigma, q) inputs and return them as float arrays.

    Raises
    ------
    InvalidParameterError
        If T <= 0, sigma <= 0, spot or strike are non-positive, or any input is non-finite.
    """
    return (
        validate_positive("spot", spot),
        validate_positive("strike", strike),
        validate_finite("risk_free_rate", risk_free_rate),
        validate_positive("time_to_maturity", time_to_maturity),
        validate_positive("volatility", volatility),
        validate_finite("dividend_yield", dividend_yield),
    )


def forward_price(
    *,
    spot,
    risk_free_rate: float,
    time_to_maturity: float,
    dividend_yield: float = 0.0,
) -> float | np.ndarray:
    """No-arbitrage forward price under a continuous dividend yield: S e^((r-q)T)."""
    spot_arr = validate_positive("spot", spot)
    t = validate_positive("time_to_maturity", time_to_maturity)
    r = validate_finite("risk_free_rate", risk_free_rate)
    q = validate_finite("dividend_yield", dividend_yield)
    return as_output(spot_arr * np.exp((r - q) * t))


def put_call_parity_rhs(
    *,
    spot,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    dividend_yield: float = 0.0,
) -> float | np.ndarray:
    """Compute the RHS of put-call parity for European options.

    Returns C - P implied by no-arbitrage, i.e. ``S e^(-qT) - K e^(-rT)``.
    """
    fwd = forward_price(
        spot=spot,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        dividend_yield=dividend_yield,
    )
    strike_arr = validate_positive("strike", strike)
    r = validate_finite("risk_free_rate", risk_free_rate)
    t = validate_positive("time_to_maturity", time_to_maturity)
    return as_output(np.exp(-r * t) * (fwd - strike_arr))


def put_call_parity_gap(
    *,
    call_price,
    put_price,
    spot,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    dividend_yield: float = 0.0,
) -> float | np.ndarray:
    """Return call-put parity residual: (C - P) - RHS."""
    rhs = put_call_parity_rhs(
        spot=spot,
        strike=strike,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        dividend_yield=dividend_yield,
    )
    return as_output(np.asarray(call_price, dtype=float) - np.asarray(put_price, dtype=float) - rhs)
