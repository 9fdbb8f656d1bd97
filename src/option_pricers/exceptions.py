"""Custom exception hierarchy for the option_pricers library.

All library-specific exceptions inherit from :class:`OptionPricingError`,
enabling callers to catch *any* library error with a single ``except`` clause::

    try:
        pv = bsm_price(spot, strike, r, T, vol)
    except OptionPricingError as exc:
        log.error("Pricing error: %s", exc)
"""

from __future__ import annotations


class OptionPricingError(Exception):
    """Base exception for all library errors."""


# ── Input validation ────────────────────────────────────────────────


class ValidationError(OptionPricingError):
    """Invalid input values (out-of-range, non-finite, etc.)."""


class InvalidParameterError(ValidationError):
    """A market or contract parameter is outside its domain (T<=0, vol<=0, price<=0, ...)."""


class InvalidSampleCountError(ValidationError):
    """A tree step count or Monte Carlo path count is not a positive integer."""


class ConfigurationError(OptionPricingError):
    """Wrong types passed to a public API (e.g. raw string instead of enum)."""


# ── Numerical issues ────────────────────────────────────────────────


class NumericalError(OptionPricingError):
    """Base for errors arising from numerical computation."""


class ArbitrageViolationError(NumericalError):
    """Model parameters imply an arbitrage (e.g. risk-neutral probability outside [0, 1])."""


class ConvergenceError(NumericalError):
    """An iterative solver failed to converge within the allowed tolerance / iterations."""
