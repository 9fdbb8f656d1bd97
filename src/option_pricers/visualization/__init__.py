"""Visualization module for option pricers.

This module provides plotting functions for:
- Pricer comparisons over spot sweeps
- Binomial tree convergence
- Down barrier in/out parity
"""

from .sweeps import plot_price_sweep, plot_binomial_convergence, plot_barrier_parity

__all__ = [
    "plot_price_sweep",
    "plot_binomial_convergence",
    "plot_barrier_parity",
]
