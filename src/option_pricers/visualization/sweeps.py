"""Plot pricer comparisons over spot sweeps and tree step counts."""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from ..pricing.barrier import down_and_in_call, down_and_out_call
from ..pricing.bsm import bsm_price
from ..enums import OptionType

_PRICE_COLUMNS = ("bsm", "binomial", "monte_carlo")


def plot_price_sweep(
    sweep: pd.DataFrame,
    columns: tuple[str, ...] = _PRICE_COLUMNS,
    figsize: tuple[float, float] = (10, 6),
) -> tuple[Figure, Axes]:
    """Plot option price against spot for each pricer in a sweep table.

    Parameters
    ----------
    sweep : pd.DataFrame
        Output of :func:`~option_pricers.pricing.comparison.price_sweep`
    columns : tuple[str, ...], optional
        Price columns to draw; missing columns are skipped
    figsize : tuple[float, float], optional
        Figure size (default: (10, 6))

    Returns
    -------
    tuple[Figure, Axes]
        Matplotlib figure and axes objects
    """
    present = [c for c in columns if c in sweep.columns]
    if not present:
        raise ValueError(f"sweep has none of the price columns {columns}")

    fig, ax = plt.subplots(figsize=figsize)
    styles = {"bsm": "-", "binomial": "--", "monte_carlo": ":"}
    for col in present:
        ax.plot(
            sweep.index.to_numpy(),
            sweep[col].to_numpy(),
            label=col,
            linewidth=2,
            linestyle=styles.get(col, "-"),
        )

    ax.set_xlabel("Spot Price")
    ax.set_ylabel("Option Price")
    ax.set_title("Pricer Comparison")
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_binomial_convergence(
    convergence: pd.DataFrame,
    figsize: tuple[float, float] = (10, 6),
) -> tuple[Figure, Axes]:
    """Plot tree price against number of steps, with the closed-form price as reference.

    Parameters
    ----------
    convergence : pd.DataFrame
        Output of :func:`~option_pricers.pricing.comparison.binomial_convergence`
    figsize : tuple[float, float], optional
        Figure size (default: (10, 6))
    """
    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(
        convergence.index.to_numpy(),
        convergence["binomial"].to_numpy(),
        marker="o",
        linewidth=2,
        label="Binomial Tree Price",
    )
    reference = float(convergence["bsm"].iloc[0])
    ax.axhline(
        y=reference, color="r", linestyle="--", linewidth=2, label=f"BSM: {reference:.4f}"
    )

    ax.set_xlabel("Number of Steps")
    ax.set_ylabel("Option Price")
    ax.set_title("Binomial Tree Convergence")
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_barrier_parity(
    spots: np.ndarray,
    strike: float,
    barrier: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    dividend_yield: float = 0.0,
    figsize: tuple[float, float] = (10, 6),
) -> tuple[Figure, Axes]:
    """Plot vanilla, down-and-in and down-and-out call prices against spot.

    The knock-in and knock-out curves sum to the vanilla curve everywhere.
    """
    spots = np.asarray(spots, dtype=float)
    args = (strike, risk_free_rate, time_to_maturity, volatility, dividend_yield)
    vanilla = bsm_price(spots, *args, OptionType.CALL)
    knock_in = down_and_in_call(spots, strike, barrier, *args[1:])
    knock_out = down_and_out_call(spots, strike, barrier, *args[1:])

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(spots, vanilla, label="Vanilla Call", linewidth=2, color="black")
    ax.plot(spots, knock_in, label="Down-and-In Call", linewidth=2, linestyle="--")
    ax.plot(spots, knock_out, label="Down-and-Out Call", linewidth=2, linestyle="-.")
    ax.axvline(x=barrier, color="r", linestyle=":", alpha=0.5, label="Barrier")

    ax.set_xlabel("Spot Price")
    ax.set_ylabel("Option Price")
    ax.set_title("Down Barrier Calls (In/Out Parity)")
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig, ax
