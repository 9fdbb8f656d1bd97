"""Side-by-side pricer comparisons: spot sweeps and tree convergence tables."""

from __future__ import annotations
from collections.abc import Sequence
import logging
import numpy as np
import pandas as pd

from ..enums import ExerciseType, OptionType
from ..exceptions import ValidationError
from ..utils import log_timing, validate_positive, validate_sample_count
from .binomial import binomial_price
from .bsm import bsm_price
from .monte_carlo import monte_carlo_price
from .params import BinomialParams, MonteCarloParams


logger = logging.getLogger(__name__)


def price_sweep(
    spots: Sequence[float] | np.ndarray,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    dividend_yield: float = 0.0,
    option_type: OptionType = OptionType.CALL,
    binomial_params: BinomialParams | None = None,
    mc_params: MonteCarloParams | None = None,
) -> pd.DataFrame:
    """Price a European option over a range of spots with every pricer.

    Parameters
    ----------
    spots
        1-D sequence of spot prices.
    binomial_params
        Tree configuration; defaults to ``BinomialParams()``. Must be European
        so the columns are comparable.
    mc_params
        Monte Carlo configuration; defaults to ``MonteCarloParams()``.

    Returns
    -------
    pd.DataFrame
        Indexed by ``spot`` with columns ``bsm``, ``binomial``, ``monte_carlo``,
        ``binomial_error`` and ``monte_carlo_error`` (errors relative to ``bsm``).
    """
    binomial_params = BinomialParams() if binomial_params is None else binomial_params
    mc_params = MonteCarloParams() if mc_params is None else mc_params
    if binomial_params.exercise_type is not ExerciseType.EUROPEAN:
        raise ValidationError("price_sweep compares European prices; use EUROPEAN exercise")

    spot_arr = validate_positive("spots", spots)
    if spot_arr.ndim != 1:
        raise ValidationError(f"spots must be 1-D, got shape {spot_arr.shape}")

    with log_timing(logger, "price_sweep", binomial_params.log_timings or mc_params.log_timings):
        bsm = bsm_price(
            spot_arr,
            strike,
            risk_free_rate,
            time_to_maturity,
            volatility,
            dividend_yield,
            option_type,
        )
        tree = binomial_price(
            spot_arr,
            strike,
            risk_free_rate,
            time_to_maturity,
            volatility,
            dividend_yield,
            option_type=option_type,
            **binomial_params.as_kwargs(),
        )
        mc = monte_carlo_price(
            spot_arr,
            strike,
            risk_free_rate,
            time_to_maturity,
            volatility,
            dividend_yield,
            option_type=option_type,
            **mc_params.as_kwargs(),
        )

    df = pd.DataFrame(
        {"bsm": bsm, "binomial": tree, "monte_carlo": mc},
        index=pd.Index(spot_arr, name="spot"),
    )
    df["binomial_error"] = df["binomial"] - df["bsm"]
    df["monte_carlo_error"] = df["monte_carlo"] - df["bsm"]
    logger.debug(
        "price_sweep points=%d max|binomial_error|=%.3g max|mc_error|=%.3g",
        len(df),
        df["binomial_error"].abs().max(),
        df["monte_carlo_error"].abs().max(),
    )
    return df


def binomial_convergence(
    step_counts: Sequence[int],
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    dividend_yield: float = 0.0,
    option_type: OptionType = OptionType.CALL,
) -> pd.DataFrame:
    """Tabulate European tree prices against the closed form for several step counts.

    Returns
    -------
    pd.DataFrame
        Indexed by ``num_steps`` with columns ``binomial``, ``bsm`` and ``abs_error``.
    """
    steps = [validate_sample_count("num_steps", n) for n in step_counts]
    if not steps:
        raise ValidationError("step_counts must not be empty")

    reference = bsm_price(
        spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield, option_type
    )
    tree_prices = [
        binomial_price(
            spot,
            strike,
            risk_free_rate,
            time_to_maturity,
            volatility,
            dividend_yield,
            num_steps=n,
            option_type=option_type,
        )
        for n in steps
    ]
    df = pd.DataFrame(
        {"binomial": tree_prices, "bsm": reference},
        index=pd.Index(steps, name="num_steps"),
    )
    df["abs_error"] = (df["binomial"] - df["bsm"]).abs()
    return df
