"""Valuation of European and American options using the binomial option pricing model of
Cox-Ross-Rubinstein
"""

from __future__ import annotations
import logging
import numpy as np

from ..enums import ExerciseType, OptionType
from ..exceptions import ArbitrageViolationError
from ..utils import (
    as_output,
    log_timing,
    validate_enum,
    validate_market_inputs,
    validate_sample_count,
)


logger = logging.getLogger(__name__)


def _crr_parameters(
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    dividend_yield: float,
    num_steps: int,
) -> tuple[float, float, float]:
    """Return (up factor, risk-neutral up probability, per-step discount factor)."""
    delta_t = time_to_maturity / num_steps
    u = np.exp(volatility * np.sqrt(delta_t))
    d = 1.0 / u

    growth = np.exp((risk_free_rate - dividend_yield) * delta_t)
    if not (d < growth < u):
        raise ArbitrageViolationError(
            "Arbitrage condition violated: d < exp((r-q)*dt) < u "
            f"(d={d:.6g}, growth={growth:.6g}, u={u:.6g}); increase num_steps"
        )

    p = (growth - d) / (u - d)
    return float(u), float(p), float(np.exp(-risk_free_rate * delta_t))


def _intrinsic(option_type: OptionType, strike: float, spot: np.ndarray) -> np.ndarray:
    if option_type is OptionType.CALL:
        return np.maximum(spot - strike, 0.0)
    return np.maximum(strike - spot, 0.0)


def _layer_spots(spot: float, up: float, t: int) -> np.ndarray:
    """Spot prices at time step t, ordered by number of down moves (row 0 = all ups)."""
    downs = np.arange(t + 1)
    return spot * up ** (t - 2 * downs)


def _tree_root_value(
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    dividend_yield: float,
    num_steps: int,
    exercise_type: ExerciseType,
    option_type: OptionType,
) -> float:
    """Backward induction on a single N-step recombining tree, keeping one layer at a time."""
    up, p, discount = _crr_parameters(
        risk_free_rate, time_to_maturity, volatility, dividend_yield, num_steps
    )
    is_american = exercise_type is ExerciseType.AMERICAN

    values = _intrinsic(option_type, strike, _layer_spots(spot, up, num_steps))
    for t in range(num_steps - 1, -1, -1):
        values = discount * (p * values[:-1] + (1.0 - p) * values[1:])
        if is_american:
            exercise = _intrinsic(option_type, strike, _layer_spots(spot, up, t))
            values = np.maximum(values, exercise)

    return float(values[0])


def binomial_price(
    spot,
    strike,
    risk_free_rate,
    time_to_maturity,
    volatility,
    dividend_yield=0.0,
    num_steps: int = 500,
    exercise_type: ExerciseType = ExerciseType.EUROPEAN,
    option_type: OptionType = OptionType.CALL,
    log_timings: bool = False,
) -> float | np.ndarray:
    """Price a European or American option on an N-step CRR binomial tree.

    Parameters
    ==========
    spot, strike, risk_free_rate, time_to_maturity, volatility, dividend_yield:
        Market and contract inputs. Arrays broadcast against each other and each
        element is priced on its own tree.
    num_steps: int
        number of steps in the binomial tree
    exercise_type: ExerciseType
        EUROPEAN or AMERICAN; American nodes take max(continuation, intrinsic)
    option_type: OptionType
        CALL or PUT
    log_timings: bool
        emit a DEBUG timing record

    Returns
    =======
    float | np.ndarray
        root value of the tree

    Raises
    ======
    InvalidParameterError
        for non-positive spot/strike/T/volatility
    InvalidSampleCountError
        if num_steps is not a positive integer
    ArbitrageViolationError
        if the risk-neutral probability falls outside (0, 1)
    """
    num_steps = validate_sample_count("num_steps", num_steps)
    validate_enum("exercise_type", exercise_type, ExerciseType)
    validate_enum("option_type", option_type, OptionType)
    inputs = validate_market_inputs(
        spot=spot,
        strike=strike,
        risk_free_rate=risk_free_rate,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
        dividend_yield=dividend_yield,
    )
    broadcast = np.broadcast_arrays(*inputs)
    shape = broadcast[0].shape
    logger.debug(
        "Binomial %s %s num_steps=%d trees=%d",
        exercise_type.value,
        option_type.value,
        num_steps,
        broadcast[0].size,
    )

    with log_timing(logger, "Binomial binomial_price", log_timings):
        values = [
            _tree_root_value(
                float(s),
                float(k),
                float(r),
                float(t),
                float(sigma),
                float(q),
                num_steps,
                exercise_type,
                option_type,
            )
            for s, k, r, t, sigma, q in zip(*(a.ravel() for a in broadcast))
        ]

    return as_output(np.array(values, dtype=float).reshape(shape))


def binomial_lattice(
    spot: float,
    strike: float,
    risk_free_rate: float,
    time_to_maturity: float,
    volatility: float,
    dividend_yield: float = 0.0,
    num_steps: int = 50,
    exercise_type: ExerciseType = ExerciseType.EUROPEAN,
    option_type: OptionType = OptionType.CALL,
) -> tuple[np.ndarray, np.ndarray]:
    """Build the full CRR spot and option-value lattices.

    Time runs along columns and rows count down moves, so node (i, t) holds
    ``S u^(t-i) d^i``. Nodes with i > t are unreachable and hold NaN.

    Returns
    =======
    tuple of (spot_lattice, option_lattice), each of shape (num_steps+1, num_steps+1)
    """
    num_steps = validate_sample_count("num_steps", num_steps)
    validate_enum("exercise_type", exercise_type, ExerciseType)
    validate_enum("option_type", option_type, OptionType)
    S, K, r, T, sigma, q = (
        float(x)
        for x in validate_market_inputs(
            spot=spot,
            strike=strike,
            risk_free_rate=risk_free_rate,
            time_to_maturity=time_to_maturity,
            volatility=volatility,
            dividend_yield=dividend_yield,
        )
    )
    up, p, discount = _crr_parameters(r, T, sigma, q, num_steps)

    spot_lattice = np.full((num_steps + 1, num_steps + 1), np.nan)
    option_lattice = np.full_like(spot_lattice, np.nan)
    for t in range(num_steps + 1):
        spot_lattice[: t + 1, t] = _layer_spots(S, up, t)

    option_lattice[:, num_steps] = _intrinsic(option_type, K, spot_lattice[:, num_steps])
    for t in range(num_steps - 1, -1, -1):
        continuation = discount * (
            p * option_lattice[: t + 1, t + 1] + (1.0 - p) * option_lattice[1 : t + 2, t + 1]
        )
        if exercise_type is ExerciseType.AMERICAN:
            continuation = np.maximum(
                continuation, _intrinsic(option_type, K, spot_lattice[: t + 1, t])
            )
        option_lattice[: t + 1, t] = continuation

    return spot_lattice, option_lattice
