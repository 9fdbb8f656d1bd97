"""Shared pytest fixtures for option_pricers tests."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


# ---------------------------------------------------------------------------
# Scalar constants
# ---------------------------------------------------------------------------

SPOT = 100.0
STRIKE = 100.0
RATE = 0.05
VOL = 0.20
TTM = 1.0
DIV_YIELD = 0.0

# Worked example from the vanilla/tree comparison post
BLOG_SPOT = 1.0
BLOG_STRIKE = 1.1

# Worked example from the barrier post
BLOG_BARRIER_SPOT = 1.3
BLOG_BARRIER = 1.3


@pytest.fixture()
def spot() -> float:
    return SPOT


@pytest.fixture()
def strike() -> float:
    return STRIKE


@pytest.fixture()
def risk_free_rate() -> float:
    return RATE


@pytest.fixture()
def vol() -> float:
    return VOL


@pytest.fixture()
def time_to_maturity() -> float:
    return TTM


@pytest.fixture()
def market(spot, strike, risk_free_rate, time_to_maturity, vol) -> dict:
    """ATM market inputs with no dividends, as keyword arguments for any pricer."""
    return {
        "spot": spot,
        "strike": strike,
        "risk_free_rate": risk_free_rate,
        "time_to_maturity": time_to_maturity,
        "volatility": vol,
        "dividend_yield": DIV_YIELD,
    }


@pytest.fixture()
def blog_market() -> dict:
    """S0=1, X=1.1, r=5%, T=1, sigma=20%, q=0."""
    return {
        "spot": BLOG_SPOT,
        "strike": BLOG_STRIKE,
        "risk_free_rate": RATE,
        "time_to_maturity": TTM,
        "volatility": VOL,
        "dividend_yield": 0.0,
    }


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
