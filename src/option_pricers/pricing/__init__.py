"""Option pricers.

Each pricer is a standalone function of flat numeric inputs. Scalar inputs
return a float; array inputs (typically a sweep over spot) return an ndarray.

Public API
----------
Pricers:
    bsm_price: Closed-form Black-Scholes-Merton European call/put
    binomial_price: CRR binomial tree, European or American
    monte_carlo_price: Monte Carlo European call/put under GBM
    down_and_in_call / down_and_out_call: Closed-form down barrier calls

Analytics:
    bsm_delta, bsm_gamma, bsm_vega, bsm_theta, bsm_rho: Analytical Greeks
    implied_volatility: Inverts bsm_price with Brent's method
    price_sweep, binomial_convergence: Pricer comparison tables

Parameter classes:
    BinomialParams: Configuration for binomial tree pricing
    MonteCarloParams: Configuration for Monte Carlo pricing
"""

from .bsm import bsm_price, bsm_d_values
from .binomial import binomial_price, binomial_lattice
from .monte_carlo import monte_carlo_price, monte_carlo_estimate, MonteCarloEstimate
from .barrier import down_and_in_call, down_and_out_call, barrier_price
from .greeks import bsm_delta, bsm_gamma, bsm_vega, bsm_theta, bsm_rho
from .implied_volatility import implied_volatility, ImpliedVolResult
from .comparison import price_sweep, binomial_convergence
from .params import BinomialParams, MonteCarloParams

__all__ = [
    # Pricers
    "bsm_price",
    "bsm_d_values",
    "binomial_price",
    "binomial_lattice",
    "monte_carlo_price",
    "monte_carlo_estimate",
    "MonteCarloEstimate",
    "down_and_in_call",
    "down_and_out_call",
    "barrier_price",
    # Greeks
    "bsm_delta",
    "bsm_gamma",
    "bsm_vega",
    "bsm_theta",
    "bsm_rho",
    # Implied volatility
    "implied_volatility",
    "ImpliedVolResult",
    # Comparisons
    "price_sweep",
    "binomial_convergence",
    # Parameter classes
    "BinomialParams",
    "MonteCarloParams",
]
