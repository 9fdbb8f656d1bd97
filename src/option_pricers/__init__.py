from .enums import OptionType, ExerciseType, BarrierType
from .exceptions import (
    OptionPricingError,
    ValidationError,
    InvalidParameterError,
    InvalidSampleCountError,
    ConfigurationError,
    NumericalError,
    ArbitrageViolationError,
    ConvergenceError,
)
from .pricing import (
    bsm_price,
    binomial_price,
    monte_carlo_price,
    down_and_in_call,
    down_and_out_call,
)


__all__ = [
    "OptionType",
    "ExerciseType",
    "BarrierType",
    "OptionPricingError",
    "ValidationError",
    "InvalidParameterError",
    "InvalidSampleCountError",
    "ConfigurationError",
    "NumericalError",
    "ArbitrageViolationError",
    "ConvergenceError",
    "bsm_price",
    "binomial_price",
    "monte_carlo_price",
    "down_and_in_call",
    "down_and_out_call",
]
