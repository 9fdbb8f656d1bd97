"""Parameter classes for method-specific pricing configuration.

Each numerical pricer (binomial tree, Monte Carlo) has its own parameter class
that explicitly documents the configuration options available for that method.
The pricing functions take the same options as plain keyword arguments;
``as_kwargs()`` bridges the two.
"""

from dataclasses import dataclass

from ..enums import ExerciseType
from ..exceptions import ValidationError
from ..utils import validate_enum, validate_sample_count


@dataclass(frozen=True, slots=True)
class BinomialParams:
    """Parameters for binomial tree option pricing.

    Attributes
    ==========
    num_steps:
        Number of time steps in the binomial tree.
        More steps increase accuracy but also computation time.
        Default: 500.
    exercise_type:
        EUROPEAN or AMERICAN exercise. Default: EUROPEAN.
    log_timings:
        Emit a DEBUG timing record for each tree valuation.
    """

    num_steps: int = 500
    exercise_type: ExerciseType = ExerciseType.EUROPEAN
    log_timings: bool = False

    def __post_init__(self):
        validate_sample_count("num_steps", self.num_steps)
        validate_enum("exercise_type", self.exercise_type, ExerciseType)

    def as_kwargs(self) -> dict:
        return {
            "num_steps": self.num_steps,
            "exercise_type": self.exercise_type,
            "log_timings": self.log_timings,
        }


@dataclass(frozen=True, slots=True)
class MonteCarloParams:
    """Parameters for Monte Carlo option pricing.

    Attributes
    ==========
    num_paths:
        Number of terminal prices drawn. Default: 100_000.
    random_seed:
        Random seed for reproducibility. If None, uses fresh OS entropy.
    std_error_warn_ratio:
        If set, log a warning when std_error / price exceeds this ratio.
    log_timings:
        Emit a DEBUG timing record for each simulation.
    """

    num_paths: int = 100_000
    random_seed: int | None = None
    std_error_warn_ratio: float | None = None
    log_timings: bool = False

    def __post_init__(self):
        validate_sample_count("num_paths", self.num_paths)
        if self.std_error_warn_ratio is not None and self.std_error_warn_ratio <= 0:
            raise ValidationError(
                f"std_error_warn_ratio must be positive, got {self.std_error_warn_ratio}"
            )

    def as_kwargs(self) -> dict:
        return {
            "num_paths": self.num_paths,
            "random_seed": self.random_seed,
            "std_error_warn_ratio": self.std_error_warn_ratio,
            "log_timings": self.log_timings,
        }
