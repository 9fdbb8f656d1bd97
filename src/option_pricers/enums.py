"""Enums for option pricing."""

from enum import Enum

__all__ = [
    "OptionType",
    "ExerciseType",
    "BarrierType",
]


class OptionType(Enum):
    CALL = "call"
    PUT = "put"


class ExerciseType(Enum):
    EUROPEAN = "european"
    AMERICAN = "american"


class BarrierType(Enum):
    DOWN_AND_IN = "down_and_in"
    DOWN_AND_OUT = "down_and_out"
