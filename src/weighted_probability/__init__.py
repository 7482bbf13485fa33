"""Package initialization for weighted-probability.

Weighted random selection in O(1) per draw using Vose's alias method, with
exact rational arithmetic while the table is built.
"""

import logging

from weighted_probability.alias import AliasTable, build, select
from weighted_probability.conformance import ChiSquaredResult, check_distribution
from weighted_probability.errors import (
    AliasCreationError,
    InvalidWeightError,
    MalformedItemError,
    ZeroTotalWeightError,
)
from weighted_probability.random_source import RandomSource
from weighted_probability.weighted import WeightedItem, WeightedTuple

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AliasCreationError",
    "AliasTable",
    "ChiSquaredResult",
    "InvalidWeightError",
    "MalformedItemError",
    "RandomSource",
    "WeightedItem",
    "WeightedTuple",
    "ZeroTotalWeightError",
    "build",
    "check_distribution",
    "select",
]
