"""Statistical conformance checks for built alias tables.

Draws many values from a table and runs Pearson's chi-squared goodness of
fit test against the frequencies implied by the original weights.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from scipy.stats import chisquare

from weighted_probability.alias import AliasTable, normalize
from weighted_probability.random_source import RandomSource
from weighted_probability.weighted import WeightedItem

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 50_000


@dataclass(frozen=True)
class ChiSquaredResult:
    chi_squared: float
    p_value: float
    samples: int

    def passes(self, alpha: float = 0.05) -> bool:
        """True if the observed counts are consistent with the weights at ``alpha``."""
        return self.p_value > alpha


def check_distribution(
    items: Iterable[WeightedItem[Any] | tuple[int, Any]],
    rng: RandomSource,
    samples: int = DEFAULT_SAMPLES,
    table: AliasTable[Any] | None = None,
) -> ChiSquaredResult:
    """Sample ``samples`` values and test them against the weights of ``items``.

    If ``table`` is omitted it is built from ``items``; either way ``items``
    are validated as :func:`~weighted_probability.build` would. Values are grouped
    by equality, so they must be hashable. Values whose expected frequency
    is zero take no part in the chi-squared statistic, but observing any of
    them fails the check outright.
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")

    weighted = [WeightedItem.coerce(item, i) for i, item in enumerate(items)]
    # Same validation as build, whether or not a table was supplied.
    normalize(weighted)
    if table is None:
        table = AliasTable.from_weighted_tuples(weighted)

    expected_weights: Counter[Any] = Counter()
    for item in weighted:
        expected_weights[item.value] += item.weight
    total = sum(expected_weights.values())

    observed: Counter[Any] = Counter(table.select_many(rng, samples))

    impossible = [
        value
        for value, count in observed.items()
        if count and expected_weights.get(value, 0) == 0
    ]
    if impossible:
        logger.debug("drew values with zero expected frequency: %r", impossible)
        return ChiSquaredResult(math.inf, 0.0, samples)

    possible = [value for value, weight in expected_weights.items() if weight > 0]
    if len(possible) < 2:
        # A single possible value has nothing to test against.
        return ChiSquaredResult(0.0, 1.0, samples)

    f_obs = [observed[value] for value in possible]
    f_exp = [samples * expected_weights[value] / total for value in possible]
    statistic, p_value = chisquare(f_obs, f_exp)
    result = ChiSquaredResult(float(statistic), float(p_value), samples)
    logger.debug(
        "chi-squared over %d values: chi2=%.3f p=%.4f",
        len(possible),
        result.chi_squared,
        result.p_value,
    )
    return result
