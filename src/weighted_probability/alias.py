"""Vose's alias method over exact rational weights.

See https://www.keithschwarz.com/darts-dice-coins/ for a walkthrough of the
algorithm. Building a table is O(n); every draw afterwards is O(1) and needs
exactly two values from the random source: a fair die roll picking a slot
and a biased coin flip deciding between the slot's own value and its alias.

All bookkeeping during construction uses :class:`fractions.Fraction`, so
classifying an item as below or above the average weight is never subject
to floating point drift.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Hashable, Iterable
from fractions import Fraction
from typing import Generic, TypeVar

from weighted_probability.errors import (
    AliasCreationError,
    InvalidWeightError,
    ZeroTotalWeightError,
)
from weighted_probability.random_source import RandomSource
from weighted_probability.weighted import NormalizedItem, WeightedItem

logger = logging.getLogger(__name__)

T = TypeVar("T")

ONE = Fraction(1)


def _validated_weight(index: int, weight: object) -> int:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise InvalidWeightError(index, weight)
    if weight < 0:
        raise InvalidWeightError(index, weight)
    return int(weight)


def normalize(
    items: Iterable[WeightedItem[T] | tuple[int, T]],
) -> list[NormalizedItem[T]]:
    """Scale every weight so that the average weight is exactly 1.

    Raises:
        AliasCreationError: if no items were provided.
        InvalidWeightError: if a weight is not a non-negative integer.
        ZeroTotalWeightError: if all weights are zero.
    """
    weighted = [WeightedItem.coerce(item, i) for i, item in enumerate(items)]
    count = len(weighted)
    if count == 0:
        raise AliasCreationError("no weighted tuples were provided")

    weights = [_validated_weight(i, item.weight) for i, item in enumerate(weighted)]
    total = sum(weights)
    if total == 0:
        raise ZeroTotalWeightError(count)

    return [
        NormalizedItem(Fraction(weight * count, total), item.value)
        for weight, item in zip(weights, weighted)
    ]


class AliasTable(Generic[T]):
    """An immutable alias table.

    Slot ``i`` keeps ``values[i]`` with probability ``probabilities[i]`` and
    otherwise reports ``aliases[i]``. Slots that were paired with a large
    item during construction come first, so ``aliases`` is only as long as
    the number of paired slots; every later slot has probability exactly 1
    and never consults an alias.
    """

    __slots__ = ("_aliases", "_probabilities", "_values")

    def __init__(
        self,
        probabilities: Iterable[Fraction],
        values: Iterable[T],
        aliases: Iterable[T],
    ) -> None:
        self._probabilities: tuple[Fraction, ...] = tuple(probabilities)
        self._values: tuple[T, ...] = tuple(values)
        self._aliases: tuple[T, ...] = tuple(aliases)
        if len(self._probabilities) != len(self._values):
            raise ValueError("probabilities and values must have the same length")
        if not self._probabilities:
            raise ValueError("an alias table needs at least one slot")
        if len(self._aliases) > len(self._probabilities):
            raise ValueError("an alias table cannot have more aliases than slots")
        for probability in self._probabilities[len(self._aliases) :]:
            if probability != ONE:
                raise ValueError("slots without an alias must have probability 1")

    @classmethod
    def from_weighted_tuples(
        cls, items: Iterable[WeightedItem[T] | tuple[int, T]]
    ) -> AliasTable[T]:
        """Build a table drawing each value proportionally to its weight."""
        normalized = normalize(items)

        probabilities: list[Fraction] = []
        values: list[T] = []
        aliases: list[T] = []

        # Items below the average weight need topping up by an alias; items
        # at or above it are spread across several slots.
        small: list[NormalizedItem[T]] = []
        large: list[NormalizedItem[T]] = []
        for item in normalized:
            if item.fractional_weight < ONE:
                small.append(item)
            else:
                large.append(item)

        while small and large:
            current_small = small.pop()
            current_large = large.pop()
            probabilities.append(current_small.fractional_weight)
            values.append(current_small.value)
            aliases.append(current_large.value)

            # The large item gives up whatever the small one was short of 1.
            reduced = NormalizedItem(
                (current_large.fractional_weight + current_small.fractional_weight)
                - ONE,
                current_large.value,
            )
            if reduced.fractional_weight < ONE:
                small.append(reduced)
            else:
                large.append(reduced)

        while large:
            probabilities.append(ONE)
            values.append(large.pop().value)

        if small:
            # Only reachable with lossy arithmetic.
            logger.warning(
                "%d small items left over after pairing; forcing probability 1",
                len(small),
            )
        while small:
            probabilities.append(ONE)
            values.append(small.pop().value)

        logger.debug(
            "built alias table with %d slots, %d aliased",
            len(probabilities),
            len(aliases),
        )
        return cls(probabilities, values, aliases)

    @property
    def probabilities(self) -> tuple[Fraction, ...]:
        return self._probabilities

    @property
    def values(self) -> tuple[T, ...]:
        return self._values

    @property
    def aliases(self) -> tuple[T, ...]:
        return self._aliases

    def __len__(self) -> int:
        return len(self._probabilities)

    def __repr__(self) -> str:
        slots = []
        for i, (probability, value) in enumerate(zip(self._probabilities, self._values)):
            if i < len(self._aliases):
                slots.append(f"({probability}, {value!r}, {self._aliases[i]!r})")
            else:
                slots.append(f"({probability}, {value!r})")
        return f"AliasTable([{', '.join(slots)}])"

    def select(self, rng: RandomSource) -> T:
        """Draw one value.

        The die roll and the coin flip are two independent draws from
        ``rng``. The float coin flip is compared exactly against the
        rational threshold.
        """
        index = rng.randrange(len(self._probabilities))
        if rng.random() < self._probabilities[index]:
            return self._values[index]
        return self._aliases[index]

    def select_many(self, rng: RandomSource, k: int) -> list[T]:
        """Draw ``k`` values independently (with replacement)."""
        if k < 0:
            raise ValueError(f"cannot draw a negative number of values: {k}")
        return [self.select(rng) for _ in range(k)]

    def implied_distribution(self) -> dict[T, Fraction]:
        """The exact probability with which :meth:`select` returns each value.

        Values must be hashable. Equal values supplied as separate weighted
        tuples are merged.
        """
        n = len(self._probabilities)
        distribution: dict[Hashable, Fraction] = {}
        for i, (probability, value) in enumerate(zip(self._probabilities, self._values)):
            distribution[value] = distribution.get(value, Fraction(0)) + probability / n
            if i < len(self._aliases) and probability != ONE:
                alias = self._aliases[i]
                distribution[alias] = (
                    distribution.get(alias, Fraction(0)) + (ONE - probability) / n
                )
        return distribution  # type: ignore[return-value]


def build(items: Iterable[WeightedItem[T] | tuple[int, T]]) -> AliasTable[T]:
    """Build an :class:`AliasTable`; see :meth:`AliasTable.from_weighted_tuples`."""
    return AliasTable.from_weighted_tuples(items)


def select(table: AliasTable[T], rng: RandomSource) -> T:
    return table.select(rng)
