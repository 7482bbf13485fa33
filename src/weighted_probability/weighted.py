"""Weighted input records and their normalized form."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Generic, TypeVar

from weighted_probability.errors import MalformedItemError

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedItem(Generic[T]):
    """An item we want to choose with a given weight.

    The weight is a relative frequency: larger means more likely, and only
    its size relative to the other weights in the same batch matters. It is
    normalized against them when the alias table is built.
    """

    weight: int
    value: T

    @classmethod
    def coerce(
        cls, item: WeightedItem[T] | tuple[int, T], index: int = 0
    ) -> WeightedItem[T]:
        """Accept either a ``WeightedItem`` or a plain ``(weight, value)`` pair.

        ``index`` is the item's position in its batch, reported on error.
        """
        if isinstance(item, WeightedItem):
            return item
        try:
            weight, value = item
        except (TypeError, ValueError) as e:
            raise MalformedItemError(index, item) from e
        return cls(weight, value)


# Name used by callers coming from the tuple-based API.
WeightedTuple = WeightedItem


@dataclass(frozen=True)
class NormalizedItem(Generic[T]):
    # fractional_weight = weight * n / total, so the average item sits at exactly 1
    fractional_weight: Fraction
    value: T
