"""Exceptions raised while building an alias table."""


class AliasCreationError(ValueError):
    """An alias table could not be built from the given weighted tuples."""

    def __init__(self, message: str = "no weighted tuples were provided") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidWeightError(AliasCreationError):
    """A weight was not a non-negative integer."""

    def __init__(self, index: int, weight: object) -> None:
        super().__init__(
            f"weight at index {index} must be a non-negative integer, got {weight!r}"
        )
        self.index = index
        self.weight = weight


class ZeroTotalWeightError(AliasCreationError):
    """Every weight was zero, so there is nothing to normalize against."""

    def __init__(self, count: int) -> None:
        super().__init__(f"the {count} weighted tuples provided have a total weight of zero")
        self.count = count


class MalformedItemError(AliasCreationError):
    """An item was neither a weighted item nor a ``(weight, value)`` pair."""

    def __init__(self, index: int, item: object) -> None:
        super().__init__(
            f"item at index {index} must be a (weight, value) pair, got {item!r}"
        )
        self.index = index
        self.item = item
