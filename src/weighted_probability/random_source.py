"""The randomness the sampler consumes.

Sampling never reaches for a global generator: callers inject anything that
looks like :class:`random.Random`, which keeps draws reproducible under a
seeded generator and lets tests feed exact values.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """A uniform random source.

    ``random.Random`` instances, ``random.SystemRandom`` and the ``random``
    module itself all satisfy this protocol.
    """

    def randrange(self, stop: int) -> int:
        """Return a uniformly distributed integer in ``[0, stop)``."""
        ...

    def random(self) -> float:
        """Return a uniformly distributed float in ``[0, 1)``."""
        ...
