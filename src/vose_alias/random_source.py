"""The randomness an alias structure draws on.

Alias structures never own a generator. Each sampling call is handed a
``RandomSource``, and falls back to the interpreter-global ``random`` module
when none is given. Seeded ``random.Random`` instances, one per thread, are
the usual way to get reproducible or concurrent sampling.
"""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce uniform integers and uniform reals."""

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""
        ...

    def random(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        ...


def resolve(rng: RandomSource | None) -> RandomSource:
    """Return ``rng``, or the global ``random`` module if it is None."""
    if rng is None:
        return random  # type: ignore[return-value]
    return rng
