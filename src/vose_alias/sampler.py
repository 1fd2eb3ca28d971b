"""The alias structure and its constant time sampler."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

from vose_alias.errors import LengthMismatchError
from vose_alias.random_source import RandomSource, resolve
from vose_alias.stats import ChiSquaredResult, chi_squared_test
from vose_alias.tables import build_tables

T = TypeVar("T")


class VoseAlias(Generic[T]):
    """Weighted random choice over a fixed set of elements in O(1) per draw.

    ``elements[i]`` is drawn with probability ``weights[i]``. The weights must
    already form a probability distribution (see ``tables.normalize`` for
    relative weights). Once built the structure is never modified, so any
    number of threads may sample from it concurrently as long as each passes
    its own random source.

    Raises a subclass of ``AliasConstructionError`` on bad input.
    """

    __slots__ = ("_elements", "_bias", "_alias")

    def __init__(self, elements: Iterable[T], weights: Iterable[float]) -> None:
        elements = tuple(elements)
        weights = tuple(weights)
        if len(elements) != len(weights):
            raise LengthMismatchError(len(elements), len(weights))
        self._bias, self._alias = build_tables(weights)
        self._elements = elements

    @classmethod
    def from_mapping(cls, distribution: Mapping[T, float]) -> "VoseAlias[T]":
        """Build from ``{element: weight}``, keeping the mapping's order."""
        return cls(distribution.keys(), distribution.values())

    @property
    def elements(self) -> tuple[T, ...]:
        return self._elements

    @property
    def bias(self) -> tuple[float, ...]:
        return self._bias

    @property
    def alias(self) -> tuple[int, ...]:
        return self._alias

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"VoseAlias({list(self._elements)!r}, {self.probabilities()!r})"

    def sample_index(self, rng: RandomSource | None = None) -> int:
        """Draw a slot index: one uniform slot, then one biased coin flip."""
        source = resolve(rng)
        i = source.randrange(len(self._bias))
        if source.random() < self._bias[i]:
            return i
        return self._alias[i]

    def sample(self, rng: RandomSource | None = None) -> T:
        """Draw one element."""
        return self._elements[self.sample_index(rng)]

    def samples(self, k: int, rng: RandomSource | None = None) -> list[T]:
        """Draw ``k`` independent elements."""
        if k < 0:
            raise ValueError(f"Cannot draw a negative number of samples ({k})")
        source = resolve(rng)
        return [self.sample(source) for _ in range(k)]

    def probabilities(self) -> list[float]:
        """The distribution the tables encode, one probability per slot.

        Slot ``j`` keeps ``bias[j]`` of its own draws and receives the
        ``1 - bias[i]`` left over from every slot ``i`` aliased to it.
        """
        n = len(self._bias)
        mass = list(self._bias)
        for i, (b, a) in enumerate(zip(self._bias, self._alias)):
            if a != i:
                mass[a] += 1.0 - b
        return [m / n for m in mass]

    def test_distribution(
        self, num_samples: int, rng: RandomSource | None = None
    ) -> ChiSquaredResult:
        """Sample ``num_samples`` times and chi-squared test the frequencies."""
        if num_samples < 1:
            raise ValueError(f"num_samples must be positive, got {num_samples}")
        source = resolve(rng)
        counts = [0] * len(self._bias)
        for _ in range(num_samples):
            counts[self.sample_index(source)] += 1
        return chi_squared_test(counts, self.probabilities())

