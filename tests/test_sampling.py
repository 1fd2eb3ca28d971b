"""Tests for drawing from a built alias structure."""

import random
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest


class ScriptedRandom:
    """A RandomSource that replays fixed (slot, coin) pairs."""

    def __init__(self, draws: list[tuple[int, float]]) -> None:
        self._draws = list(draws)
        self._coin: float | None = None

    def randrange(self, stop: int) -> int:
        slot, self._coin = self._draws.pop(0)
        assert 0 <= slot < stop
        return slot

    def random(self) -> float:
        assert self._coin is not None, "random() called before randrange()"
        coin, self._coin = self._coin, None
        return coin


def _dyadic_sampler() -> Any:
    from vose_alias import VoseAlias

    # bias == (0.5, 1.0, 0.5, 0.5), alias == (1, 1, 1, 2)
    return VoseAlias("abcd", [0.125, 0.5, 0.25, 0.125])


# =============================================================================
# Branch selection with a controlled source
# =============================================================================


def test_scripted_source_satisfies_protocol() -> None:
    """The test source and the stdlib both count as random sources."""
    from vose_alias import RandomSource

    assert isinstance(ScriptedRandom([]), RandomSource)
    assert isinstance(random.Random(), RandomSource)


def test_coin_below_bias_keeps_slot() -> None:
    """u < bias[i] resolves to element i."""
    sampler = _dyadic_sampler()
    assert sampler.sample(ScriptedRandom([(3, 0.49)])) == "d"
    assert sampler.sample_index(ScriptedRandom([(0, 0.0)])) == 0


def test_coin_at_bias_takes_alias() -> None:
    """u == bias[i] falls through to the alias."""
    sampler = _dyadic_sampler()
    assert sampler.sample(ScriptedRandom([(3, 0.5)])) == "c"
    assert sampler.sample_index(ScriptedRandom([(0, 0.5)])) == 1


def test_full_bias_slot_ignores_alias() -> None:
    """A slot with bias 1 resolves to itself for every u in [0, 1)."""
    sampler = _dyadic_sampler()
    for u in (0.0, 0.5, 0.999999):
        assert sampler.sample(ScriptedRandom([(1, u)])) == "b"


def test_samples_consume_source_in_order() -> None:
    """samples() draws one (slot, coin) pair per element."""
    sampler = _dyadic_sampler()
    source = ScriptedRandom([(0, 0.1), (0, 0.9), (2, 0.2), (2, 0.7)])
    assert sampler.samples(4, source) == ["a", "b", "c", "b"]


def test_zero_weight_never_drawn() -> None:
    """Every coin flip at a zero weight slot goes to its alias."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["never", "always"], [0.0, 1.0])
    for u in (0.0, 0.25, 0.75):
        assert sampler.sample(ScriptedRandom([(0, u)])) == "always"


# =============================================================================
# Sampling with real randomness
# =============================================================================


def test_single_element_always_returned() -> None:
    """The degenerate case returns its only element."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["x"], [1.0])
    rng = random.Random(0)
    assert set(sampler.samples(1000, rng)) == {"x"}


def test_default_source_is_global_random() -> None:
    """Sampling works without passing a source."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["A", "B", "C", "D"], [0.1, 0.4, 0.2, 0.3])
    for _ in range(100):
        assert sampler.sample() in ("A", "B", "C", "D")


def test_returns_elements_not_indices() -> None:
    """Opaque element values come back unchanged."""
    from vose_alias import VoseAlias

    first, second = object(), object()
    sampler = VoseAlias([first, second], [0.5, 0.5])
    drawn = sampler.samples(200, random.Random(1))
    assert {id(d) for d in drawn} <= {id(first), id(second)}


def test_seeded_sources_reproduce() -> None:
    """Equal seeds give equal sample sequences."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["A", "B", "C", "D"], [0.1, 0.4, 0.2, 0.3])
    assert sampler.samples(500, random.Random(7)) == sampler.samples(
        500, random.Random(7)
    )


def test_uniform_frequencies() -> None:
    """Four equal weights are drawn about a quarter of the time each."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["a", "b", "c", "d"], [0.25, 0.25, 0.25, 0.25])
    assert sampler.bias == (1.0, 1.0, 1.0, 1.0)
    counts = Counter(sampler.samples(100_000, random.Random(2)))
    for element in "abcd":
        assert counts[element] / 100_000 == pytest.approx(0.25, abs=0.01)


def test_worked_example_frequencies() -> None:
    """Frequencies converge to [0.1, 0.4, 0.2, 0.3]."""
    from vose_alias import VoseAlias

    weights = [0.1, 0.4, 0.2, 0.3]
    sampler = VoseAlias(["A", "B", "C", "D"], weights)
    counts = Counter(sampler.samples(100_000, random.Random(3)))
    for element, weight in zip("ABCD", weights):
        assert counts[element] / 100_000 == pytest.approx(weight, abs=0.01)


def test_worked_example_chi_squared() -> None:
    """The worked example passes a goodness-of-fit test."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["A", "B", "C", "D"], [0.1, 0.4, 0.2, 0.3])
    result = sampler.test_distribution(50_000, random.Random(4))
    assert result.degrees_of_freedom == 3
    assert result.passes(0.001), f"chi2={result.chi_squared}, p={result.p_value}"


def test_concurrent_readers() -> None:
    """Threads with their own sources can share one structure."""
    from vose_alias import VoseAlias

    sampler = VoseAlias(["A", "B", "C", "D"], [0.1, 0.4, 0.2, 0.3])

    def draw(seed: int) -> list[str]:
        return sampler.samples(2_000, random.Random(seed))

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(draw, range(8)))

    for seed, drawn in enumerate(results):
        assert drawn == sampler.samples(2_000, random.Random(seed))
    assert sampler.probabilities() == pytest.approx([0.1, 0.4, 0.2, 0.3])


# =============================================================================
# Argument checking and helpers
# =============================================================================


def test_samples_zero() -> None:
    """Drawing nothing is allowed."""
    sampler = _dyadic_sampler()
    assert sampler.samples(0) == []


def test_samples_negative_rejected() -> None:
    """A negative sample count is an error."""
    sampler = _dyadic_sampler()
    with pytest.raises(ValueError):
        sampler.samples(-1)


def test_test_distribution_needs_samples() -> None:
    """The goodness-of-fit helper needs at least one draw."""
    sampler = _dyadic_sampler()
    with pytest.raises(ValueError):
        sampler.test_distribution(0)


def test_repr_shows_distribution() -> None:
    """repr lists the elements and the encoded probabilities."""
    sampler = _dyadic_sampler()
    assert repr(sampler) == (
        "VoseAlias(['a', 'b', 'c', 'd'], [0.125, 0.5, 0.25, 0.125])"
    )
