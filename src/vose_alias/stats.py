"""Goodness-of-fit checking for sampled frequencies."""

from collections.abc import Sequence
from dataclasses import dataclass

from scipy.stats import chisquare


@dataclass(frozen=True)
class ChiSquaredResult:
    """Outcome of a Pearson chi-squared test."""

    chi_squared: float
    degrees_of_freedom: int
    p_value: float

    def passes(self, alpha: float = 0.05) -> bool:
        """True if the observations are consistent at significance ``alpha``."""
        return self.p_value >= alpha


def chi_squared_test(
    counts: Sequence[int], probabilities: Sequence[float]
) -> ChiSquaredResult:
    """Test observed ``counts`` against expected ``probabilities``.

    Categories with zero probability are left out of the statistic, but a
    single observation in one of them fails the test outright.
    """
    if len(counts) != len(probabilities):
        raise ValueError(
            f"Got {len(counts)} count(s) for {len(probabilities)} probabilities"
        )
    possible = [(c, p) for c, p in zip(counts, probabilities) if p > 0]
    impossible = any(c > 0 for c, p in zip(counts, probabilities) if p <= 0)
    dof = max(len(possible) - 1, 0)
    if impossible:
        return ChiSquaredResult(float("inf"), dof, 0.0)
    total = sum(c for c, _ in possible)
    if dof == 0 or total == 0:
        return ChiSquaredResult(0.0, dof, 1.0)

    # chisquare requires matching totals; drift in the encoded mass is tiny
    mass = sum(p for _, p in possible)
    observed = [c for c, _ in possible]
    expected = [p / mass * total for _, p in possible]
    result = chisquare(observed, expected)
    return ChiSquaredResult(float(result.statistic), dof, float(result.pvalue))
