"""Construction of the bias and alias tables.

This is Vose's linear time variant of Walker's alias method. Each weight is
scaled by ``n`` so the average scaled weight is 1. Slots lighter than that
are topped up with mass borrowed from a heavy slot, which becomes their
alias. See https://www.keithschwarz.com/darts-dice-coins/ for a walkthrough.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from numbers import Real

from vose_alias.errors import (
    DistributionNotNormalizedError,
    EmptyInputError,
    InvalidWeightError,
)

logger = logging.getLogger(__name__)

# Weights must sum to 1 within this much to be accepted. Part of the public
# contract: changing it changes which inputs construct.
TOLERANCE = 1e-6


def _checked_weights(weights: Iterable[float]) -> tuple[float, ...]:
    result = []
    for i, w in enumerate(weights):
        if isinstance(w, bool) or not isinstance(w, Real):
            raise InvalidWeightError(i, w, "not a real number")
        w = float(w)
        if math.isnan(w):
            raise InvalidWeightError(i, w, "NaN")
        if math.isinf(w):
            raise InvalidWeightError(i, w, "infinite")
        if w < 0:
            raise InvalidWeightError(i, w, "negative")
        result.append(w)
    if not result:
        raise EmptyInputError()
    return tuple(result)


def validate_weights(weights: Iterable[float]) -> tuple[float, ...]:
    """Check that ``weights`` is a probability distribution.

    Returns the weights as a tuple of floats. Raises ``EmptyInputError``,
    ``InvalidWeightError`` or ``DistributionNotNormalizedError``. Nothing is
    corrected: a distribution that is off by more than ``TOLERANCE`` is
    rejected, not rescaled.
    """
    checked = _checked_weights(weights)
    total = math.fsum(checked)
    if abs(total - 1.0) > TOLERANCE:
        raise DistributionNotNormalizedError(total, TOLERANCE)
    return checked


def normalize(weights: Iterable[float]) -> list[float]:
    """Divide every weight by their total.

    For callers holding relative weights. Construction never does this
    implicitly.
    """
    checked = _checked_weights(weights)
    total = math.fsum(checked)
    if total == 0:
        raise DistributionNotNormalizedError(total, TOLERANCE)
    return [w / total for w in checked]


def build_tables(
    weights: Sequence[float],
) -> tuple[tuple[float, ...], tuple[int, ...]]:
    """Build the ``(bias, alias)`` tables for ``weights``.

    ``bias[i]`` is the probability that a draw landing on slot ``i`` resolves
    to ``i`` itself, otherwise it resolves to ``alias[i]``. Slots that never
    borrow keep ``bias[i] == 1`` and ``alias[i] == i``.

    Both worklists are stacks. A scaled weight of exactly 1 counts as heavy,
    so the light stack only ever holds values strictly below 1.
    """
    checked = validate_weights(weights)
    n = len(checked)
    p = [w * n for w in checked]

    light: list[int] = []
    heavy: list[int] = []
    for i, scaled in enumerate(p):
        if scaled < 1.0:
            light.append(i)
        else:
            heavy.append(i)

    bias = [1.0] * n
    alias = list(range(n))
    aliased = 0

    while light and heavy:
        s = light.pop()
        g = heavy.pop()
        bias[s] = p[s]
        alias[s] = g
        aliased += 1
        p[g] = p[g] - (1.0 - p[s])
        if p[g] < 1.0:
            light.append(g)
        else:
            heavy.append(g)

    # Whatever is left over holds (numerically) exactly one unit of mass.
    for r in light + heavy:
        bias[r] = 1.0
        alias[r] = r

    logger.debug("Built alias tables for %d slot(s), %d aliased", n, aliased)
    return tuple(bias), tuple(alias)
