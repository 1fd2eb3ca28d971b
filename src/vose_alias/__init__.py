"""Package initialization for vose-alias.

Weighted random sampling over a fixed set of elements using Vose's alias
method: O(n) construction, O(1) per sample.
"""

from vose_alias.errors import (
    AliasConstructionError,
    DistributionNotNormalizedError,
    EmptyInputError,
    InvalidWeightError,
    LengthMismatchError,
)
from vose_alias.random_source import RandomSource
from vose_alias.sampler import VoseAlias
from vose_alias.stats import ChiSquaredResult, chi_squared_test
from vose_alias.tables import TOLERANCE, build_tables, normalize, validate_weights

__version__ = "0.1.0"
__all__ = [
    "TOLERANCE",
    "AliasConstructionError",
    "ChiSquaredResult",
    "DistributionNotNormalizedError",
    "EmptyInputError",
    "InvalidWeightError",
    "LengthMismatchError",
    "RandomSource",
    "VoseAlias",
    "build_tables",
    "chi_squared_test",
    "normalize",
    "validate_weights",
]
