"""Errors raised when an alias structure cannot be built.

Every error is raised from construction; sampling a built structure never
fails. All of them subclass ``ValueError`` so callers that only care about
bad input can catch that.
"""


class AliasConstructionError(ValueError):
    """Base class for rejected construction input."""


class LengthMismatchError(AliasConstructionError):
    def __init__(self, num_elements: int, num_weights: int) -> None:
        self.num_elements = num_elements
        self.num_weights = num_weights
        super().__init__(
            f"Got {num_elements} element(s) but {num_weights} weight(s); "
            "both sequences must have the same length"
        )


class EmptyInputError(AliasConstructionError):
    def __init__(self) -> None:
        super().__init__("Cannot build an alias structure from zero elements")


class InvalidWeightError(AliasConstructionError):
    def __init__(self, index: int, weight: object, reason: str) -> None:
        self.index = index
        self.weight = weight
        super().__init__(f"Weight at index {index} ({weight!r}) is {reason}")


class DistributionNotNormalizedError(AliasConstructionError):
    def __init__(self, total: float, tolerance: float) -> None:
        self.total = total
        self.tolerance = tolerance
        super().__init__(
            f"Weights sum to {total!r}, which is not within {tolerance!r} of 1"
        )
