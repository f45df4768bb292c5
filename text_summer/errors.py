from __future__ import annotations
from typing import Optional
from .datatypes import ProbabilityVector


class SummarizerError(Exception):
    """Base class for errors raised by text_summer."""


class NonConvergenceError(SummarizerError):
    """
    PageRank ran out of iterations before every node was stable in the same round.

    The last probability vector is kept on the exception for inspection; it is
    not a valid ranking.
    """

    def __init__(self, iterations: int, tolerance: float, last: Optional[ProbabilityVector] = None):
        self.iterations = iterations
        self.tolerance = tolerance
        self.last = dict(last or {})
        super().__init__(
            f"PageRank did not converge within {iterations} iterations (tolerance={tolerance})"
        )
