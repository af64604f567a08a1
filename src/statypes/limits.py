"""
One-sided limits.

Used instead of an Estimate when only a bound is meaningful.
"""

from dataclasses import dataclass

from .confidence import CL
from .core import ArrayLike


@dataclass(frozen=True)
class UpperLimit:
    """Upper limit.

    Usually given for small non-negative values when a difference from
    zero cannot be detected.

    Attributes:
        upper_limit: Upper limit
        cl: Confidence level the limit was computed at
    """
    upper_limit: ArrayLike
    cl: CL

    def __str__(self) -> str:
        return f"< {self.upper_limit:g} @ {self.cl}"


@dataclass(frozen=True)
class LowerLimit:
    """Lower limit.

    Usually given for quantities too large to measure directly,
    e.g. the proton half-life.

    Attributes:
        lower_limit: Lower limit
        cl: Confidence level the limit was computed at
    """
    lower_limit: ArrayLike
    cl: CL

    def __str__(self) -> str:
        return f"> {self.lower_limit:g} @ {self.cl}"
