"""
Point estimates and their errors.

An Estimate pairs a point value with one error representation:
- NormalErr: symmetric 1-sigma error
- ConfInt: asymmetric interval given as deltas from the point, with the
  confidence level it was computed at

Every error representation, and Estimate itself, can be rescaled by an
exactly known factor with `scale`.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .confidence import CL, get_n_sigma
from .core import ArrayLike


@dataclass(frozen=True)
class NormalErr:
    """Normal error stored as 1-sigma.

    It can be recomputed for any confidence level, so no CL is stored.
    The magnitude is expected to be non-negative but this is not checked.
    """
    normal_error: ArrayLike

    def scale(self, a: ArrayLike) -> "NormalErr":
        # Magnitude only: the sign of the factor drops out
        return NormalErr(abs(a) * self.normal_error)


@dataclass(frozen=True)
class ConfInt:
    """Asymmetric confidence interval [x - lower, x + upper].

    Attributes:
        lower: Distance from the point estimate down to the lower bound
        upper: Distance from the point estimate up to the upper bound
        cl: Confidence level the interval was computed at

    Deltas are meant to be non-negative; this is not enforced.
    """
    lower: ArrayLike
    upper: ArrayLike
    cl: CL

    def scale(self, a: ArrayLike) -> "ConfInt":
        if a >= 0:
            return ConfInt(a * self.lower, a * self.upper, self.cl)
        # Negating the point swaps which side is below and which above
        return ConfInt(-a * self.upper, -a * self.lower, self.cl)


ErrorRepr = Union[NormalErr, ConfInt]


@dataclass(frozen=True)
class Estimate:
    """A point estimate and its error estimate.

    Attributes:
        point: Point estimate
        error: Error representation (NormalErr or ConfInt)
    """
    point: ArrayLike
    error: ErrorRepr

    def scale(self, a: ArrayLike) -> "Estimate":
        return Estimate(a * self.point, self.error.scale(a))

    def __str__(self) -> str:
        if isinstance(self.error, NormalErr):
            return f"{self.point:g} ± {self.error.normal_error:g}"
        if isinstance(self.error, ConfInt):
            return (
                f"{self.point:g} (-{self.error.lower:g}, +{self.error.upper:g})"
                f" @ {self.error.cl}"
            )
        return repr(self)


def scale(a: ArrayLike, x):
    """Scale an error representation or estimate by an exactly known factor.

    Args:
        a: Multiplicative factor
        x: NormalErr, ConfInt or Estimate

    Returns:
        New value of the same type

    Raises:
        TypeError: If x has no scaling rule
    """
    if not hasattr(x, "scale"):
        raise TypeError(f"Cannot scale object of type {type(x).__name__}")
    return x.scale(a)


# =============================================================================
# Constructors
# =============================================================================

def estimate_norm_err(x: ArrayLike, dx: ArrayLike) -> Estimate:
    """Estimate with a symmetric 1-sigma error.

    Args:
        x: Central estimate
        dx: 1-sigma error

    Returns:
        Estimate(x, NormalErr(dx))
    """
    return Estimate(x, NormalErr(dx))


# Plus-or-minus: pm(10.0, 0.5) reads as 10.0 +/- 0.5
pm = estimate_norm_err


def estimate_from_err(
    x: ArrayLike,
    errors: Tuple[ArrayLike, ArrayLike],
    cl: CL,
) -> Estimate:
    """Estimate from a point and asymmetric errors.

    Args:
        x: Central estimate
        errors: (lower, upper) deltas from the central estimate
        cl: Confidence level of the interval

    Returns:
        Estimate(x, ConfInt(lower, upper, cl))
    """
    ldx, udx = errors
    return Estimate(x, ConfInt(ldx, udx, cl))


def estimate_from_interval(
    x: ArrayLike,
    interval: Tuple[ArrayLike, ArrayLike],
    cl: CL,
) -> Estimate:
    """Estimate from a point and the absolute endpoints of an interval.

    Args:
        x: Central estimate
        interval: (low, high) interval bounds
        cl: Confidence level of the interval

    Returns:
        Estimate(x, ConfInt(x - low, high - x, cl))
    """
    lx, ux = interval
    return Estimate(x, ConfInt(x - lx, ux - x, cl))


def normal_to_conf_int(estimate: Estimate, cl: CL) -> Estimate:
    """
    Recompute a normal error as a symmetric interval at a given CL.

    The half-width is n * sigma, where n = get_n_sigma(cl) is the
    two-sided number of sigmas for that confidence level.

    Parameters
    ----------
    estimate : Estimate
        Estimate backed by NormalErr
    cl : CL
        Target confidence level

    Returns
    -------
    estimate : Estimate
        Same point, ConfInt error at `cl`
    """
    if not isinstance(estimate.error, NormalErr):
        raise TypeError(
            f"normal_to_conf_int needs a NormalErr estimate, got {type(estimate.error).__name__}"
        )
    half_width = get_n_sigma(cl) * estimate.error.normal_error
    return Estimate(estimate.point, ConfInt(half_width, half_width, cl))


# =============================================================================
# Accessors
# =============================================================================

def _conf_int_of(estimate: Estimate, where: str) -> ConfInt:
    if not isinstance(estimate.error, ConfInt):
        raise TypeError(
            f"{where} needs a ConfInt estimate, got {type(estimate.error).__name__}"
        )
    return estimate.error


def confidence_interval(estimate: Estimate) -> Tuple[ArrayLike, ArrayLike]:
    """Absolute interval endpoints (x - lower, x + upper)."""
    ci = _conf_int_of(estimate, "confidence_interval")
    return (estimate.point - ci.lower, estimate.point + ci.upper)


def asym_errors(estimate: Estimate) -> Tuple[ArrayLike, ArrayLike]:
    """Lower and upper deltas of a ConfInt estimate."""
    ci = _conf_int_of(estimate, "asym_errors")
    return (ci.lower, ci.upper)
