"""
Confidence levels and p-values.

A single type, CL, serves two purposes:

1. For confidence intervals it is the probability that the true value
   lies OUTSIDE the interval. Intervals are built for confidence close
   to 1, so the complement 1 - p is stored to avoid rounding errors,
   e.g. CL(0.05) is the 95% confidence level.
2. For statistical tests it is the p-value of the test.

Ordering is inverted relative to the wrapped probability: a CL is
larger when it describes greater confidence or significance, which
corresponds to a smaller wrapped value.
"""

from dataclasses import dataclass

from .core import ArrayLike, STANDARD_NORMAL, cumulative, quantile


def _check_probability(p, where: str) -> None:
    # Written so that NaN fails too
    if not (0 <= p <= 1):
        raise ValueError(f"{where}: probability is out of [0, 1] range, got {p}")


@dataclass(frozen=True)
class CL:
    """Confidence level stored as 1 - confidence (equivalently a p-value).

    Use `conf_level` or `p_value` to build one; constructing CL(p)
    directly takes the wrapped probability as is.

    Attributes:
        p: Wrapped probability, 0 <= p <= 1
    """
    p: float

    def __post_init__(self):
        _check_probability(self.p, "CL")

    # Comparisons delegate to the wrapped value with operands swapped
    def __lt__(self, other):
        if not isinstance(other, CL):
            return NotImplemented
        return self.p > other.p

    def __le__(self, other):
        if not isinstance(other, CL):
            return NotImplemented
        return self.p >= other.p

    def __gt__(self, other):
        if not isinstance(other, CL):
            return NotImplemented
        return self.p < other.p

    def __ge__(self, other):
        if not isinstance(other, CL):
            return NotImplemented
        return self.p <= other.p

    def __repr__(self) -> str:
        return f"CL({self.p!r})"

    def __str__(self) -> str:
        return f"{100 * self.cl:g}% CL"

    def format(self, decimals: int = 1) -> str:
        """Format as 'confidence% CL' with fixed decimals."""
        return f"{100 * self.cl:.{decimals}f}% CL"

    @property
    def cl(self) -> float:
        """Confidence level, 1 - p."""
        return get_cl(self)

    @property
    def pvalue(self) -> float:
        """Wrapped value read as a p-value."""
        return get_pvalue(self)

    @property
    def sigma(self) -> float:
        """Two-sided normal-approximation significance in sigmas."""
        return get_n_sigma(self)

    @property
    def sigma1(self) -> float:
        """One-sided normal-approximation significance in sigmas."""
        return get_n_sigma1(self)


# =============================================================================
# As confidence level / p-value
# =============================================================================

def conf_level(p: float) -> CL:
    """Construct a confidence level from the confidence itself.

    >>> conf_level(0.90)
    CL(0.09999999999999998)

    Args:
        p: Confidence, between 0 and 1

    Returns:
        CL wrapping 1 - p

    Raises:
        ValueError: If p is outside [0, 1]
    """
    _check_probability(p, "conf_level")
    return CL(1 - p)


def p_value(p: float) -> CL:
    """Construct a CL from a p-value.

    Args:
        p: p-value, between 0 and 1

    Returns:
        CL wrapping p

    Raises:
        ValueError: If p is outside [0, 1]
    """
    _check_probability(p, "p_value")
    return CL(p)


def get_cl(cl: CL) -> float:
    """Confidence level, 1 - p."""
    return 1 - cl.p


def get_pvalue(cl: CL) -> float:
    """Wrapped probability read as a p-value."""
    return cl.p


def cl_max(a: CL, b: CL) -> CL:
    """Greater of two CLs, i.e. the one with the smaller wrapped value."""
    return CL(min(a.p, b.p))


def cl_min(a: CL, b: CL) -> CL:
    """Lesser of two CLs, i.e. the one with the larger wrapped value."""
    return CL(max(a.p, b.p))


# Common confidence levels
CL90 = CL(0.10)
CL95 = CL(0.05)
CL99 = CL(0.01)


# =============================================================================
# Normal approximation
# =============================================================================

def n_sigma(n: float, dist=STANDARD_NORMAL) -> CL:
    """
    CL expressed in sigmas.

    N sigma corresponds to the probability mass within +/- N standard
    deviations of a normal distribution, so the wrapped value is the
    two-tailed probability outside that range:

        p = 2 * Phi(-n)

    This correspondence holds for the normal distribution only. Real
    distributions are usually only approximately normal, especially in
    the far tails.

    Parameters
    ----------
    n : float
        Number of sigmas, must be positive
    dist : frozen distribution
        Distribution supplying the CDF (default: standard normal)

    Returns
    -------
    cl : CL
        Confidence level for n sigma

    Raises
    ------
    ValueError
        If n <= 0
    """
    if not n > 0:
        raise ValueError(f"n_sigma: non-positive number of sigma, got {n}")
    return CL(float(2 * cumulative(-n, dist)))


def n_sigma1(n: float, dist=STANDARD_NORMAL) -> CL:
    """
    CL expressed in sigmas for a one-tailed hypothesis.

    p = Phi(-n), the probability of a value below -n sigma.

    Parameters
    ----------
    n : float
        Number of sigmas, must be positive
    dist : frozen distribution
        Distribution supplying the CDF (default: standard normal)

    Returns
    -------
    cl : CL
        One-sided confidence level for n sigma

    Raises
    ------
    ValueError
        If n <= 0
    """
    if not n > 0:
        raise ValueError(f"n_sigma1: non-positive number of sigma, got {n}")
    return CL(float(cumulative(-n, dist)))


def get_n_sigma(cl: CL, dist=STANDARD_NORMAL) -> ArrayLike:
    """Express a CL in sigmas (two-sided): -Phi^{-1}(p / 2)."""
    return -quantile(cl.p / 2, dist)


def get_n_sigma1(cl: CL, dist=STANDARD_NORMAL) -> ArrayLike:
    """Express a CL in sigmas (one-sided): -Phi^{-1}(p)."""
    return -quantile(cl.p, dist)
