"""
Numeric aliases and the standard-normal capability.

This module provides the pieces the value types build on:
- Type aliases for scalars, arrays and samples
- The standard normal distribution used for sigma conversions
- Thin cumulative/quantile wrappers over any scipy frozen distribution
"""

import numpy as np
from scipy import stats
from typing import Union

# Type alias for scalar or array
ArrayLike = Union[float, np.ndarray]

# Opaque sample types: plain 1-d arrays of numbers
Sample = np.ndarray
WeightedSample = np.ndarray  # shape (n, 2): (value, weight) rows
Weights = np.ndarray

# Standard normal N(0, 1), frozen
STANDARD_NORMAL = stats.norm(loc=0.0, scale=1.0)


def cumulative(x: ArrayLike, dist=STANDARD_NORMAL) -> ArrayLike:
    """
    Cumulative distribution function of `dist` at x.

    Parameters
    ----------
    x : float or array
        Point(s) at which to evaluate the CDF
    dist : frozen distribution
        Anything exposing `cdf` (default: standard normal)

    Returns
    -------
    P : float or array
        P(X <= x)
    """
    return dist.cdf(x)


def quantile(p: ArrayLike, dist=STANDARD_NORMAL) -> ArrayLike:
    """
    Quantile (inverse CDF) of `dist` at probability p.

    Parameters
    ----------
    p : float or array
        Probability in [0, 1]
    dist : frozen distribution
        Anything exposing `ppf` (default: standard normal)

    Returns
    -------
    x : float or array
        Value x such that P(X <= x) = p
    """
    return dist.ppf(p)
