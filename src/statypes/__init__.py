"""
Statistical Value Types

Immutable types for expressing statistical confidence: confidence
levels and p-values with sigma conversions, point estimates with
normal errors or asymmetric confidence intervals, and one-sided limits.
"""

from .core import (
    ArrayLike,
    Sample,
    WeightedSample,
    Weights,
    STANDARD_NORMAL,
    cumulative,
    quantile,
)

from .confidence import (
    CL,
    # As confidence level
    conf_level,
    get_cl,
    CL90,
    CL95,
    CL99,
    # As p-value
    p_value,
    get_pvalue,
    cl_max,
    cl_min,
    # Normal approximation
    n_sigma,
    n_sigma1,
    get_n_sigma,
    get_n_sigma1,
)

from .estimate import (
    Estimate,
    NormalErr,
    ConfInt,
    scale,
    estimate_norm_err,
    pm,
    estimate_from_err,
    estimate_from_interval,
    normal_to_conf_int,
    confidence_interval,
    asym_errors,
)

from .limits import (
    UpperLimit,
    LowerLimit,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ArrayLike",
    "Sample",
    "WeightedSample",
    "Weights",
    "STANDARD_NORMAL",
    "cumulative",
    "quantile",
    # Confidence levels
    "CL",
    "conf_level",
    "get_cl",
    "CL90",
    "CL95",
    "CL99",
    "p_value",
    "get_pvalue",
    "cl_max",
    "cl_min",
    "n_sigma",
    "n_sigma1",
    "get_n_sigma",
    "get_n_sigma1",
    # Estimates
    "Estimate",
    "NormalErr",
    "ConfInt",
    "scale",
    "estimate_norm_err",
    "pm",
    "estimate_from_err",
    "estimate_from_interval",
    "normal_to_conf_int",
    "confidence_interval",
    "asym_errors",
    # Limits
    "UpperLimit",
    "LowerLimit",
]
