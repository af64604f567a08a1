"""
Dictionary and JSON encoding for the value types.

Every value is encoded as a tagged dict whose keys follow the field
order of the type, e.g.

    {"type": "ConfInt", "lower": 1.0, "upper": 3.0,
     "cl": {"type": "CL", "p": 0.1}}

Floats survive a JSON round trip bit for bit. CL probabilities are
re-validated on decode.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import numpy as np

from .confidence import CL
from .estimate import ConfInt, Estimate, NormalErr
from .limits import LowerLimit, UpperLimit


def to_python(obj):
    """Convert numpy, datetime and Path values to JSON-ready Python types."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (np.integer, np.floating)):
        return obj.item()
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, Path):
        return str(obj)
    return obj


def _restore(value):
    """Lists come back from JSON as arrays."""
    if isinstance(value, list):
        return np.asarray(value)
    return value


def to_dict(obj) -> dict[str, Any]:
    """Encode a CL, error representation, Estimate or limit as a dict.

    Args:
        obj: Value to encode

    Returns:
        Tagged dict with fields in declaration order

    Raises:
        TypeError: If obj is not one of the value types
    """
    if isinstance(obj, CL):
        return {"type": "CL", "p": to_python(obj.p)}
    elif isinstance(obj, NormalErr):
        return {"type": "NormalErr", "normal_error": to_python(obj.normal_error)}
    elif isinstance(obj, ConfInt):
        return {
            "type": "ConfInt",
            "lower": to_python(obj.lower),
            "upper": to_python(obj.upper),
            "cl": to_dict(obj.cl),
        }
    elif isinstance(obj, Estimate):
        return {
            "type": "Estimate",
            "point": to_python(obj.point),
            "error": to_dict(obj.error),
        }
    elif isinstance(obj, UpperLimit):
        return {
            "type": "UpperLimit",
            "upper_limit": to_python(obj.upper_limit),
            "cl": to_dict(obj.cl),
        }
    elif isinstance(obj, LowerLimit):
        return {
            "type": "LowerLimit",
            "lower_limit": to_python(obj.lower_limit),
            "cl": to_dict(obj.cl),
        }
    raise TypeError(f"Cannot encode object of type {type(obj).__name__}")


def from_dict(d: dict[str, Any]):
    """Decode a value produced by `to_dict`.

    Args:
        d: Tagged dict

    Returns:
        The decoded value

    Raises:
        ValueError: If the type tag is missing or unknown, or a CL
            probability is out of range
    """
    kind = d.get("type")
    if kind == "CL":
        return CL(d["p"])
    elif kind == "NormalErr":
        return NormalErr(_restore(d["normal_error"]))
    elif kind == "ConfInt":
        return ConfInt(_restore(d["lower"]), _restore(d["upper"]), from_dict(d["cl"]))
    elif kind == "Estimate":
        return Estimate(_restore(d["point"]), from_dict(d["error"]))
    elif kind == "UpperLimit":
        return UpperLimit(_restore(d["upper_limit"]), from_dict(d["cl"]))
    elif kind == "LowerLimit":
        return LowerLimit(_restore(d["lower_limit"]), from_dict(d["cl"]))
    elif kind is None:
        raise ValueError("Missing 'type' tag")
    raise ValueError(f"Unknown type tag: {kind}")


def dumps(obj, **kwargs) -> str:
    """Encode a value as a JSON string."""
    return json.dumps(to_dict(obj), **kwargs)


def loads(s: str):
    """Decode a value from a JSON string."""
    return from_dict(json.loads(s))
