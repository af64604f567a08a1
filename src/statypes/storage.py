"""
HDF5 Storage for Estimate Tables

Save/load utilities for persisting lists of point estimates in HDF5
format. A file holds one homogeneous table, column per field:

    NormalErr: point, normal_error
    ConfInt:   point, lower, upper, pvalue

Metadata is stored as a JSON attribute on the root group.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Sequence

import h5py
import numpy as np

from .confidence import CL
from .estimate import ConfInt, Estimate, NormalErr
from .serialization import to_python

logger = logging.getLogger(__name__)

# Default output directory, relative to the working directory
ESTIMATES_DIR = Path("output") / "estimates"


def _serialize_metadata(metadata: dict) -> str:
    """Serialize metadata dict to JSON string for HDF5 attribute storage."""
    return json.dumps({k: to_python(v) for k, v in metadata.items()})


def _estimate_path(name: str, output_dir: Optional[Path]) -> Path:
    if output_dir is None:
        output_dir = ESTIMATES_DIR
    return Path(output_dir) / f"{name}.h5"


def _columns(estimates: Sequence[Estimate]) -> tuple[str, dict[str, np.ndarray]]:
    """Split a homogeneous list of estimates into named columns."""
    if len(estimates) == 0:
        raise ValueError("Cannot save an empty list of estimates")

    kinds = {type(e.error) for e in estimates}
    if len(kinds) != 1:
        names = sorted(k.__name__ for k in kinds)
        raise ValueError(f"Estimates must share one error type, got {names}")
    kind = kinds.pop()

    if kind is NormalErr:
        error_type = "NormalErr"
        fields = {
            "point": lambda e: e.point,
            "normal_error": lambda e: e.error.normal_error,
        }
    elif kind is ConfInt:
        error_type = "ConfInt"
        fields = {
            "point": lambda e: e.point,
            "lower": lambda e: e.error.lower,
            "upper": lambda e: e.error.upper,
            "pvalue": lambda e: e.error.cl.p,
        }
    else:
        raise ValueError(f"Unsupported error type: {kind.__name__}")

    columns = {}
    for key, get in fields.items():
        values = [get(e) for e in estimates]
        # One row per estimate: array-valued fields have no column layout
        for i, value in enumerate(values):
            if np.ndim(value) != 0:
                raise ValueError(
                    f"Estimate {i} has a non-scalar {key} of shape {np.shape(value)}; "
                    "only scalar estimates can be stored"
                )
        columns[key] = np.array(values, dtype=np.float64)
    return error_type, columns


def save_estimates(
    name: str,
    estimates: Sequence[Estimate],
    metadata: Optional[dict[str, Any]] = None,
    output_dir: Optional[Path] = None
) -> Path:
    """Save a table of estimates to an HDF5 file.

    Args:
        name: Table name (used as filename without extension)
        estimates: Estimates sharing one error type
        metadata: Dictionary of metadata (stored as JSON attribute)
        output_dir: Output directory (default: output/estimates/)

    Returns:
        Path to saved file

    Raises:
        ValueError: If the list is empty, mixes error types or holds
            array-valued fields
        TypeError: If the metadata cannot be encoded as JSON; an existing
            table of the same name is left untouched

    Example:
        >>> ests = [pm(10.0, 0.5), pm(12.0, 0.7)]
        >>> save_estimates("masses", ests, {"unit": "GeV"})
    """
    error_type, data = _columns(estimates)

    filepath = _estimate_path(name, output_dir)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    metadata = dict(metadata or {})
    metadata["_saved_at"] = datetime.now().isoformat()
    metadata["_name"] = name
    metadata["error_type"] = error_type
    # Encode before opening: "w" truncates an existing table
    metadata_json = _serialize_metadata(metadata)

    with h5py.File(filepath, "w") as f:
        for key, array in data.items():
            f.create_dataset(key, data=array, compression="gzip")
        f.attrs["metadata"] = metadata_json

    logger.debug("Saved %d %s estimates to %s", len(estimates), error_type, filepath)
    return filepath


def load_estimates(
    name: str,
    output_dir: Optional[Path] = None
) -> tuple[list[Estimate], dict[str, Any]]:
    """Load a table of estimates from an HDF5 file.

    Args:
        name: Table name (filename without extension)
        output_dir: Directory to look in (default: output/estimates/)

    Returns:
        Tuple of (list of estimates, metadata dict)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the stored error type is unknown
    """
    filepath = _estimate_path(name, output_dir)

    if not filepath.exists():
        raise FileNotFoundError(f"Estimates not found: {filepath}")

    with h5py.File(filepath, "r") as f:
        data = {key: f[key][:] for key in f.keys()}
        metadata = json.loads(f.attrs["metadata"])

    error_type = metadata.get("error_type")
    point = data["point"]
    if error_type == "NormalErr":
        estimates = [
            Estimate(float(x), NormalErr(float(dx)))
            for x, dx in zip(point, data["normal_error"])
        ]
    elif error_type == "ConfInt":
        estimates = [
            Estimate(float(x), ConfInt(float(lo), float(hi), CL(float(p))))
            for x, lo, hi, p in zip(point, data["lower"], data["upper"], data["pvalue"])
        ]
    else:
        raise ValueError(f"Unknown error type in {filepath}: {error_type}")

    logger.debug("Loaded %d %s estimates from %s", len(estimates), error_type, filepath)
    return estimates, metadata


def estimates_exist(
    name: str,
    output_dir: Optional[Path] = None
) -> bool:
    """Check if an estimates file exists."""
    return _estimate_path(name, output_dir).exists()


def list_estimates(
    output_dir: Optional[Path] = None
) -> list[str]:
    """List all stored estimate tables (names without .h5 extension)."""
    if output_dir is None:
        output_dir = ESTIMATES_DIR

    output_dir = Path(output_dir)
    if not output_dir.exists():
        return []

    return sorted(f.stem for f in output_dir.glob("*.h5"))


def delete_estimates(
    name: str,
    output_dir: Optional[Path] = None
) -> bool:
    """Delete an estimates file.

    Returns:
        True if file was deleted, False if it didn't exist
    """
    filepath = _estimate_path(name, output_dir)

    if filepath.exists():
        filepath.unlink()
        logger.debug("Deleted %s", filepath)
        return True
    return False
