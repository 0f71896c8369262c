from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from ._config import CSV_COLUMNS, CSV_DELIMITER
from .utils._checks import check_type
from .utils.logs import logger

if TYPE_CHECKING:
    from numpy.typing import NDArray


def _ensure_path(fname: str | Path) -> Path:
    check_type(fname, ("path-like",), "fname")
    fname = Path(fname)
    if not fname.exists():
        raise FileNotFoundError(f"The file '{fname}' does not exist.")
    return fname


def read_recording(
    fname: str | Path,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Read a recording of geolocated vertical acceleration samples.

    Parameters
    ----------
    fname : str | Path
        Path to a CSV file with a header row containing at least the columns
        ``latitude``, ``longitude`` and ``z``, one row per sample.

    Returns
    -------
    z : array of shape (n_samples,)
        Vertical-axis acceleration.
    latitude : array of shape (n_samples,)
        Latitude of each sample.
    longitude : array of shape (n_samples,)
        Longitude of each sample.
    """
    fname = _ensure_path(fname)
    data = np.genfromtxt(
        fname, delimiter=CSV_DELIMITER, names=True, dtype=np.float64, ndmin=1
    )
    names = data.dtype.names or ()
    missing = [column for column in CSV_COLUMNS if column not in names]
    if len(missing) != 0:
        raise ValueError(
            f"The column(s) {', '.join(missing)} are missing from '{fname.name}'. "
            f"Found: {', '.join(names)}."
        )
    logger.info("Loaded %i samples from '%s'.", data.size, fname)
    latitude, longitude, z = (data[column] for column in CSV_COLUMNS)
    return z, latitude, longitude


def read_signal(fname: str | Path) -> NDArray[np.float64]:
    """Read a single-column signal.

    Parameters
    ----------
    fname : str | Path
        Path to a text file with one sample per line.

    Returns
    -------
    x : array of shape (n_samples,)
        The signal.
    """
    fname = _ensure_path(fname)
    x = np.loadtxt(fname, dtype=np.float64, ndmin=1)
    if x.ndim != 1:
        raise ValueError(
            f"The file '{fname.name}' must contain a single column, got "
            f"{x.shape[1]} columns."
        )
    logger.info("Loaded %i samples from '%s'.", x.size, fname)
    return x
