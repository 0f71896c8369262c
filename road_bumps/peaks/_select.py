from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from ..utils._checks import check_type

if TYPE_CHECKING:
    from typing import Any

    from numpy.typing import NDArray


class Bound:
    """One side of a peak condition."""

    def resolve(self, peaks: NDArray[np.intp]) -> float | NDArray[np.float64] | None:
        """Resolve the bound for the given peaks.

        Parameters
        ----------
        peaks : array of shape (n_peaks,)
            Indices of peaks in the signal.

        Returns
        -------
        bound : float | array of shape (n_peaks,) | None
            The bound applied to each peak, None if the side is unconstrained.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Unbounded(Bound):
    """Unconstrained side of a condition."""

    def resolve(self, peaks: NDArray[np.intp]) -> None:  # noqa: D102
        return None


@dataclass(frozen=True)
class Scalar(Bound):
    """Single value applied to all peaks."""

    value: float

    def resolve(self, peaks: NDArray[np.intp]) -> float:  # noqa: D102
        return self.value


@dataclass(frozen=True, eq=False)
class PerSample(Bound):
    """Per-sample values, projected onto each peak by its index in the signal."""

    values: NDArray[np.float64]

    def resolve(self, peaks: NDArray[np.intp]) -> NDArray[np.float64]:  # noqa: D102
        return self.values[peaks]


class Interval(NamedTuple):
    """Pair of bounds (lower, upper) of a peak condition."""

    lower: Bound
    upper: Bound


def _ensure_bound(item: Any, n_samples: int, side: str) -> Bound:
    """Convert one side of a condition to a Bound."""
    if isinstance(item, PerSample):
        item = item.values
    elif isinstance(item, Bound):
        return item
    if item is None:
        return Unbounded()
    check_type(item, ("numeric", "array-like"), f"{side} interval border")
    if isinstance(item, (list, tuple, np.ndarray)):
        values = np.asarray(item, dtype=np.float64)
        if values.ndim != 1 or values.size != n_samples:
            raise ValueError(
                f"The array size of the {side} interval border must match the "
                f"signal size ({n_samples}), got {values.shape} instead."
            )
        return PerSample(values)
    return Scalar(float(item))


def ensure_interval(condition: Any, n_samples: int) -> Interval:
    """Convert a peak condition to an Interval.

    Parameters
    ----------
    condition : float | array | tuple | list | Interval
        A number or an array used as lower bound, or a 2-element tuple/list
        ``(lower, upper)`` of the former where either side may be None.
    n_samples : int
        Number of samples in the signal, used to validate per-sample arrays.

    Returns
    -------
    interval : Interval
        The lower and upper bounds.
    """
    if isinstance(condition, (Interval, tuple, list)) and len(condition) == 2:
        lower, upper = condition
    else:
        lower, upper = condition, None
    return Interval(
        _ensure_bound(lower, n_samples, "lower"),
        _ensure_bound(upper, n_samples, "upper"),
    )


def unpack_condition_args(
    interval: Any, x: NDArray[np.float64], peaks: NDArray[np.intp]
) -> tuple[float | NDArray[np.float64] | None, float | NDArray[np.float64] | None]:
    """Parse a peak condition and resolve it for the given peaks.

    Parameters
    ----------
    interval : float | array | tuple | list | Interval
        The peak condition, see :func:`ensure_interval`.
    x : array of shape (n_samples,)
        The signal in which the peaks were found.
    peaks : array of shape (n_peaks,)
        Indices of peaks in ``x``.

    Returns
    -------
    imin, imax : float | array of shape (n_peaks,) | None
        Minimal and maximal value for each peak. None means unconstrained.
    """
    lower, upper = ensure_interval(interval, x.size)
    return lower.resolve(peaks), upper.resolve(peaks)


def select_by_property(
    peak_properties: NDArray[np.float64],
    pmin: float | NDArray[np.float64] | None,
    pmax: float | NDArray[np.float64] | None,
) -> NDArray[np.bool_]:
    """Evaluate where the generic property of peaks conforms to an interval.

    Parameters
    ----------
    peak_properties : array of shape (n_peaks,)
        An array with properties for each peak.
    pmin : float | array of shape (n_peaks,) | None
        Lower interval boundary for ``peak_properties``. None is interpreted as an
        open border.
    pmax : float | array of shape (n_peaks,) | None
        Upper interval boundary for ``peak_properties``. None is interpreted as an
        open border.

    Returns
    -------
    keep : array of shape (n_peaks,)
        A boolean mask evaluating to true where ``peak_properties`` conforms to the
        interval.
    """
    keep = np.ones(peak_properties.size, dtype=bool)
    if pmin is not None:
        keep &= pmin <= peak_properties
    if pmax is not None:
        keep &= peak_properties <= pmax
    return keep


def select_by_peak_distance(
    peaks: NDArray[np.intp], priority: NDArray[np.float64], distance: float
) -> NDArray[np.bool_]:
    """Evaluate which peaks fulfill the distance condition.

    Parameters
    ----------
    peaks : array of shape (n_peaks,)
        Indices of peaks in a signal, sorted in increasing order.
    priority : array of shape (n_peaks,)
        An array matching ``peaks`` used to determine priority of each peak. A
        peak with a higher priority value is kept over one with a lower one.
    distance : float
        Minimal distance in samples that peaks must be spaced, rounded up.

    Returns
    -------
    keep : array of shape (n_peaks,)
        A boolean mask evaluating to true where ``peaks`` fulfill the distance
        condition.

    Notes
    -----
    Peaks of equal priority are processed from the right-most to the left-most.
    """
    peaks_size = peaks.size
    # round up because actual peak distance can only be natural number
    distance_ = math.ceil(distance)
    keep = np.ones(peaks_size, dtype=bool)

    # create map from i to priority sorted indices
    priority_to_position = np.argsort(priority, kind="stable")

    # highest priority first -> iterate in reverse order (decreasing)
    for i in range(peaks_size - 1, -1, -1):
        # translate i to the current peak index in the array of peaks
        j = priority_to_position[i]
        if not keep[j]:
            # skip evaluation for peak already marked as "don't keep"
            continue

        k = j - 1
        # flag "earlier" peaks for removal until minimal distance is exceeded
        while 0 <= k and peaks[j] - peaks[k] < distance_:
            keep[k] = False
            k -= 1

        k = j + 1
        # flag "later" peaks for removal until minimal distance is exceeded
        while k < peaks_size and peaks[k] - peaks[j] < distance_:
            keep[k] = False
            k += 1

    return keep
