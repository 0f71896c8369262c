from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..utils._checks import check_type, ensure_int, ensure_peaks, ensure_signal
from ..utils._docs import fill_doc
from ..utils.logs import logger
from ._diagnostics import _report

if TYPE_CHECKING:
    from typing import Callable

    from numpy.typing import NDArray

    from ._diagnostics import Diagnostic


def _ensure_wlen(wlen: int | None) -> int:
    """Convert the window length to the half-window, -1 for the entire signal."""
    if wlen is None:
        return -1
    wlen = ensure_int(wlen, "wlen")
    return wlen if 2 <= wlen else -1


@fill_doc
def peak_prominences(
    x: NDArray[np.float64],
    peaks: NDArray[np.intp],
    wlen: int | None = None,
    *,
    diagnostics: Callable[[Diagnostic], None] | None = None,
) -> tuple[NDArray[np.float64], NDArray[np.intp], NDArray[np.intp]]:
    """Calculate the prominence of each peak in a signal.

    The prominence of a peak measures how much a peak stands out from the
    surrounding baseline of the signal and is defined as the vertical distance
    between the peak and its lowest contour line.

    Parameters
    ----------
    %(x)s
    %(peaks)s
    %(wlen)s
    %(diagnostics)s

    Returns
    -------
    prominences : array of shape (n_peaks,)
        The calculated prominences for each peak in ``peaks``.
    left_bases : array of shape (n_peaks,)
        The index of the lowest sample found on the left of each peak.
    right_bases : array of shape (n_peaks,)
        The index of the lowest sample found on the right of each peak.

    Notes
    -----
    From each peak, the signal is walked in both directions as long as the
    samples are lower or equal to the peak, within the window. The lowest sample
    on each side defines the bases, and the higher of the two bases defines the
    reference level of the prominence.
    """
    x = ensure_signal(x)
    peaks = ensure_peaks(peaks)
    return _peak_prominences(x, peaks, _ensure_wlen(wlen), diagnostics)


def _peak_prominences(
    x: NDArray[np.float64],
    peaks: NDArray[np.intp],
    wlen: int,
    diagnostics: Callable[[Diagnostic], None] | None,
) -> tuple[NDArray[np.float64], NDArray[np.intp], NDArray[np.intp]]:
    prominences = np.empty(peaks.size, dtype=np.float64)
    left_bases = np.empty(peaks.size, dtype=np.intp)
    right_bases = np.empty(peaks.size, dtype=np.intp)

    for peak_nr, peak in enumerate(peaks):
        i_min = 0
        i_max = x.size - 1
        if not i_min <= peak <= i_max:
            raise ValueError(f"Peak {peak} is not a valid index for 'x'.")
        if 2 <= wlen:
            # adjust window around the evaluated peak (within bounds)
            i_min = max(peak - wlen, i_min)
            i_max = min(peak + wlen, i_max)

        # find the left base in interval [i_min, peak]
        i = left_bases[peak_nr] = peak
        left_min = x[peak]
        while i_min <= i and x[i] <= x[peak]:
            if x[i] < left_min:
                left_min = x[i]
                left_bases[peak_nr] = i
            i -= 1

        # find the right base in interval [peak, i_max]
        i = right_bases[peak_nr] = peak
        right_min = x[peak]
        while i <= i_max and x[i] <= x[peak]:
            if x[i] < right_min:
                right_min = x[i]
                right_bases[peak_nr] = i
            i += 1

        prominences[peak_nr] = x[peak] - max(left_min, right_min)

    degenerate = prominences == 0
    if degenerate.any():
        _report(diagnostics, "prominence", peaks[degenerate])
    logger.debug("Computed the prominence of %i peak(s).", peaks.size)
    return prominences, left_bases, right_bases


@fill_doc
def peak_widths(
    x: NDArray[np.float64],
    peaks: NDArray[np.intp],
    rel_height: float = 0.5,
    prominence_data: tuple[NDArray, NDArray, NDArray] | None = None,
    wlen: int | None = None,
    *,
    diagnostics: Callable[[Diagnostic], None] | None = None,
) -> tuple[
    NDArray[np.float64], NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]
]:
    """Calculate the width of each peak in a signal.

    The width is measured at a height of ``x[peak] - prominence * rel_height``,
    between the interpolated positions where the signal crosses this height on
    each side of the peak.

    Parameters
    ----------
    %(x)s
    %(peaks)s
    %(rel_height)s
    %(prominence_data)s
    %(wlen)s
    %(diagnostics)s

    Returns
    -------
    widths : array of shape (n_peaks,)
        The widths for each peak in samples.
    width_heights : array of shape (n_peaks,)
        The height of the contour lines at which the widths were evaluated.
    left_ips : array of shape (n_peaks,)
        Interpolated positions of the left intersection points.
    right_ips : array of shape (n_peaks,)
        Interpolated positions of the right intersection points.
    """
    x = ensure_signal(x)
    peaks = ensure_peaks(peaks)
    check_type(rel_height, ("numeric",), "rel_height")
    if rel_height < 0:
        raise ValueError(
            f"Argument 'rel_height' must be greater or equal to 0, got {rel_height}."
        )
    if prominence_data is None:
        prominence_data = _peak_prominences(
            x, peaks, _ensure_wlen(wlen), diagnostics
        )
    check_type(prominence_data, (tuple, list), "prominence_data")
    if len(prominence_data) != 3:
        raise ValueError(
            "Argument 'prominence_data' must contain the prominences, the left bases "
            "and the right bases."
        )
    prominences, left_bases, right_bases = prominence_data
    prominences = np.asarray(prominences, dtype=np.float64)
    left_bases = ensure_peaks(left_bases, "left_bases")
    right_bases = ensure_peaks(right_bases, "right_bases")
    return _peak_widths(
        x, peaks, float(rel_height), prominences, left_bases, right_bases, diagnostics
    )


def _peak_widths(
    x: NDArray[np.float64],
    peaks: NDArray[np.intp],
    rel_height: float,
    prominences: NDArray[np.float64],
    left_bases: NDArray[np.intp],
    right_bases: NDArray[np.intp],
    diagnostics: Callable[[Diagnostic], None] | None,
) -> tuple[
    NDArray[np.float64], NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]
]:
    if rel_height < 0:
        raise ValueError(
            f"Argument 'rel_height' must be greater or equal to 0, got {rel_height}."
        )
    if not (peaks.size == prominences.size == left_bases.size == right_bases.size):
        raise ValueError(
            "Arrays 'peaks', 'prominences', 'left_bases' and 'right_bases' must have "
            "the same number of elements, got "
            f"{peaks.size}, {prominences.size}, {left_bases.size} and "
            f"{right_bases.size}."
        )

    widths = np.empty(peaks.size, dtype=np.float64)
    width_heights = np.empty(peaks.size, dtype=np.float64)
    left_ips = np.empty(peaks.size, dtype=np.float64)
    right_ips = np.empty(peaks.size, dtype=np.float64)

    for p in range(peaks.size):
        i_min = left_bases[p]
        i_max = right_bases[p]
        peak = peaks[p]
        # validate bounds and order
        if not 0 <= i_min <= peak <= i_max < x.size:
            raise ValueError(f"Prominence data is invalid for peak {peak}.")
        height = width_heights[p] = x[peak] - prominences[p] * rel_height

        # find intersection point on left side
        i = peak
        while i_min < i and height < x[i]:
            i -= 1
        left_ip = float(i)
        if x[i] < height:
            # interpolate if true intersection height is between samples
            left_ip += (height - x[i]) / (x[i + 1] - x[i])

        # find intersection point on right side
        i = peak
        while i < i_max and height < x[i]:
            i += 1
        right_ip = float(i)
        if x[i] < height:
            # interpolate if true intersection height is between samples
            right_ip -= (height - x[i]) / (x[i - 1] - x[i])

        widths[p] = right_ip - left_ip
        left_ips[p] = left_ip
        right_ips[p] = right_ip

    degenerate = widths == 0
    if degenerate.any():
        _report(diagnostics, "width", peaks[degenerate])
    logger.debug(
        "Computed the width of %i peak(s) at a relative height of %.2f.",
        peaks.size,
        rel_height,
    )
    return widths, width_heights, left_ips, right_ips
