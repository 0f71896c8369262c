from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..utils._checks import check_type, ensure_signal
from ..utils._docs import fill_doc
from ..utils.logs import logger
from ._maxima import local_maxima_1d
from ._properties import _ensure_wlen, _peak_prominences, _peak_widths
from ._select import (
    ensure_interval,
    select_by_peak_distance,
    select_by_property,
    unpack_condition_args,
)
from ._table import PropertyTable

if TYPE_CHECKING:
    from typing import Any, Callable

    from numpy.typing import NDArray

    from ._diagnostics import Diagnostic


def _apply_mask(
    keep: NDArray[np.bool_], peaks: NDArray[np.intp], properties: PropertyTable
) -> tuple[NDArray[np.intp], PropertyTable]:
    """Filter the peaks and every property with the same mask."""
    return peaks[keep], properties.select(keep)


@fill_doc
def find_peaks(
    x: NDArray[np.float64],
    height: Any = None,
    distance: float | None = None,
    prominence: Any = None,
    width: Any = None,
    plateau_size: Any = None,
    wlen: int | None = None,
    rel_height: float = 0.0,
    *,
    diagnostics: Callable[[Diagnostic], None] | None = None,
) -> tuple[NDArray[np.intp], PropertyTable]:
    """Find peaks inside a signal based on peak properties.

    This function takes a 1D array and finds all local maxima by simple comparison
    of neighboring values. Optionally, a subset of these peaks can be selected by
    specifying conditions for a peak's properties.

    Parameters
    ----------
    %(x)s
    height : float | array | tuple | None
        Required height of peaks.
    distance : float | None
        Required minimal horizontal distance (>= 1) in samples between neighboring
        peaks. Smaller peaks are removed first until the condition is fulfilled for
        all remaining peaks.
    prominence : float | array | tuple | None
        Required prominence of peaks.
    width : float | array | tuple | None
        Required width of peaks in samples, measured at ``rel_height``.
    plateau_size : float | array | tuple | None
        Required size of the flat top of peaks in samples.
    %(wlen)s
        Used for the prominence and width conditions.
    %(rel_height)s
        Used only if ``width`` is given.
    %(diagnostics)s

    Returns
    -------
    peaks : array of shape (n_peaks,)
        Indices of peaks in ``x`` that satisfy all given conditions, in increasing
        order.
    properties : PropertyTable
        The properties of the returned peaks which were calculated as intermediate
        results during evaluation of the specified conditions:

        * ``"plateau_sizes"``, ``"left_edges"``, ``"right_edges"`` if
          ``plateau_size`` is given.
        * ``"peak_heights"`` if ``height`` is given.
        * ``"prominences"``, ``"left_bases"``, ``"right_bases"`` if
          ``prominence`` or ``width`` is given.
        * ``"widths"``, ``"width_heights"``, ``"left_ips"``, ``"right_ips"`` if
          ``width`` is given.

    Notes
    -----
    %(condition)s

    The conditions are evaluated in the order: plateau size, height, distance,
    prominence and width. Every peak removed by a condition is also removed from
    all the properties computed so far.
    """
    x = ensure_signal(x)
    if distance is not None:
        check_type(distance, ("numeric",), "distance")
        if distance < 1:
            raise ValueError(
                f"Argument 'distance' must be greater or equal to 1, got {distance}."
            )
    check_type(rel_height, ("numeric",), "rel_height")
    if rel_height < 0:
        raise ValueError(
            f"Argument 'rel_height' must be greater or equal to 0, got {rel_height}."
        )
    wlen = _ensure_wlen(wlen)
    # parse all conditions before any computation
    conditions = {
        name: None if condition is None else ensure_interval(condition, x.size)
        for name, condition in (
            ("plateau_size", plateau_size),
            ("height", height),
            ("prominence", prominence),
            ("width", width),
        )
    }

    peaks, left_edges, right_edges = local_maxima_1d(x)
    properties = PropertyTable()
    logger.debug(
        "Found %i local maxima in a signal of %i samples.", peaks.size, x.size
    )

    if conditions["plateau_size"] is not None:
        # evaluate plateau size
        plateau_sizes = right_edges - left_edges + 1
        pmin, pmax = unpack_condition_args(conditions["plateau_size"], x, peaks)
        properties = (
            properties.add("plateau_sizes", plateau_sizes, peaks.size)
            .add("left_edges", left_edges, peaks.size)
            .add("right_edges", right_edges, peaks.size)
        )
        keep = select_by_property(plateau_sizes, pmin, pmax)
        peaks, properties = _apply_mask(keep, peaks, properties)

    if conditions["height"] is not None:
        # evaluate height condition
        peak_heights = x[peaks]
        hmin, hmax = unpack_condition_args(conditions["height"], x, peaks)
        properties = properties.add("peak_heights", peak_heights, peaks.size)
        keep = select_by_property(peak_heights, hmin, hmax)
        peaks, properties = _apply_mask(keep, peaks, properties)

    if distance is not None:
        # evaluate distance condition
        keep = select_by_peak_distance(peaks, x[peaks], distance)
        peaks, properties = _apply_mask(keep, peaks, properties)

    if conditions["prominence"] is not None or conditions["width"] is not None:
        # calculate prominence (required for both conditions)
        prominences, left_bases, right_bases = _peak_prominences(
            x, peaks, wlen, diagnostics
        )
        properties = (
            properties.add("prominences", prominences, peaks.size)
            .add("left_bases", left_bases, peaks.size)
            .add("right_bases", right_bases, peaks.size)
        )

    if conditions["prominence"] is not None:
        # evaluate prominence condition
        pmin, pmax = unpack_condition_args(conditions["prominence"], x, peaks)
        keep = select_by_property(properties["prominences"], pmin, pmax)
        peaks, properties = _apply_mask(keep, peaks, properties)

    if conditions["width"] is not None:
        # calculate widths
        widths, width_heights, left_ips, right_ips = _peak_widths(
            x,
            peaks,
            float(rel_height),
            properties["prominences"],
            properties["left_bases"],
            properties["right_bases"],
            diagnostics,
        )
        properties = (
            properties.add("widths", widths, peaks.size)
            .add("width_heights", width_heights, peaks.size)
            .add("left_ips", left_ips, peaks.size)
            .add("right_ips", right_ips, peaks.size)
        )
        # evaluate width condition
        wmin, wmax = unpack_condition_args(conditions["width"], x, peaks)
        keep = select_by_property(widths, wmin, wmax)
        peaks, properties = _apply_mask(keep, peaks, properties)

    logger.debug("Retained %i peak(s).", peaks.size)
    return peaks, properties
