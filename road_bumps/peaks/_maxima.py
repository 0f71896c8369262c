from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


def local_maxima_1d(
    x: NDArray[np.float64],
) -> tuple[NDArray[np.intp], NDArray[np.intp], NDArray[np.intp]]:
    """Find local maxima in a 1D array.

    This function finds all local maxima in a 1D array and returns the indices for
    their edges and midpoints (rounded down for even plateau sizes).

    Parameters
    ----------
    x : array of shape (n_samples,)
        The array to search for local maxima.

    Returns
    -------
    midpoints : array of shape (n_maxima,)
        Indices of midpoints of local maxima in ``x``.
    left_edges : array of shape (n_maxima,)
        Indices of edges to the left of local maxima in ``x``.
    right_edges : array of shape (n_maxima,)
        Indices of edges to the right of local maxima in ``x``.

    Notes
    -----
    A maxima is defined as one or more samples of equal value that are surrounded
    on both sides by at least one smaller sample. The first and last samples of
    ``x`` can never be maxima.
    """
    midpoints = list()
    left_edges = list()
    right_edges = list()

    i = 1  # pointer to current sample, first one can't be maxima
    i_max = x.size - 1  # last sample can't be maxima
    while i < i_max:
        # test if previous sample is smaller
        if x[i - 1] < x[i]:
            i_ahead = i + 1  # index to look ahead of current sample
            # find next sample that is unequal to x[i]
            while i_ahead < i_max and x[i_ahead] == x[i]:
                i_ahead += 1
            # maxima is found if next unequal sample is smaller than x[i]
            if x[i_ahead] < x[i]:
                left_edges.append(i)
                right_edges.append(i_ahead - 1)
                midpoints.append((i + i_ahead - 1) // 2)
                # skip samples that can't be maximum
                i = i_ahead
        i += 1

    return (
        np.array(midpoints, dtype=np.intp),
        np.array(left_edges, dtype=np.intp),
        np.array(right_edges, dtype=np.intp),
    )
