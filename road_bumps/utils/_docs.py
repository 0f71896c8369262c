"""Fill function docstrings to avoid redundant docstrings in multiple files.

Inspired from mne: https://mne.tools/stable/index.html
Inspired from mne.utils.docs.py by Eric Larson <larson.eric.d@gmail.com>
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Callable

# ------------------------- Documentation dictionary -------------------------
docdict: dict[str, str] = dict()

# ---------------------------------- verbose ---------------------------------
docdict["verbose"] = """
verbose : int | str | bool | None
    Sets the verbosity level. The verbosity increases gradually between
    ``"CRITICAL"``, ``"ERROR"``, ``"WARNING"``, ``"INFO"`` and ``"DEBUG"``. If None
    is provided, the verbosity is set to ``"WARNING"``. If a bool is provided, the
    verbosity is set to ``"WARNING"`` for False and to ``"INFO"`` for True."""

# ---------------------------------- signal ----------------------------------
docdict["x"] = """
x : array of shape (n_samples,)
    A signal with peaks. The signal is copied and never modified."""

docdict["peaks"] = """
peaks : array of shape (n_peaks,)
    Indices of peaks in ``x``."""

docdict["wlen"] = """
wlen : int | None
    Half-length in samples of the window around each peak in which its base
    is searched, i.e. the window is ``[peak - wlen, peak + wlen]`` clamped to the
    signal bounds. Values smaller than 2 and None select the entire signal."""

docdict["rel_height"] = """
rel_height : float
    Relative height at which the peak width is measured as a fraction of its
    prominence. ``0`` measures the width at the peak height and ``1`` at the
    higher of the two bases. Must be positive or null."""

docdict["diagnostics"] = """
diagnostics : callable | None
    Channel receiving a :class:`~road_bumps.peaks.Diagnostic` for degenerate
    results (null prominence or null width). The computation proceeds and the
    result is returned in all cases. If None, the diagnostic is emitted as a
    :class:`~road_bumps.peaks.PeakPropertyWarning` and logged."""

docdict["prominence_data"] = """
prominence_data : tuple of 3 arrays | None
    The output of :func:`~road_bumps.peaks.peak_prominences` called with the same
    ``x`` and ``peaks``, i.e. ``(prominences, left_bases, right_bases)``. If None,
    it is computed internally with ``wlen``."""

docdict["condition"] = """
Each of the peak conditions accepts None, a number, an array matching ``x`` or
a 2-element tuple/list of the former. The first element is always interpreted
as the minimal and the second, if supplied, as the maximal required value. Use
the open interval ``(None, None)`` to compute a property without excluding any
peak."""

# ---------------------------------- events ----------------------------------
docdict["z"] = """
z : array of shape (n_samples,)
    Vertical-axis acceleration buffer, ordered in time."""

docdict["latitude_longitude"] = """
latitude : array of shape (n_samples,)
    Latitude of each acceleration sample.
longitude : array of shape (n_samples,)
    Longitude of each acceleration sample."""

docdict["detrend"] = """
detrend : bool
    If True, a linear trend is removed from ``z`` to obtain the deviation. If
    False, only the mean is removed."""

docdict["settings"] = """
bump : DetectionSettings | None
    Thresholds used to detect bumps on the deviation. If None, the defaults
    from ``road_bumps._config`` are used.
pothole : DetectionSettings | None
    Thresholds used to detect potholes on the negated deviation. If None, the
    defaults from ``road_bumps._config`` are used."""

docdict["events"] = """
events : list of RoadEvent
    The detected bump and pothole events, sorted by sample index."""

# ------------------------- Documentation functions --------------------------
docdict_indented: dict[int, dict[str, str]] = dict()


def fill_doc(f: Callable) -> Callable:
    """Fill a docstring with docdict entries.

    Parameters
    ----------
    f : callable
        The function to fill the docstring of (modified in place).

    Returns
    -------
    f : callable
        The function, potentially with an updated __doc__.
    """
    docstring = f.__doc__
    if not docstring:
        return f

    lines = docstring.splitlines()
    indent_count = _indentcount_lines(lines)

    try:
        indented = docdict_indented[indent_count]
    except KeyError:
        indent = " " * indent_count
        docdict_indented[indent_count] = indented = dict()

        for name, docstr in docdict.items():
            lines = [
                indent + line if k != 0 else line
                for k, line in enumerate(docstr.strip().splitlines())
            ]
            indented[name] = "\n".join(lines)

    try:
        f.__doc__ = docstring % indented
    except (TypeError, ValueError, KeyError) as exp:
        funcname = f.__name__
        funcname = docstring.split("\n")[0] if funcname is None else funcname
        raise RuntimeError(f"Error documenting {funcname}:\n{str(exp)}")

    return f


def _indentcount_lines(lines: list[str]) -> int:
    """Minimum indent for all lines in line list, the first line excluded."""
    indent = sys.maxsize
    for k, line in enumerate(lines):
        if k == 0:
            continue
        line_stripped = line.lstrip()
        if line_stripped:
            indent = min(indent, len(line) - len(line_stripped))
    if indent == sys.maxsize:
        return 0
    return indent
