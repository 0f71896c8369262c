"""Peak finding and peak properties in 1D signals."""

from ._diagnostics import Diagnostic, PeakPropertyWarning, emit_diagnostic  # noqa: F401
from ._find import find_peaks  # noqa: F401
from ._maxima import local_maxima_1d  # noqa: F401
from ._properties import peak_prominences, peak_widths  # noqa: F401
from ._select import (  # noqa: F401
    Interval,
    PerSample,
    Scalar,
    Unbounded,
    select_by_peak_distance,
    select_by_property,
    unpack_condition_args,
)
from ._table import PropertyTable  # noqa: F401
