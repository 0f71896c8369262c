from __future__ import annotations

# the peak detection replicates scipy.signal.find_peaks
# https://docs.scipy.org/doc/scipy/reference/generated/scipy.signal.find_peaks.html
# thresholds are expressed on the vertical acceleration deviation in m/s²
BUMP_HEIGHT: float | None = 2.5
BUMP_DISTANCE: float | None = 25  # in samples
BUMP_PROMINENCE: float | None = 2.0
BUMP_WIDTH: float | None = None  # in samples
POTHOLE_HEIGHT: float | None = 3.0
POTHOLE_DISTANCE: float | None = 25  # in samples
POTHOLE_PROMINENCE: float | None = 2.5
POTHOLE_WIDTH: float | None = None  # in samples
# fraction of the prominence at which the widths are measured
REL_HEIGHT: float = 0.5

# CSV input of the command line interface
CSV_COLUMNS: tuple[str, str, str] = ("latitude", "longitude", "z")
CSV_DELIMITER: str = ","
