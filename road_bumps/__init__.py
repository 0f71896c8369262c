"""Detection of road bumps and potholes from vertical acceleration peaks."""

from .detector import DetectionSettings, RoadEvent, detect_road_events  # noqa: F401
from .peaks import find_peaks, peak_prominences, peak_widths  # noqa: F401
from .utils.logs import add_file_handler, logger, set_log_level  # noqa: F401

__version__ = "0.1.0"
