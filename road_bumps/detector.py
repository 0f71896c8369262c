from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.signal import detrend as _detrend

from ._config import (
    BUMP_DISTANCE,
    BUMP_HEIGHT,
    BUMP_PROMINENCE,
    BUMP_WIDTH,
    POTHOLE_DISTANCE,
    POTHOLE_HEIGHT,
    POTHOLE_PROMINENCE,
    POTHOLE_WIDTH,
    REL_HEIGHT,
)
from .peaks import find_peaks
from .utils._checks import check_type, ensure_signal
from .utils._docs import fill_doc
from .utils.logs import logger

if TYPE_CHECKING:
    from typing import Any, Callable

    from numpy.typing import NDArray

    from .peaks import Diagnostic


@dataclass(frozen=True)
class DetectionSettings:
    """Thresholds used to detect one type of road event.

    Parameters
    ----------
    height : float | None
        Minimum deviation at the peak. None disables the condition.
    distance : float | None
        Minimum distance in samples between two events. None disables the
        condition.
    prominence : float | None
        Minimum prominence of the peak. None disables the condition.
    width : float | None
        Minimum width of the peak in samples, measured at ``rel_height``. None
        disables the condition.
    rel_height : float
        Relative height at which the width is measured.
    """

    height: float | None = None
    distance: float | None = None
    prominence: float | None = None
    width: float | None = None
    rel_height: float = REL_HEIGHT

    def __post_init__(self) -> None:
        for name in ("height", "distance", "prominence", "width"):
            check_type(getattr(self, name), ("numeric", None), name)
        check_type(self.rel_height, ("numeric",), "rel_height")
        if self.distance is not None and self.distance < 1:
            raise ValueError(
                "The distance between events must be greater or equal to 1 sample. "
                f"Provided '{self.distance}' is invalid."
            )
        if self.rel_height < 0:
            raise ValueError(
                "The relative height must be positive or null. "
                f"Provided '{self.rel_height}' is invalid."
            )

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for :func:`~road_bumps.peaks.find_peaks`."""
        # prominence is always computed to report it on the events
        prominence = (None, None) if self.prominence is None else self.prominence
        return dict(
            height=self.height,
            distance=self.distance,
            prominence=prominence,
            width=self.width,
            rel_height=self.rel_height,
        )


DEFAULT_BUMP = DetectionSettings(
    height=BUMP_HEIGHT,
    distance=BUMP_DISTANCE,
    prominence=BUMP_PROMINENCE,
    width=BUMP_WIDTH,
)
DEFAULT_POTHOLE = DetectionSettings(
    height=POTHOLE_HEIGHT,
    distance=POTHOLE_DISTANCE,
    prominence=POTHOLE_PROMINENCE,
    width=POTHOLE_WIDTH,
)


@dataclass(frozen=True)
class RoadEvent:
    """A bump or a pothole located on the map.

    Parameters
    ----------
    kind : ``"bump"`` | ``"pothole"``
        Type of event.
    index : int
        Index of the acceleration sample at the peak.
    latitude : float
        Latitude of the sample at the peak.
    longitude : float
        Longitude of the sample at the peak.
    magnitude : float
        Absolute deviation at the peak.
    prominence : float
        Prominence of the peak on the (possibly negated) deviation.
    """

    kind: str
    index: int
    latitude: float
    longitude: float
    magnitude: float
    prominence: float

    def __str__(self) -> str:
        """String representation of the event."""
        return (
            f"{self.kind:<8} sample {self.index:>6}  "
            f"({self.latitude:.6f}, {self.longitude:.6f})  "
            f"magnitude {self.magnitude:.2f}  prominence {self.prominence:.2f}"
        )


@fill_doc
def compute_deviation(z: NDArray[np.float64], detrend: bool = True) -> NDArray:
    """Compute the deviation of the vertical acceleration around its baseline.

    Parameters
    ----------
    %(z)s
    %(detrend)s

    Returns
    -------
    deviation : array of shape (n_samples,)
        The deviation of ``z``.
    """
    z = ensure_signal(z, "z")
    check_type(detrend, (bool,), "detrend")
    if z.size == 0:
        return z
    if detrend and 2 <= z.size:
        return _detrend(z, type="linear")
    return z - z.mean()


@fill_doc
def detect_road_events(
    z: NDArray[np.float64],
    latitude: NDArray[np.float64],
    longitude: NDArray[np.float64],
    *,
    bump: DetectionSettings | None = None,
    pothole: DetectionSettings | None = None,
    detrend: bool = True,
    diagnostics: Callable[[Diagnostic], None] | None = None,
) -> list[RoadEvent]:
    """Detect bumps and potholes in a buffered window of vertical acceleration.

    Bumps are the peaks of the deviation of ``z`` and potholes are the peaks of the
    negated deviation. Each call is independent and processes the entire buffer.

    Parameters
    ----------
    %(z)s
    %(latitude_longitude)s
    %(settings)s
    %(detrend)s
    %(diagnostics)s

    Returns
    -------
    %(events)s
    """
    z = ensure_signal(z, "z")
    latitude = ensure_signal(latitude, "latitude")
    longitude = ensure_signal(longitude, "longitude")
    if not (z.size == latitude.size == longitude.size):
        raise ValueError(
            "Arguments 'z', 'latitude' and 'longitude' must have the same number of "
            f"samples, got {z.size}, {latitude.size} and {longitude.size}."
        )
    bump = DEFAULT_BUMP if bump is None else bump
    pothole = DEFAULT_POTHOLE if pothole is None else pothole
    check_type(bump, (DetectionSettings,), "bump")
    check_type(pothole, (DetectionSettings,), "pothole")

    deviation = compute_deviation(z, detrend)
    events = list()
    for kind, signal, settings in (
        ("bump", deviation, bump),
        ("pothole", -deviation, pothole),
    ):
        peaks, properties = find_peaks(
            signal, diagnostics=diagnostics, **settings.as_kwargs()
        )
        logger.debug("Detected %i %s event(s).", peaks.size, kind)
        for peak, prominence in zip(peaks, properties["prominences"], strict=True):
            events.append(
                RoadEvent(
                    kind=kind,
                    index=int(peak),
                    latitude=float(latitude[peak]),
                    longitude=float(longitude[peak]),
                    magnitude=float(abs(deviation[peak])),
                    prominence=float(prominence),
                )
            )
    events.sort(key=lambda event: event.index)
    logger.info(
        "Detected %i event(s) in a buffer of %i samples.", len(events), z.size
    )
    return events
