from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from matplotlib import pyplot as plt

from .utils._checks import check_type, ensure_signal

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from numpy.typing import NDArray

    from .detector import RoadEvent

_COLORS: dict[str, str] = {"bump": "tab:red", "pothole": "tab:blue"}


def plot_events(
    deviation: NDArray[np.float64],
    events: list[RoadEvent],
    *,
    ax: Axes | None = None,
) -> Figure:
    """Plot the vertical acceleration deviation and the detected events.

    Parameters
    ----------
    deviation : array of shape (n_samples,)
        Deviation of the vertical acceleration, as used for the detection.
    events : list of RoadEvent
        The detected events.
    ax : Axes | None
        Matplotlib axes to draw on. If None, a new figure is created.

    Returns
    -------
    fig : Figure
        The matplotlib figure.
    """
    deviation = ensure_signal(deviation, "deviation")
    check_type(events, (list, tuple), "events")
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4), layout="constrained")
    else:
        fig = ax.get_figure()
    ax.plot(np.arange(deviation.size), deviation, color="black", linewidth=0.8)
    for kind, color in _COLORS.items():
        idx = [event.index for event in events if event.kind == kind]
        if len(idx) == 0:
            continue
        ax.scatter(idx, deviation[idx], color=color, label=kind, zorder=3)
    ax.axhline(0, color="gray", linestyle="--", linewidth=0.5)
    ax.set_xlabel("Sample")
    ax.set_ylabel("Vertical deviation (m/s²)")
    if any(event.kind in _COLORS for event in events):
        ax.legend(loc="upper right")
    return fig
