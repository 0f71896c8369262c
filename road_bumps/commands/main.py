from __future__ import annotations

import click

from .. import set_log_level
from ..config import load_config
from ..detector import compute_deviation, detect_road_events
from ..io import read_recording, read_signal
from ..peaks import find_peaks
from ._utils import config, fname, no_detrend, plot, verbose


@click.group()
def run():
    """Entry point to detect road events."""


@click.command()
@fname
@config
@no_detrend
@plot
@verbose
def detect(
    fname: str,
    config: str | None,
    no_detrend: bool,
    plot: bool,
    verbose: str,
) -> None:
    """Detect bumps and potholes in a recording."""
    set_log_level(verbose)
    settings = load_config(config)
    z, latitude, longitude = read_recording(fname)
    events = detect_road_events(
        z,
        latitude,
        longitude,
        bump=settings["bump"],
        pothole=settings["pothole"],
        detrend=not no_detrend,
    )
    for event in events:
        click.echo(event)
    n_bumps = sum(event.kind == "bump" for event in events)
    click.echo(f"{n_bumps} bump(s) and {len(events) - n_bumps} pothole(s) detected.")
    if plot:
        from matplotlib import pyplot as plt

        from ..viz import plot_events

        plot_events(compute_deviation(z, not no_detrend), events)
        plt.show(block=True)


@click.command()
@fname
@click.option("--height", help="Minimum peak height.", type=float, default=None)
@click.option(
    "--distance", help="Minimum distance between peaks.", type=float, default=None
)
@click.option("--prominence", help="Minimum peak prominence.", type=float, default=None)
@click.option("--width", help="Minimum peak width.", type=float, default=None)
@click.option(
    "--rel-height",
    help="Relative height at which the width is measured.",
    type=float,
    default=0.0,
    show_default=True,
)
@verbose
def peaks(
    fname: str,
    height: float | None,
    distance: float | None,
    prominence: float | None,
    width: float | None,
    rel_height: float,
    verbose: str,
) -> None:
    """Find the peaks in a single-column signal."""
    set_log_level(verbose)
    x = read_signal(fname)
    idx, properties = find_peaks(
        x,
        height=height,
        distance=distance,
        prominence=prominence,
        width=width,
        rel_height=rel_height,
    )
    keys = properties.keys()
    if len(keys) != 0:
        click.echo("\t".join(["peak"] + keys))
    for k, peak in enumerate(idx):
        values = [f"{properties[key][k]:g}" for key in keys]
        click.echo("\t".join([str(peak)] + values))


run.add_command(detect)
run.add_command(peaks)
