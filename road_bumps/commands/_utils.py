import click

fname = click.argument(
    "fname", type=click.Path(exists=True, dir_okay=False, resolve_path=True)
)
config = click.option(
    "--config",
    help="Path to an '.ini' file with the [bump] and [pothole] thresholds.",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
)
verbose = click.option(
    "--verbose",
    help="Verbosity level.",
    type=click.Choice(["DEBUG", "INFO", "WARNING"]),
    default="INFO",
    show_default=True,
)
no_detrend = click.option(
    "--no-detrend", help="Only remove the mean instead of a linear trend.", is_flag=True
)
plot = click.option("--plot", help="Display the detected events.", is_flag=True)
