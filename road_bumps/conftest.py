from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib
import numpy as np
import pytest

from .utils.logs import logger

if TYPE_CHECKING:
    from numpy.typing import NDArray


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options."""
    warnings_lines = r"""
    error::
    """
    for warning_line in warnings_lines.split("\n"):
        warning_line = warning_line.strip()
        if warning_line and not warning_line.startswith("#"):
            config.addinivalue_line("filterwarnings", warning_line)
    # setup logging
    logger.propagate = True
    # headless plotting
    matplotlib.use("Agg")


@pytest.fixture
def road() -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Synthetic drive with two bumps and one pothole on a noisy baseline."""
    rng = np.random.default_rng(101)
    n_samples = 1000
    times = np.arange(n_samples)
    z = 9.81 + 0.05 * rng.standard_normal(n_samples) + 1e-4 * times
    for center, amplitude in ((200, 6.0), (500, -7.0), (800, 5.0)):
        z += amplitude * np.exp(-0.5 * ((times - center) / 3) ** 2)
    latitude = np.linspace(46.20, 46.21, n_samples)
    longitude = np.linspace(6.14, 6.15, n_samples)
    return z, latitude, longitude
