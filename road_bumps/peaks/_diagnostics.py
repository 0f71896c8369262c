from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from ..utils._checks import check_value
from ..utils.logs import logger, warn

if TYPE_CHECKING:
    from typing import Callable

    from numpy.typing import NDArray


class PeakPropertyWarning(RuntimeWarning):
    """Calculated property of a peak has an unexpected value."""


@dataclass(frozen=True, eq=False)
class Diagnostic:
    """Non-fatal report about degenerate peak properties.

    Parameters
    ----------
    kind : ``"prominence"`` | ``"width"``
        The property which is degenerate.
    message : str
        Human readable description.
    peaks : array of shape (n_affected,)
        Indices in the signal of the affected peaks.
    """

    kind: str
    message: str
    peaks: NDArray[np.intp] = field(default_factory=lambda: np.array([], np.intp))


def emit_diagnostic(diagnostic: Diagnostic) -> None:
    """Default diagnostics channel, emitting a PeakPropertyWarning."""
    logger.debug(
        "Degenerate %s for peaks %s.", diagnostic.kind, diagnostic.peaks.tolist()
    )
    warn(diagnostic.message, PeakPropertyWarning)


def _report(
    diagnostics: Callable[[Diagnostic], None] | None,
    kind: str,
    peaks: NDArray[np.intp],
) -> None:
    """Deliver a diagnostic about null values of a property to the channel."""
    check_value(kind, ("prominence", "width"), "kind")
    diagnostic = Diagnostic(
        kind=kind,
        message=f"{peaks.size} peak(s) have a {kind} of 0.",
        peaks=peaks,
    )
    (emit_diagnostic if diagnostics is None else diagnostics)(diagnostic)
