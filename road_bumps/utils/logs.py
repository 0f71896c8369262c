from __future__ import annotations

import inspect
import logging
import os
import sys
import warnings
from pathlib import Path

from ._checks import check_verbose

def _init_logger(*, verbose: bool | str | int | None = None) -> logging.Logger:
    """Initialize a logger.

    Assigns sys.stdout as the first handler of the logger.

    Parameters
    ----------
    verbose : int | str | bool | None
        Sets the verbosity level. The verbosity increases gradually between
        ``"CRITICAL"``, ``"ERROR"``, ``"WARNING"``, ``"INFO"`` and ``"DEBUG"``. If
        None is provided, the verbosity is set to ``"WARNING"``. If a bool is
        provided, the verbosity is set to ``"WARNING"`` for False and to ``"INFO"``
        for True.

    Returns
    -------
    logger : Logger
        The initialized logger.
    """
    # create logger
    verbose = "WARNING" if verbose is None else verbose
    logger = logging.getLogger(__package__.split(".utils")[0])
    logger.propagate = False
    logger.setLevel(verbose)

    # add the main handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_LoggingFormatter())
    logger.addHandler(handler)

    return logger


def add_file_handler(
    fname: str | Path,
    mode: str = "a",
    encoding: str | None = None,
    *,
    verbose: bool | str | int | None = None,
) -> None:
    """Add a file handler to the logger.

    Parameters
    ----------
    fname : str | Path
        Path to the file where the logging output is saved.
    mode : str
        Mode in which the file is opened.
    encoding : str | None
        If not None, encoding used to open the file.
    verbose : int | str | bool | None
        Sets the verbosity level of the file handler. If None, the level of the
        logger is used.
    """
    verbose = check_verbose(verbose) if verbose is not None else logger.level
    handler = logging.FileHandler(fname, mode, encoding)
    handler.setFormatter(_LoggingFormatter())
    handler.setLevel(verbose)
    logger.addHandler(handler)


def set_log_level(verbose: bool | str | int | None) -> None:
    """Set the log level for the logger.

    Parameters
    ----------
    verbose : int | str | bool | None
        Sets the verbosity level. The verbosity increases gradually between
        ``"CRITICAL"``, ``"ERROR"``, ``"WARNING"``, ``"INFO"`` and ``"DEBUG"``. If
        None is provided, the verbosity is set to ``"INFO"``. If a bool is
        provided, the verbosity is set to ``"WARNING"`` for False and to ``"INFO"``
        for True.
    """
    verbose = check_verbose(verbose)
    logger.setLevel(verbose)


class _LoggingFormatter(logging.Formatter):
    """Format string Syntax."""

    _formats = {
        logging.DEBUG: "[DEBUG] %(message)s",
        logging.INFO: "[INFO] %(message)s",
        logging.WARNING: "[WARN] %(message)s",
        logging.ERROR: "[ERROR] %(module)s:%(lineno)d: %(message)s",
        logging.CRITICAL: "[CRITICAL] %(module)s:%(lineno)d: %(message)s",
    }

    def format(self, record: logging.LogRecord) -> str:
        formatter = logging.Formatter(self._formats.get(record.levelno, "%(message)s"))
        return formatter.format(record)


def warn(
    message: str,
    category: type[Warning] = RuntimeWarning,
    module: str = "road_bumps",
) -> None:
    """Emit a warning with trace outside the road_bumps namespace.

    This function takes arguments like :func:`warnings.warn`, and raises messages
    using :func:`warnings.warn_explicit` and :meth:`logging.Logger.warning`.

    Parameters
    ----------
    message : str
        Warning message.
    category : instance of Warning
        The warning class. Defaults to ``RuntimeWarning``.
    module : str
        The name of the module emitting the warning.
    """
    root_dir = Path(__file__).parent.parent
    frame = None
    if logger.level <= logging.WARNING:
        frame = inspect.currentframe()
        while frame:
            fname = frame.f_code.co_filename
            lineno = frame.f_lineno
            # the test modules live inside the package tree
            if not fname.startswith(str(root_dir)) or f"{os.sep}tests{os.sep}" in fname:
                break
            frame = frame.f_back
        del frame
        # we need to use this instead of warn(message, category, stacklevel)
        # because we move out of the package source tree
        warnings.warn_explicit(
            message,
            category,
            fname,
            lineno,
            module,
            globals().get("__warningregistry__", {}),
        )
    logger.warning(message)


logger: logging.Logger = _init_logger(verbose="WARNING")
