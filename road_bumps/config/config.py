from __future__ import annotations

from configparser import ConfigParser
from pathlib import Path

from ..detector import DetectionSettings
from ..utils._checks import check_type
from ..utils.logs import logger

_SECTIONS: tuple[str, ...] = ("bump", "pothole")
_KEYS: tuple[str, ...] = ("height", "distance", "prominence", "width", "rel_height")


def load_config(fname: str | Path | None = None) -> dict[str, DetectionSettings]:
    """Load the detection settings from a configuration file.

    Parameters
    ----------
    fname : str | Path | None
        Path to the ``.ini`` configuration file. If None, the default
        configuration shipped with the package is loaded.

    Returns
    -------
    config : dict
        The detection settings for the keys ``"bump"`` and ``"pothole"``.

    Notes
    -----
    Each section ``[bump]`` and ``[pothole]`` can define the keys ``height``,
    ``distance``, ``prominence``, ``width`` and ``rel_height``. A missing key or a
    key set to ``none`` disables the corresponding condition.
    """
    check_type(fname, ("path-like", None), "fname")
    fname = Path(__file__).parent / "config.ini" if fname is None else Path(fname)
    if fname.suffix != ".ini":
        raise ValueError(
            f"The configuration file must be an '.ini' file, got '{fname.name}'."
        )
    if not fname.exists():
        raise FileNotFoundError(f"The configuration file '{fname}' does not exist.")

    config = ConfigParser(inline_comment_prefixes=("#", ";"))
    config.optionxform = str
    config.read(str(fname), encoding="utf-8")
    logger.debug("Loading configuration from '%s'.", fname)

    settings = dict()
    for section in _SECTIONS:
        if not config.has_section(section):
            raise ValueError(f"Key '{section}' is missing from configuration.")
        unknown = set(config[section]) - set(_KEYS)
        if len(unknown) != 0:
            raise ValueError(
                f"Unknown key(s) {sorted(unknown)} in section '{section}'. Allowed "
                f"keys are {', '.join(_KEYS)}."
            )
        values = dict()
        for key, value in config[section].items():
            if value.strip().lower() == "none":
                continue
            try:
                values[key] = config[section].getfloat(key)
            except ValueError:
                raise ValueError(
                    f"The value of '{key}' in section '{section}' must be a number or "
                    f"'none', got '{value}'."
                )
        settings[section] = DetectionSettings(**values)
    return settings
