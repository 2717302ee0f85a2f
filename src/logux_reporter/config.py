"""Environment-driven settings for the reporter.

Purpose
-------
Collect the few knobs a host can set without code changes and optionally
seed them from the nearest ``.env`` file.

Contents
--------
* :class:`ReporterSettings` - resolved settings.
* :func:`load_settings` - read ``LOGUX_REPORTER_*`` variables.
* :func:`enable_dotenv` - load ``.env`` via python-dotenv once per process.

Environment
-----------
``LOGUX_REPORTER_ROOT``
    Project root used for stack traces when the server info carries none.
``LOGUX_REPORTER_COLOR``
    ``auto`` (colour in development only), ``always`` or ``never``.
``LOGUX_REPORTER_DOTENV``
    Truthy value makes the CLI load ``.env`` unless ``--no-dotenv`` is given.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .adapters.theme import COLOR_MODES

logger = logging.getLogger(__name__)

ROOT_ENV = "LOGUX_REPORTER_ROOT"
COLOR_ENV = "LOGUX_REPORTER_COLOR"
DOTENV_ENV_VAR = "LOGUX_REPORTER_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


@dataclass(slots=True, frozen=True)
class ReporterSettings:
    """Settings resolved from the environment."""

    root: str | None = None
    color: str = "auto"

    def __post_init__(self) -> None:
        if self.color not in COLOR_MODES:
            raise ValueError(f"{COLOR_ENV} must be one of {', '.join(COLOR_MODES)}, got {self.color!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> ReporterSettings:
    """Return :class:`ReporterSettings` built from ``environ`` (``os.environ`` by default).

    Examples
    --------
    >>> load_settings({"LOGUX_REPORTER_COLOR": "Never"})
    ReporterSettings(root=None, color='never')
    >>> load_settings({"LOGUX_REPORTER_COLOR": "rainbow"})
    Traceback (most recent call last):
    ...
    ValueError: LOGUX_REPORTER_COLOR must be one of auto, always, never, got 'rainbow'
    """

    source = os.environ if environ is None else environ
    root = source.get(ROOT_ENV) or None
    color = (source.get(COLOR_ENV) or "auto").strip().lower()
    return ReporterSettings(root=root, color=color)


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load `.env`; an explicit CLI choice beats the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(path: str | os.PathLike[str] | None = None) -> Path | None:
    """Load ``path`` or the nearest ``.env`` without overriding set variables.

    Returns the resolved file that was loaded, or ``None`` when no file was
    found. Repeated calls return the first loaded file.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    candidate = str(path) if path is not None else find_dotenv(usecwd=True)
    if not candidate or not Path(candidate).is_file():
        logger.debug("no .env file found")
        return None

    load_dotenv(candidate, override=False)
    _DOTENV_LOADED = Path(candidate).resolve()
    logger.debug("loaded environment from %s", _DOTENV_LOADED)
    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "COLOR_ENV",
    "DOTENV_ENV_VAR",
    "ROOT_ENV",
    "ReporterSettings",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
