"""Terminal output for forge-init.

Progress goes to stdout and problems to stderr, both through ``rich``.
Warnings and errors carry a ``warning:``/``error:`` prefix so they stay
recognizable with colour disabled.

The threshold comes from ``--log-level`` (via ``set_level``) or the
``FORGE_INIT_LOG_LEVEL`` environment variable and defaults to ``info``.
Colour is disabled by ``--no-color``, ``NO_COLOR`` or ``FORGE_INIT_NO_COLOR``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import IntEnum

from rich.console import Console
from rich.text import Text

LEVEL_ENV_VAR = "FORGE_INIT_LOG_LEVEL"
NO_COLOR_ENV_VARS = ("NO_COLOR", "FORGE_INIT_NO_COLOR")


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50

    @classmethod
    def parse(cls, value: str | None) -> LogLevel:
        """Map a level name (case-insensitive, ``warn`` accepted) to a level.

        Unknown or empty names fall back to ``INFO``.

        Example:
            >>> LogLevel.parse(" Warn ")
            <LogLevel.WARNING: 40>
            >>> LogLevel.parse("loud")
            <LogLevel.INFO: 30>
        """
        name = (value or "").strip().upper()
        if name == "WARN":
            name = "WARNING"
        return cls.__members__.get(name, cls.INFO)


LOG_LEVEL_NAMES = tuple(level.name.lower() for level in LogLevel)

_STYLES = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
_PREFIXES = {LogLevel.WARNING: "warning: ", LogLevel.ERROR: "error: "}


@dataclass
class _LogState:
    level: LogLevel | None = None
    no_color: bool = False


_state = _LogState()


def configured_level() -> LogLevel:
    if _state.level is None:
        _state.level = LogLevel.parse(os.environ.get(LEVEL_ENV_VAR))
    return _state.level


def set_level(value: str | None) -> None:
    _state.level = LogLevel.parse(value)


def set_no_color(value: bool) -> None:
    """Disable colour regardless of the environment (``False`` restores detection)."""
    _state.no_color = value


def color_disabled() -> bool:
    return _state.no_color or any(os.environ.get(name) for name in NO_COLOR_ENV_VARS)


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def emit(
    level: LogLevel,
    message: str,
    *,
    style: str | None = None,
    stderr: bool | None = None,
    prefix: str | None = None,
) -> None:
    """Print ``message`` at ``level`` when the threshold allows it.

    Args:
        level: Severity; ``WARNING`` and above go to stderr by default.
        message: Text printed verbatim after the level prefix (no markup).
        style: Rich style overriding the level's default.
        stderr: Force the output stream.
        prefix: Replaces the level prefix (``warning: ``, ``error: ``).
    """
    if not is_enabled(level):
        return
    to_stderr = level >= LogLevel.WARNING if stderr is None else stderr
    console = Console(
        file=sys.stderr if to_stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=color_disabled(),
    )
    lead = _PREFIXES.get(level, "") if prefix is None else prefix
    text = Text(lead + message, style=style or _STYLES.get(level, ""))
    console.print(text)


def trace(message: str) -> None:
    emit(LogLevel.TRACE, message)


def debug(message: str) -> None:
    emit(LogLevel.DEBUG, message)


def info(message: str) -> None:
    emit(LogLevel.INFO, message)


def success(message: str) -> None:
    emit(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    emit(LogLevel.ERROR, message)


def hint(message: str) -> None:
    """Print a follow-up suggestion under an error."""
    emit(LogLevel.ERROR, message, style="yellow", prefix="hint: ")
