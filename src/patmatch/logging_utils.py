"""Logging helpers."""

from __future__ import annotations

import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

from patmatch.config.settings import MatchSettings, load_settings

LogProfile = Literal["default", "pretty"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


def _build_pretty_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(raw: str) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse a log filter string.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "info,patmatch.eval=debug" - global INFO, patmatch.eval at DEBUG
        - "debug,patmatch.eval.dispatch=false" - global DEBUG, dispatcher silent

    Returns:
        (global_level, module_filter_dict)
    """
    parts = [p.strip() for p in raw.lower().split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def configure_logging(*, profile: LogProfile = "default", settings: MatchSettings | None = None) -> None:
    """Configure process-level logging once and enable the patmatch logger.

    The level comes from settings.log_filter (PATMATCH_LOG_FILTER).
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    settings = settings or load_settings()
    global_level, module_filter = parse_log_filter(settings.log_filter)

    logger.remove()

    if profile == "pretty":
        logger.add(
            _build_pretty_handler(),
            level=global_level.upper(),
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )
    else:
        logger.add(
            sys.stderr,
            level=global_level.upper(),
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )

    logger.enable("patmatch")
    _CONFIGURED_PROFILE = profile
