# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any

import logging
import traceback

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)

LOGGER_NAME = "simple_html"


class JsonFormatter(_JsonFormatter):
    """Emits records as JSON, with exceptions expanded into a nested object."""

    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        _, exc_value, _ = ei
        return None if exc_value is None else describe_exception(exc_value)


def describe_exception(exc: BaseException) -> dict[str, Any]:
    """
    Turn an exception into a JSON-friendly dict, innermost frame first.

    An explicit ``raise ... from`` cause is followed first; otherwise the
    implicit context is followed unless it was suppressed.
    """
    chained = exc.__cause__
    implicit = chained is None and not exc.__suppress_context__ and exc.__context__ is not None
    if implicit:
        chained = exc.__context__

    frames = traceback.extract_tb(exc.__traceback__)

    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "traceback": [
            {"source": f"{frame.filename}:{frame.lineno}", "method": frame.name, "code": frame.line}
            for frame in reversed(frames)
        ],
        "cause": None if chained is None else describe_exception(chained),
        "implicit": implicit,
    }


def configure_logging(level: str | int = logging.INFO, *, local: bool = False) -> logging.Logger:
    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonFormatter(
            "{asctime}{levelname}{name}{message}",
            style="{",
            json_indent=2 if local else None,
        ),
    )
    handler.setLevel(level)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JsonFormatter):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
