"""Logging effects for ``if_success`` / ``if_failure`` hooks.

The Result container never logs by itself. These factories build effects that
callers attach explicitly:

    load(path).if_failure(log_failure("config load failed: %s"))
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["log_failure", "log_success"]

log = logging.getLogger(__name__)

# Any %-conversion, mapping keys included; "%%" is a literal percent sign.
_SPECIFIER = re.compile(
    r"%(?:\([^)]*\))?[-#0 +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[diouxXeEfFgGcrsa%]"
)
_PAYLOAD_SPECIFIER = re.compile(r"%[-#0 +]*\d*(?:\.\d+)?[sr]")
_LITERAL_PERCENT = re.compile(r"%%")


def _validate_message(message: str) -> None:
    specifiers = _SPECIFIER.findall(_LITERAL_PERCENT.sub("", message))
    if len(specifiers) != 1 or not _PAYLOAD_SPECIFIER.fullmatch(specifiers[0]):
        raise ValueError(
            "log message must contain exactly one %s or %r placeholder and no other "
            f"conversions, got {specifiers}: {message!r}"
        )


def log_success(
    message: str,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Callable[[object], None]:
    """Return an effect that logs a success payload.

    Args:
        message: %-style format string with one placeholder for the payload.
        logger: Target logger; defaults to this module's logger.
        level: Logging level for the record.
    """
    _validate_message(message)
    target = logger if logger is not None else log

    def effect(value: object) -> None:
        target.log(level, message, value)

    return effect


def log_failure(
    message: str,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.WARNING,
) -> Callable[[object], None]:
    """Return an effect that logs a failure payload.

    Exception payloads are attached as ``exc_info`` so handlers render their
    traceback.
    """
    _validate_message(message)
    target = logger if logger is not None else log

    def effect(error: object) -> None:
        exc_info = error if isinstance(error, BaseException) else None
        target.log(level, message, error, exc_info=exc_info)

    return effect
