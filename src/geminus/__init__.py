"""geminus: a two-variant Result type for explicit error handling.

Public API:
    - success() / failure(): Construct a Result
    - Success / Failure: The two variants (usable in ``match``)
    - Result: Type alias ``Success[S] | Failure[F]``
    - log_success() / log_failure(): Logging effects for hooks
"""

from __future__ import annotations

import logging

from geminus.errors import GeminusError, ResultTypeError, UnwrapError
from geminus.observe import log_failure, log_success
from geminus.result import Failure, Result, Success, failure, is_result, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("geminus-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("geminus").addHandler(logging.NullHandler())

__all__ = [
    "Failure",
    "GeminusError",
    "Result",
    "ResultTypeError",
    "Success",
    "UnwrapError",
    "failure",
    "is_result",
    "log_failure",
    "log_success",
    "success",
]
