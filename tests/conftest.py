"""Pytest configuration and fixtures.

Provides marker registration, logging configuration and small call-recording
test doubles for verifying which Result branch ran.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallRecorder:
    """Callable test double that records arguments and returns a fixed value.

    With no ``returns`` configured it echoes its argument, so it can stand in
    for mappers, effects and flat mappers alike.
    """

    name: str = "recorder"
    returns: Any = None
    echo: bool = True
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        if self.returns is not None or not self.echo:
            return self.returns
        return arg

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder():
    """Factory for CallRecorder doubles."""

    def _make(name: str = "recorder", **kwargs: Any) -> CallRecorder:
        return CallRecorder(name=name, **kwargs)

    return _make


# =============================================================================
# Logging & Markers
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Machine-checkable invariants and algebraic laws",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
