"""Result type for explicit, value-based error handling.

A ``Result`` is exactly one of two frozen variants: ``Success`` holding a
value, or ``Failure`` holding an error. The variant is fixed by the class used
at construction, so ``None`` is a valid payload on either side.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return failure(f"not a number: {raw!r}")
        return success(int(raw))

    parse_port("8080").map_success(lambda p: p + 1).get(str, lambda e: e)

    match parse_port("x"):
        case Success(port):
            ...
        case Failure(error):
            ...

Combinators never catch exceptions raised by the functions passed to them.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Never, Self, TypeIs

from geminus.errors import ResultTypeError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Failure", "Result", "Success", "failure", "is_result", "success"]


@dataclasses.dataclass(frozen=True, slots=True)
class Success[S]:
    """The success variant, holding ``value``."""

    value: S

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    @property
    def success_value(self) -> S:
        """Return the success payload."""
        return self.value

    @property
    def failure_value(self) -> Never:
        """Raise: a success has no failure payload."""
        raise UnwrapError(
            f"Called failure_value on {self!r}",
            hint="Check is_failure() first, or use get() to handle both channels.",
        )

    def if_success(self, effect: Callable[[S], object]) -> Self:
        """Call ``effect`` with the value and return this same instance."""
        effect(self.value)
        return self

    def if_failure(self, effect: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def map_success[S2](self, f: Callable[[S], S2]) -> Success[S2]:
        return Success(f(self.value))

    def map_failure(self, f: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def map[S2](
        self,
        on_success: Callable[[S], S2],
        on_failure: Callable[[Any], object],  # noqa: ARG002
    ) -> Success[S2]:
        return Success(on_success(self.value))

    def get[V](
        self,
        on_success: Callable[[S], V],
        on_failure: Callable[[Any], V],  # noqa: ARG002
    ) -> V:
        return on_success(self.value)

    def flat_success[S2, F2](self, f: Callable[[S], Result[S2, F2]]) -> Result[S2, F2]:
        return _checked(f(self.value), f)

    def flat_failure(self, f: Callable[[Any], Result[Any, Any]]) -> Self:  # noqa: ARG002
        return self

    def flat[S2, F2](
        self,
        on_success: Callable[[S], Result[S2, F2]],
        on_failure: Callable[[Any], Result[S2, F2]],  # noqa: ARG002
    ) -> Result[S2, F2]:
        return _checked(on_success(self.value), on_success)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[F]:
    """The failure variant, holding ``error``.

    ``error`` is caller-defined: an exception, a code, a message or any domain
    object. It can be transformed with ``map_failure`` and recovered into a
    success with ``flat_failure``.
    """

    error: F

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    @property
    def success_value(self) -> Never:
        """Raise: a failure has no success payload."""
        raise UnwrapError(
            f"Called success_value on {self!r}",
            hint="Check is_success() first, or use get() to handle both channels.",
        )

    @property
    def failure_value(self) -> F:
        """Return the failure payload."""
        return self.error

    def if_success(self, effect: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def if_failure(self, effect: Callable[[F], object]) -> Self:
        """Call ``effect`` with the error and return this same instance."""
        effect(self.error)
        return self

    def map_success(self, f: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def map_failure[F2](self, f: Callable[[F], F2]) -> Failure[F2]:
        return Failure(f(self.error))

    def map[F2](
        self,
        on_success: Callable[[Any], object],  # noqa: ARG002
        on_failure: Callable[[F], F2],
    ) -> Failure[F2]:
        return Failure(on_failure(self.error))

    def get[V](
        self,
        on_success: Callable[[Any], V],  # noqa: ARG002
        on_failure: Callable[[F], V],
    ) -> V:
        return on_failure(self.error)

    def flat_success(self, f: Callable[[Any], Result[Any, Any]]) -> Self:  # noqa: ARG002
        return self

    def flat_failure[S2, F2](self, f: Callable[[F], Result[S2, F2]]) -> Result[S2, F2]:
        return _checked(f(self.error), f)

    def flat[S2, F2](
        self,
        on_success: Callable[[Any], Result[S2, F2]],  # noqa: ARG002
        on_failure: Callable[[F], Result[S2, F2]],
    ) -> Result[S2, F2]:
        return _checked(on_failure(self.error), on_failure)


type Result[S, F] = Success[S] | Failure[F]


def success[S](value: S) -> Success[S]:
    """Create a success holding ``value``."""
    return Success(value)


def failure[F](error: F) -> Failure[F]:
    """Create a failure holding ``error``."""
    return Failure(error)


def is_result(obj: object) -> TypeIs[Success[Any] | Failure[Any]]:
    """Return True when ``obj`` is a ``Success`` or a ``Failure``."""
    return isinstance(obj, Success | Failure)


def _checked[R](result: R, mapper: Callable[..., Any]) -> R:
    # flat* hands the mapper's return value straight back; guard the contract.
    if not isinstance(result, Success | Failure):
        name = getattr(mapper, "__qualname__", repr(mapper))
        raise ResultTypeError(
            f"{name} returned {type(result).__name__}; expected Success or Failure",
            hint="Use map_success()/map_failure() for plain values, "
            "or wrap the return value with success()/failure().",
        )
    return result
