"""Terminal authentication outcomes and the host sink they are dispatched to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class AuthenticationSink(Protocol):
    """Host pipeline callbacks. Exactly one is invoked per request."""

    def success(self, user: Any, info: Any = None) -> None: ...

    def fail(self, info: Any = None) -> None: ...

    def error(self, err: BaseException) -> None: ...


@dataclass(frozen=True, slots=True)
class AuthSuccess:
    user: Any
    info: Any = None

    def dispatch(self, sink: AuthenticationSink) -> None:
        sink.success(self.user, self.info)


@dataclass(frozen=True, slots=True)
class AuthFailure:
    info: Any = None

    def dispatch(self, sink: AuthenticationSink) -> None:
        sink.fail(self.info)


@dataclass(frozen=True, slots=True)
class AuthError:
    error: BaseException

    def dispatch(self, sink: AuthenticationSink) -> None:
        sink.error(self.error)


Outcome = AuthSuccess | AuthFailure | AuthError

__all__ = ["AuthError", "AuthFailure", "AuthSuccess", "AuthenticationSink", "Outcome"]
