"""Per-request decision on whether the LinkedIn profile is loaded at all."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import inspect
import logging
from typing import Any

from linkedin_token.core.logging_safety import safe_log_identifier
from linkedin_token.schemas.profile import NormalizedProfile
from linkedin_token.strategy.fetch import ProfileFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NoSkip:
    def should_skip(self, access_token: str) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class StaticSkip:
    skip: bool

    def should_skip(self, access_token: str) -> bool:
        return self.skip


@dataclass(frozen=True, slots=True)
class SyncPredicate:
    predicate: Callable[[str], Any]

    async def should_skip(self, access_token: str) -> bool:
        result = self.predicate(access_token)
        # Lambdas and partials wrapping coroutine functions still return awaitables.
        if inspect.isawaitable(result):
            result = await result
        return bool(result)


@dataclass(frozen=True, slots=True)
class AsyncPredicate:
    predicate: Callable[[str], Awaitable[Any]]

    async def should_skip(self, access_token: str) -> bool:
        return bool(await self.predicate(access_token))


SkipPolicy = NoSkip | StaticSkip | SyncPredicate | AsyncPredicate


def resolve_skip_policy(value: Any) -> SkipPolicy:
    """Turn a ``skip_user_profile`` option into a skip policy once, at construction."""
    if isinstance(value, (NoSkip, StaticSkip, SyncPredicate, AsyncPredicate)):
        return value
    if value is None or value is False:
        return NoSkip()
    if inspect.iscoroutinefunction(value) or inspect.iscoroutinefunction(getattr(value, "__call__", None)):
        return AsyncPredicate(value)
    if callable(value):
        return SyncPredicate(value)
    return StaticSkip(bool(value))


class ProfileLoadGate:
    def __init__(self, fetcher: ProfileFetcher, policy: SkipPolicy) -> None:
        self._fetcher = fetcher
        self._policy = policy

    @property
    def policy(self) -> SkipPolicy:
        return self._policy

    async def load(self, access_token: str) -> NormalizedProfile | None:
        """Return the fetched profile, or ``None`` when the policy skips loading.

        Predicate exceptions propagate unchanged.
        """
        if isinstance(self._policy, (SyncPredicate, AsyncPredicate)):
            skip = await self._policy.should_skip(access_token)
        else:
            skip = self._policy.should_skip(access_token)

        if skip:
            logger.info("profile.skipped token=%s", safe_log_identifier(access_token, prefix="tok"))
            return None

        return await self._fetcher.fetch_profile(access_token)


__all__ = [
    "AsyncPredicate",
    "NoSkip",
    "ProfileLoadGate",
    "SkipPolicy",
    "StaticSkip",
    "SyncPredicate",
    "resolve_skip_policy",
]
