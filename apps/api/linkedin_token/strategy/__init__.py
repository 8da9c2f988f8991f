"""LinkedIn token strategy pipeline."""

from .driver import LinkedInTokenStrategy, TokenRequest, extract_credential
from .fetch import ProfileFetcher
from .gate import AsyncPredicate, NoSkip, ProfileLoadGate, StaticSkip, SyncPredicate, resolve_skip_policy
from .localization import resolve_localized_name
from .normalizer import normalize_profile

__all__ = [
    "LinkedInTokenStrategy",
    "TokenRequest",
    "extract_credential",
    "ProfileFetcher",
    "AsyncPredicate",
    "NoSkip",
    "ProfileLoadGate",
    "StaticSkip",
    "SyncPredicate",
    "resolve_skip_policy",
    "resolve_localized_name",
    "normalize_profile",
]
