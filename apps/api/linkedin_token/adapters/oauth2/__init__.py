"""OAuth2 resource client adapters."""

from .base import OAuth2Client, OAuth2TransportError
from .httpx_client import HttpxOAuth2Client
from .mock_client import MockOAuth2Client, RecordedCall, member_documents_for_token

__all__ = [
    "OAuth2Client",
    "OAuth2TransportError",
    "HttpxOAuth2Client",
    "MockOAuth2Client",
    "RecordedCall",
    "member_documents_for_token",
]
