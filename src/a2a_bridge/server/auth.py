"""Inbound credential checks.

Two credential channels are accepted: ``Authorization: Bearer <token>`` and
the raw secret in ``X-Webhook-Secret``.  Both are compared against the
configured secret in constant time.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass

AUTHORIZATION_HEADER = "authorization"
FALLBACK_SECRET_HEADER = "x-webhook-secret"
_BEARER_PREFIX = "Bearer "


def constant_time_equals(candidate: str, secret: str) -> bool:
    """Compare two strings without leaking where, or whether, lengths differ.

    Both sides are hashed to fixed-length SHA-256 digests first, so the
    comparison loop always runs over 32 bytes.
    """
    candidate_digest = hashlib.sha256(candidate.encode("utf-8")).digest()
    secret_digest = hashlib.sha256(secret.encode("utf-8")).digest()
    return hmac.compare_digest(candidate_digest, secret_digest)


def extract_bearer(authorization: str | None) -> str:
    """The token of a ``Bearer`` header, or ``""``."""
    if authorization and authorization.startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX) :].strip()
    return ""


@dataclass(frozen=True)
class Credentials:
    """Transport-level credentials presented with an inbound request."""

    bearer: str = ""
    fallback_secret: str = ""

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Credentials:
        """Read both channels from *headers* (lower-cased names)."""
        return cls(
            bearer=extract_bearer(headers.get(AUTHORIZATION_HEADER)),
            fallback_secret=headers.get(FALLBACK_SECRET_HEADER, ""),
        )

    @property
    def present(self) -> bool:
        return bool(self.bearer or self.fallback_secret)


class SecretAuthenticator:
    """Checks :class:`Credentials` against the configured secret.

    An empty secret disables authentication: every request is accepted.
    """

    def __init__(self, secret: str) -> None:
        self._secret = secret

    @property
    def enabled(self) -> bool:
        return bool(self._secret)

    def is_authorized(self, credentials: Credentials) -> bool:
        if not self._secret:
            return True
        # Both channels are always evaluated.
        bearer_ok = bool(credentials.bearer) and constant_time_equals(
            credentials.bearer, self._secret
        )
        fallback_ok = bool(credentials.fallback_secret) and constant_time_equals(
            credentials.fallback_secret, self._secret
        )
        return bearer_ok or fallback_ok
