# taste/models/credentials.py
"""
Spotify OAuth credential bundle as stored in Secrets Manager.
"""

import base64
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

_KNOWN_KEYS = ("client_id", "client_secret", "refresh_token", "access_token", "expires_at")


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    # Secrets written by hand often use the Zulu suffix
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class SpotifyCredentials:
    """Everything needed to call Spotify and to refresh the access token"""
    client_id: str
    client_secret: str
    refresh_token: str
    access_token: Optional[str] = None
    expires_at: Optional[datetime] = None

    # Keys we do not manage, written back untouched
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_secret(cls, secret: Dict[str, Any]) -> "SpotifyCredentials":
        return cls(
            client_id=secret["client_id"],
            client_secret=secret["client_secret"],
            refresh_token=secret["refresh_token"],
            access_token=secret.get("access_token"),
            expires_at=_parse_timestamp(secret.get("expires_at")),
            extra={k: v for k, v in secret.items() if k not in _KNOWN_KEYS},
        )

    def to_secret(self) -> Dict[str, Any]:
        secret = dict(self.extra)
        secret.update({
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "refresh_token": self.refresh_token,
            "access_token": self.access_token,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        })
        return secret

    def is_expired(self, now: datetime) -> bool:
        """A bundle with no expiry recorded is treated as expired"""
        if self.expires_at is None:
            return True
        return self.expires_at < now

    def basic_auth_header(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def with_refreshed_token(
        self,
        access_token: str,
        now: datetime,
        lifetime: timedelta,
        refresh_token: Optional[str] = None,
    ) -> "SpotifyCredentials":
        return replace(
            self,
            access_token=access_token,
            expires_at=now + lifetime,
            refresh_token=refresh_token or self.refresh_token,
        )
