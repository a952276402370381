"""
Caller Verification - NegocIA
negocia/services/auth_service.py

Resolves a bearer credential to a caller identity through the external
identity service. Session handling itself lives in that service.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from negocia.config import Settings, get_settings
from negocia.core.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    user_id: str
    email: Optional[str] = None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the credential from an ``Authorization: Bearer ...`` header, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class CallerVerifier:
    """verify_caller(token) -> CallerIdentity, or raises UnauthorizedException."""

    async def verify_caller(self, token: Optional[str]) -> CallerIdentity:
        raise NotImplementedError


class SupabaseCallerVerifier(CallerVerifier):
    """Checks the token against ``GET {SUPABASE_URL}/auth/v1/user``."""

    def __init__(self, settings: Settings = None, transport: httpx.AsyncBaseTransport = None):
        self.settings = settings or get_settings()
        self.transport = transport

    @property
    def user_url(self) -> Optional[str]:
        if not self.settings.SUPABASE_URL:
            return None
        return f"{self.settings.SUPABASE_URL}/auth/v1/user"

    async def verify_caller(self, token: Optional[str]) -> CallerIdentity:
        if not token:
            raise UnauthorizedException()

        anon_key = self.settings.SUPABASE_ANON_KEY
        if not self.user_url or anon_key is None:
            logger.error("Identity service not configured (SUPABASE_URL / SUPABASE_ANON_KEY)")
            raise UnauthorizedException()

        headers = {
            "apikey": anon_key.get_secret_value(),
            "Authorization": f"Bearer {token}",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.AUTH_TIMEOUT_SECONDS,
                transport=self.transport,
            ) as client:
                resp = await client.get(self.user_url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Identity service unreachable: {e}")
            raise UnauthorizedException() from e

        if resp.status_code != 200:
            logger.info(f"Identity service rejected caller ({resp.status_code})")
            raise UnauthorizedException()

        try:
            user = resp.json()
        except ValueError as e:
            raise UnauthorizedException() from e

        if not isinstance(user, dict) or not user.get("id"):
            raise UnauthorizedException()

        return CallerIdentity(user_id=str(user["id"]), email=user.get("email"))
