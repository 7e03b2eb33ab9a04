# /privy_lookup/services/privy_client.py
"""
Privy user directory client and the shared httpx client it runs on.
"""
import base64
import logging
from typing import Dict, Optional
import httpx
from privy_lookup.config import PRIVY_TIMEOUT, PrivySettings
from privy_lookup.errors import UpstreamError, UserNotFound
from privy_lookup.models.lookup_models import PrivyUser

# Set up logging
logger = logging.getLogger(__name__)

# Global httpx client, created on startup
http_client: Optional[httpx.AsyncClient] = None

def init_http_client(timeout: float) -> httpx.AsyncClient:
    """Create the process-wide httpx client."""
    global http_client
    http_client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
    logger.info(f"HTTP client ready (timeout={timeout}s)")
    return http_client

async def close_http_client():
    """Close the process-wide httpx client."""
    global http_client
    if http_client is not None:
        await http_client.aclose()
        http_client = None
        logger.info("HTTP client closed")

def get_http_client() -> httpx.AsyncClient:
    """Dependency returning the shared client, creating it if startup has not run."""
    if http_client is None:
        return init_http_client(PRIVY_TIMEOUT)
    return http_client


class PrivyClient:
    """Looks up Privy users with app credentials (HTTP Basic auth)."""

    def __init__(self, settings: PrivySettings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    def _headers(self) -> Dict[str, str]:
        token = base64.b64encode(f"{self.settings.app_id}:{self.settings.app_secret}".encode()).decode()
        return {
            "Content-Type": "application/json",
            "privy-app-id": self.settings.app_id,
            "Authorization": f"Basic {token}",
        }

    async def find_user_by_email(self, email: str) -> PrivyUser:
        """
        Fetch the Privy user linked to an email address.

        Raises UserNotFound on 404 and UpstreamError on any other error status.
        Transport and parse errors are left to the caller.
        """
        response = await self.client.post(
            f"{self.settings.api_url}/users/email/address",
            headers=self._headers(),
            json={"address": email},
            follow_redirects=True,
        )

        if response.status_code == 404:
            logger.info(f"No Privy user for {email}")
            raise UserNotFound(email)

        if not response.is_success:
            logger.error(f"Privy API error: {response.status_code} {response.text}")
            raise UpstreamError(response.status_code, response.reason_phrase)

        return PrivyUser(**response.json())
