# /privy_lookup/services/lookup_client.py
"""
Client for the /api/lookup-user endpoint.

Every failure, HTTP or network, comes back as a LookupResult with success=False
so callers only ever handle one shape.
"""
import logging
from typing import Optional
import httpx
from privy_lookup.models.lookup_models import LookupResult

# Set up logging
logger = logging.getLogger(__name__)


class LookupClient:
    def __init__(self, base_url: str = "http://localhost:3001", client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=30.0)

    async def close(self):
        await self.client.aclose()

    async def lookup_user_by_email(self, email: str) -> LookupResult:
        """Look up a Privy user's wallet addresses by email."""
        try:
            response = await self.client.post(
                f"{self.base_url}/api/lookup-user",
                json={"email": email},
            )
            data = response.json()

            if not response.is_success:
                error = data.get("error") if isinstance(data, dict) else None
                return LookupResult.failed(email, error or "Failed to lookup user")

            return LookupResult(**data)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Lookup request for {email} failed: {e}")
            return LookupResult.failed(email, str(e) or "Network error")
