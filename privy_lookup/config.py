# /privy_lookup/config.py
"""
Configuration settings for the application.
Loads environment variables and provides them throughout the app.
"""
import os
from dataclasses import dataclass
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv(override=True)

# Privy settings
PRIVY_APP_ID = os.getenv("VITE_PRIVY_APP_ID") or os.getenv("PRIVY_APP_ID")
PRIVY_APP_SECRET = os.getenv("PRIVY_APP_SECRET")
PRIVY_API_URL = os.getenv("PRIVY_API_URL", "https://auth.privy.io/api/v1")
PRIVY_TIMEOUT = float(os.getenv("PRIVY_TIMEOUT", "10.0"))

# Server settings
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
API_PORT = int(os.getenv("API_PORT", "3001"))


@dataclass(frozen=True)
class PrivySettings:
    """Credentials and endpoint for the Privy user directory."""
    app_id: str = ""
    app_secret: str = ""
    api_url: str = "https://auth.privy.io/api/v1"
    timeout: float = 10.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.app_id) and bool(self.app_secret)

    @property
    def missing_credentials(self) -> List[str]:
        missing = []
        if not self.app_id:
            missing.append("VITE_PRIVY_APP_ID")
        if not self.app_secret:
            missing.append("PRIVY_APP_SECRET")
        return missing

    def __repr__(self):
        secret = '*' * len(self.app_secret) if self.app_secret else 'None'
        return f"PrivySettings(app_id={self.app_id!r}, app_secret={secret}, api_url={self.api_url!r})"


def get_privy_settings() -> PrivySettings:
    """Settings loaded at process start, injected into request handlers."""
    return PrivySettings(
        app_id=PRIVY_APP_ID or "",
        app_secret=PRIVY_APP_SECRET or "",
        api_url=PRIVY_API_URL.rstrip("/"),
        timeout=PRIVY_TIMEOUT,
    )


def get_cors_origins() -> List[str]:
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]
