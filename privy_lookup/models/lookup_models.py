# /privy_lookup/models/lookup_models.py
"""
Pydantic models for the email lookup endpoint and the Privy user record.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class LookupRequest(BaseModel):
    """Request model for looking up a Privy user by email."""
    email: str = Field(..., description="Email address linked to the Privy user")


class LinkedAccount(BaseModel):
    """One authentication method or wallet attached to a Privy user."""
    type: str = Field(..., description="Account type, e.g. 'wallet' or 'email'")
    address: Optional[str] = Field(None, description="Wallet address or email address")
    chain_type: Optional[str] = Field(None, description="'ethereum' or 'solana' for wallets")
    verified_at: Optional[int] = Field(None, description="Verification timestamp")
    wallet_client_type: Optional[str] = Field(None, description="Wallet client, 'privy' for embedded wallets")
    connector_type: Optional[str] = Field(None, description="Wallet connector type")


class PrivyUser(BaseModel):
    """User record returned by the Privy API."""
    id: str = Field(..., description="Privy user ID")
    created_at: Optional[int] = Field(None, description="Creation timestamp")
    linked_accounts: List[LinkedAccount] = Field(default_factory=list, description="Linked accounts in Privy order")
    has_accepted_terms: Optional[bool] = Field(None, description="Whether the user accepted terms")
    is_guest: Optional[bool] = Field(None, description="Whether the user is a guest")


class LookupResult(BaseModel):
    """Response model for the email lookup endpoint."""
    success: bool = Field(..., description="Whether the lookup succeeded")
    email: str = Field(..., description="The email that was queried")
    userId: str = Field("", description="Privy user ID, empty on failure")
    ethereumAddresses: List[str] = Field(default_factory=list, description="Ethereum wallet addresses")
    solanaAddresses: List[str] = Field(default_factory=list, description="Solana wallet addresses")
    error: Optional[str] = Field(None, description="Error message on failure")

    @classmethod
    def failed(cls, email: str, error: str) -> "LookupResult":
        return cls(success=False, email=email, userId="", ethereumAddresses=[], solanaAddresses=[], error=error)


class ErrorResponse(BaseModel):
    """Failure body shared by every non-200 response."""
    success: Optional[bool] = Field(None, description="Always false when present")
    error: str = Field(..., description="Error message")
    email: Optional[str] = Field(None, description="Queried email, on 404 only")
