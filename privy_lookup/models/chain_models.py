# /privy_lookup/models/chain_models.py
"""
Pydantic models for embedded wallet chain switching.
"""
from pydantic import BaseModel, Field


class SupportedChain(BaseModel):
    """A network the embedded wallet can be switched to."""
    id: int = Field(..., description="EVM chain ID")
    name: str = Field(..., description="Display name")


class SwitchOutcome(BaseModel):
    """Result of a chain switch attempt."""
    success: bool = Field(..., description="Whether the wallet switched")
    message: str = Field(..., description="User-facing message")
