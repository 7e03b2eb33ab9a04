# /privy_lookup/services/chain_switcher.py
"""
Switching an embedded Privy wallet between supported EVM networks.

The switch itself is done by the wallet SDK; this module tracks the current
and selected chain and turns the outcome into a user-facing message.
"""
import logging
from typing import Any, Optional, Protocol, Sequence, Union
from privy_lookup.models.chain_models import SupportedChain, SwitchOutcome

logger = logging.getLogger(__name__)

SEPOLIA = SupportedChain(id=11155111, name="ETH Sepolia (Testnet)")
MAINNET = SupportedChain(id=1, name="ETH Mainnet")
BASE = SupportedChain(id=8453, name="Base (Mainnet)")
BASE_SEPOLIA = SupportedChain(id=84532, name="Base Sepolia (Testnet)")

SUPPORTED_CHAINS = [SEPOLIA, MAINNET, BASE, BASE_SEPOLIA]

DEFAULT_CHAIN_ID = SEPOLIA.id


class Wallet(Protocol):
    wallet_client_type: str
    chain_id: Union[int, str, None]

    async def switch_chain(self, chain_id: int) -> Any:
        ...


def parse_chain_id(value: Union[int, str, None]) -> Optional[int]:
    """Parse 8453, "8453" or a CAIP-2 id like "eip155:8453"."""
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return value
    text = str(value)
    if ":" in text:
        text = text.split(":")[1]
    return int(text)


def get_chain(chain_id: Optional[int]) -> Optional[SupportedChain]:
    return next((c for c in SUPPORTED_CHAINS if c.id == chain_id), None)


def chain_name(chain_id: Optional[int]) -> str:
    if not chain_id:
        return "Unknown"
    chain = get_chain(chain_id)
    return chain.name if chain else f"Chain ID: {chain_id}"


def find_embedded_wallet(wallets: Sequence[Wallet]) -> Optional[Wallet]:
    return next((w for w in wallets if w.wallet_client_type == "privy"), None)


class ChainSwitcher:
    """Tracks the embedded wallet's chain and switches it on request."""

    def __init__(self, wallets: Sequence[Wallet], selected_chain_id: int = DEFAULT_CHAIN_ID):
        self.wallet = find_embedded_wallet(wallets)
        self.selected_chain_id = selected_chain_id
        self.current_chain: Optional[int] = None
        if self.wallet is not None and self.wallet.chain_id:
            try:
                self.current_chain = parse_chain_id(self.wallet.chain_id)
            except ValueError:
                logger.warning(f"Unreadable chain id on embedded wallet: {self.wallet.chain_id!r}")

    @property
    def current_chain_name(self) -> str:
        return chain_name(self.current_chain)

    @property
    def can_switch(self) -> bool:
        return self.wallet is not None and self.selected_chain_id != self.current_chain

    def select(self, chain_id: int):
        if get_chain(chain_id) is None:
            raise ValueError(f"Unsupported chain: {chain_id}")
        self.selected_chain_id = chain_id

    async def switch(self) -> SwitchOutcome:
        if self.wallet is None:
            return SwitchOutcome(success=False, message="No embedded wallet found. Please create a wallet first.")

        try:
            await self.wallet.switch_chain(self.selected_chain_id)
        except Exception as e:
            logger.error(f"Failed to switch to chain {self.selected_chain_id}: {e}")
            return SwitchOutcome(success=False, message="Failed to switch chain")

        self.current_chain = self.selected_chain_id
        logger.info(f"Switched embedded wallet to chain {self.current_chain}")
        return SwitchOutcome(success=True, message=f"Switched to {chain_name(self.current_chain)}")
