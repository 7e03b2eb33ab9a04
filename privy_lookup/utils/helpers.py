"""
Utility functions for the API.
"""
import logging
import re
from typing import Iterable, List, Tuple
from privy_lookup.models.lookup_models import LinkedAccount

# Set up logging
logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

def is_valid_email(email: str) -> bool:
    """
    Check an email against the simple local@domain.tld pattern.

    No trimming or case folding is applied, so surrounding whitespace fails.
    """
    return EMAIL_PATTERN.fullmatch(email) is not None

def classify_wallet_addresses(accounts: Iterable[LinkedAccount]) -> Tuple[List[str], List[str]]:
    """
    Split a user's linked accounts into Ethereum and Solana wallet addresses

    Args:
        accounts: Linked accounts in the order Privy returned them

    Returns:
        (ethereum_addresses, solana_addresses), each in input order
    """
    ethereum_addresses = []
    solana_addresses = []

    for account in accounts:
        if account.type != "wallet" or account.address is None:
            continue
        if account.chain_type == "ethereum":
            ethereum_addresses.append(account.address)
        elif account.chain_type == "solana":
            solana_addresses.append(account.address)

    return ethereum_addresses, solana_addresses
