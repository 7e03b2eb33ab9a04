"""Unit tests for email validation and wallet classification."""

import pytest

from privy_lookup.models.lookup_models import LinkedAccount
from privy_lookup.utils.helpers import classify_wallet_addresses, is_valid_email


class TestIsValidEmail:
    @pytest.mark.parametrize("email", ["a@b.co", "alice@example.com", "first.last+tag@mail.example.org"])
    def test_valid(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["foo", "foo@bar", "@bar.com", "foo@.com", "a b@c.com", " a@b.co", "a@b.co ", "a@b.co\n", "a@@b.co", ""],
    )
    def test_invalid(self, email):
        assert not is_valid_email(email)


class TestClassifyWalletAddresses:
    def test_buckets_by_chain_and_skips_other_types(self):
        accounts = [
            LinkedAccount(type="wallet", address="0xABC", chain_type="ethereum"),
            LinkedAccount(type="wallet", address="Sol123", chain_type="solana"),
            LinkedAccount(type="email"),
        ]
        ethereum, solana = classify_wallet_addresses(accounts)
        assert ethereum == ["0xABC"]
        assert solana == ["Sol123"]

    def test_preserves_input_order(self):
        accounts = [
            LinkedAccount(type="wallet", address="0xA", chain_type="ethereum"),
            LinkedAccount(type="wallet", address="SolA", chain_type="solana"),
            LinkedAccount(type="wallet", address="0xB", chain_type="ethereum"),
        ]
        ethereum, solana = classify_wallet_addresses(accounts)
        assert ethereum == ["0xA", "0xB"]
        assert solana == ["SolA"]

    def test_skips_missing_address_and_unknown_chains(self):
        accounts = [
            LinkedAccount(type="wallet", chain_type="ethereum"),
            LinkedAccount(type="wallet", address="bc1q", chain_type="bitcoin"),
            LinkedAccount(type="wallet", address="0xNoChain"),
            LinkedAccount(type="smart_wallet", address="0xSmart", chain_type="ethereum"),
        ]
        assert classify_wallet_addresses(accounts) == ([], [])

    def test_empty_accounts(self):
        assert classify_wallet_addresses([]) == ([], [])
