"""Shared fixtures: hand-built pool account bytes and an in-memory account fetcher."""
import struct
from typing import Dict, List, Optional

import pytest
from solders.pubkey import Pubkey

from sol_pool_decoder.errors import FetchError
from sol_pool_decoder.pump.layouts import BONDING_CURVE_DISCRIMINATOR, PUMP_AMM_POOL_DISCRIMINATOR
from sol_pool_decoder.raydium.cpmm.layouts import CPMM_POOL_STATE_DISCRIMINATOR
from sol_pool_decoder.solana_client import AccountFetcher


def make_pubkey(seed: int) -> Pubkey:
    return Pubkey.from_bytes(bytes([seed]) * 32)


def pad_to(data: bytes, size: Optional[int]) -> bytes:
    if size is None:
        return data
    assert size >= len(data)
    return data + bytes(size - len(data))


def build_bonding_curve(
    virtual_token_reserves: int = 1000,
    virtual_sol_reserves: int = 2000,
    real_token_reserves: int = 793_100_000_000_000,
    real_sol_reserves: int = 0,
    token_total_supply: int = 1_000_000_000_000_000,
    complete: bool = False,
    creator: Pubkey = make_pubkey(1),
    size: Optional[int] = None,
) -> bytes:
    data = BONDING_CURVE_DISCRIMINATOR + struct.pack(
        "<QQQQQ?",
        virtual_token_reserves,
        virtual_sol_reserves,
        real_token_reserves,
        real_sol_reserves,
        token_total_supply,
        complete,
    ) + bytes(creator)
    return pad_to(data, size)


def build_pump_amm_pool(
    pool_bump: int = 254,
    index: int = 7,
    keys: Optional[List[Pubkey]] = None,
    lp_supply: int = 4_193_388_000_000,
    coin_creator: Pubkey = make_pubkey(20),
    size: Optional[int] = None,
) -> bytes:
    if keys is None:
        keys = [make_pubkey(10 + i) for i in range(6)]
    data = PUMP_AMM_POOL_DISCRIMINATOR + struct.pack("<BH", pool_bump, index)
    data += b"".join(bytes(key) for key in keys)
    data += struct.pack("<Q", lp_supply) + bytes(coin_creator)
    return pad_to(data, size)


def build_cpmm_pool_state(
    keys: Optional[List[Pubkey]] = None,
    auth_bump: int = 253,
    status: int = 0,
    lp_mint_decimals: int = 9,
    mint_0_decimals: int = 9,
    mint_1_decimals: int = 6,
    amounts: Optional[List[int]] = None,
    creator_fee_on: int = 0,
    enable_creator_fee: bool = True,
    creator_fees: Optional[List[int]] = None,
    size: Optional[int] = None,
) -> bytes:
    if keys is None:
        keys = [make_pubkey(30 + i) for i in range(10)]
    if amounts is None:
        # lp_supply, protocol fees 0/1, fund fees 0/1, open_time, recent_epoch
        amounts = [1_000_000, 11, 12, 21, 22, 1_717_000_000, 650]
    if creator_fees is None:
        creator_fees = [31, 32]
    data = CPMM_POOL_STATE_DISCRIMINATOR + b"".join(bytes(key) for key in keys)
    data += struct.pack("<BBBBB", auth_bump, status, lp_mint_decimals, mint_0_decimals, mint_1_decimals)
    data += struct.pack("<7Q", *amounts)
    data += struct.pack("<B?", creator_fee_on, enable_creator_fee) + bytes(6)
    data += struct.pack("<QQ", *creator_fees)
    data += bytes(28 * 8)
    return pad_to(data, size)


class FakeFetcher(AccountFetcher):
    """Serves account bytes from a dict and records every request."""

    def __init__(self, accounts: Dict[Pubkey, bytes], errors: Optional[Dict[Pubkey, Exception]] = None):
        self.accounts = accounts
        self.errors = errors or {}
        self.requests: List[Pubkey] = []

    async def get_account_bytes(self, address: Pubkey) -> bytes:
        self.requests.append(address)
        if address in self.errors:
            raise self.errors[address]
        if address not in self.accounts:
            raise FetchError(address, message=f"account {address} not found")
        return self.accounts[address]


@pytest.fixture
def pool_address():
    return Pubkey.from_string("8sLbNZoA1cfnvMJLPfp98ZLAnFSYCFApfJKMbiXNLwxj")


@pytest.fixture
def bonding_curve_data():
    return build_bonding_curve


@pytest.fixture
def pump_amm_pool_data():
    return build_pump_amm_pool


@pytest.fixture
def cpmm_pool_state_data():
    return build_cpmm_pool_state


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
