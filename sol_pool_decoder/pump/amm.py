from dataclasses import dataclass
from typing import ClassVar

from solders.pubkey import Pubkey

from sol_pool_decoder.account_layout import decode_account
from sol_pool_decoder.pool_base import PoolKind

from .layouts import PUMP_AMM_POOL_DISCRIMINATOR, PUMP_AMM_POOL_LAYOUT


@dataclass
class PumpAmmPool:
    kind: ClassVar[PoolKind] = PoolKind.PUMP_AMM

    pool_bump: int
    index: int
    creator: Pubkey
    base_mint: Pubkey
    quote_mint: Pubkey
    lp_mint: Pubkey
    pool_base_token_account: Pubkey
    pool_quote_token_account: Pubkey
    lp_supply: int
    coin_creator: Pubkey

    @classmethod
    def from_decoded(cls, decoded: dict) -> "PumpAmmPool":
        return cls(
            pool_bump=decoded["poolBump"],
            index=decoded["index"],
            creator=Pubkey.from_bytes(decoded["creator"]),
            base_mint=Pubkey.from_bytes(decoded["baseMint"]),
            quote_mint=Pubkey.from_bytes(decoded["quoteMint"]),
            lp_mint=Pubkey.from_bytes(decoded["lpMint"]),
            pool_base_token_account=Pubkey.from_bytes(decoded["poolBaseTokenAccount"]),
            pool_quote_token_account=Pubkey.from_bytes(decoded["poolQuoteTokenAccount"]),
            lp_supply=decoded["lpSupply"],
            coin_creator=Pubkey.from_bytes(decoded["coinCreator"]),
        )


def decode_pump_amm_pool(data: bytes) -> PumpAmmPool:
    return decode_account(
        PoolKind.PUMP_AMM,
        data,
        PUMP_AMM_POOL_DISCRIMINATOR,
        PUMP_AMM_POOL_LAYOUT,
        PumpAmmPool.from_decoded,
    )
