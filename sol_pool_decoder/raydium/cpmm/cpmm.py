from dataclasses import dataclass
from typing import ClassVar

from solders.pubkey import Pubkey

from sol_pool_decoder.account_layout import decode_account
from sol_pool_decoder.pool_base import PoolKind

from .layouts import CPMM_POOL_STATE_DISCRIMINATOR, CPMM_POOL_STATE_LAYOUT


# Bits of RaydiumCpmmPool.status, set when the operation is disabled.
STATUS_DEPOSIT_DISABLED = 1 << 0
STATUS_WITHDRAW_DISABLED = 1 << 1
STATUS_SWAP_DISABLED = 1 << 2


@dataclass
class RaydiumCpmmPool:
    kind: ClassVar[PoolKind] = PoolKind.RAYDIUM_CPMM

    amm_config: Pubkey
    pool_creator: Pubkey
    token_0_vault: Pubkey
    token_1_vault: Pubkey
    lp_mint: Pubkey
    token_0_mint: Pubkey
    token_1_mint: Pubkey
    token_0_program: Pubkey
    token_1_program: Pubkey
    observation_key: Pubkey
    auth_bump: int
    status: int
    lp_mint_decimals: int
    mint_0_decimals: int
    mint_1_decimals: int
    lp_supply: int
    protocol_fees_token_0: int
    protocol_fees_token_1: int
    fund_fees_token_0: int
    fund_fees_token_1: int
    open_time: int
    recent_epoch: int
    creator_fee_on: int
    enable_creator_fee: bool
    creator_fees_token_0: int
    creator_fees_token_1: int

    @property
    def swap_enabled(self) -> bool:
        return not self.status & STATUS_SWAP_DISABLED

    @classmethod
    def from_decoded(cls, decoded: dict) -> "RaydiumCpmmPool":
        return cls(
            amm_config=Pubkey.from_bytes(decoded["ammConfig"]),
            pool_creator=Pubkey.from_bytes(decoded["poolCreator"]),
            token_0_vault=Pubkey.from_bytes(decoded["token0Vault"]),
            token_1_vault=Pubkey.from_bytes(decoded["token1Vault"]),
            lp_mint=Pubkey.from_bytes(decoded["lpMint"]),
            token_0_mint=Pubkey.from_bytes(decoded["token0Mint"]),
            token_1_mint=Pubkey.from_bytes(decoded["token1Mint"]),
            token_0_program=Pubkey.from_bytes(decoded["token0Program"]),
            token_1_program=Pubkey.from_bytes(decoded["token1Program"]),
            observation_key=Pubkey.from_bytes(decoded["observationKey"]),
            auth_bump=decoded["authBump"],
            status=decoded["status"],
            lp_mint_decimals=decoded["lpMintDecimals"],
            mint_0_decimals=decoded["mint0Decimals"],
            mint_1_decimals=decoded["mint1Decimals"],
            lp_supply=decoded["lpSupply"],
            protocol_fees_token_0=decoded["protocolFeesToken0"],
            protocol_fees_token_1=decoded["protocolFeesToken1"],
            fund_fees_token_0=decoded["fundFeesToken0"],
            fund_fees_token_1=decoded["fundFeesToken1"],
            open_time=decoded["openTime"],
            recent_epoch=decoded["recentEpoch"],
            creator_fee_on=decoded["creatorFeeOn"],
            enable_creator_fee=decoded["enableCreatorFee"],
            creator_fees_token_0=decoded["creatorFeesToken0"],
            creator_fees_token_1=decoded["creatorFeesToken1"],
        )


def decode_cpmm_pool_state(data: bytes) -> RaydiumCpmmPool:
    return decode_account(
        PoolKind.RAYDIUM_CPMM,
        data,
        CPMM_POOL_STATE_DISCRIMINATOR,
        CPMM_POOL_STATE_LAYOUT,
        RaydiumCpmmPool.from_decoded,
    )
