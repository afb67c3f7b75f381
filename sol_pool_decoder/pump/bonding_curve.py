from dataclasses import dataclass
from typing import ClassVar, Tuple

from solders.pubkey import Pubkey

from sol_pool_decoder.account_layout import decode_account
from sol_pool_decoder.pool_base import PoolKind

from .layouts import BONDING_CURVE_DISCRIMINATOR, BONDING_CURVE_LAYOUT


@dataclass
class PumpBondingCurve:
    kind: ClassVar[PoolKind] = PoolKind.PUMP_BONDING_CURVE

    virtual_token_reserves: int
    virtual_sol_reserves: int
    real_token_reserves: int
    real_sol_reserves: int
    token_total_supply: int
    complete: bool
    creator: Pubkey

    @property
    def reserves(self) -> Tuple[int, int]:
        return self.virtual_token_reserves, self.virtual_sol_reserves

    @classmethod
    def from_decoded(cls, decoded: dict) -> "PumpBondingCurve":
        return cls(
            virtual_token_reserves=decoded["virtualTokenReserves"],
            virtual_sol_reserves=decoded["virtualSolReserves"],
            real_token_reserves=decoded["realTokenReserves"],
            real_sol_reserves=decoded["realSolReserves"],
            token_total_supply=decoded["tokenTotalSupply"],
            complete=decoded["complete"],
            creator=Pubkey.from_bytes(decoded["creator"]),
        )


def decode_bonding_curve(data: bytes) -> PumpBondingCurve:
    return decode_account(
        PoolKind.PUMP_BONDING_CURVE,
        data,
        BONDING_CURVE_DISCRIMINATOR,
        BONDING_CURVE_LAYOUT,
        PumpBondingCurve.from_decoded,
    )
