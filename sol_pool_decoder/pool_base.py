from dataclasses import dataclass
from enum import Enum

from solders.pubkey import Pubkey


class PoolKind(Enum):
    PUMP_BONDING_CURVE = "pump_bonding_curve"
    PUMP_AMM = "pump_amm"
    RAYDIUM_CPMM = "raydium_cpmm"


@dataclass(frozen=True)
class PoolSelector:
    """
    Names the pool layout to decode and the account that holds it.
    """
    kind: PoolKind
    address: Pubkey

    @classmethod
    def pump_bonding_curve(cls, address: Pubkey) -> "PoolSelector":
        return cls(PoolKind.PUMP_BONDING_CURVE, address)

    @classmethod
    def pump_amm(cls, address: Pubkey) -> "PoolSelector":
        return cls(PoolKind.PUMP_AMM, address)

    @classmethod
    def raydium_cpmm(cls, address: Pubkey) -> "PoolSelector":
        return cls(PoolKind.RAYDIUM_CPMM, address)

    @classmethod
    def from_string(cls, kind: str, address: str) -> "PoolSelector":
        return cls(PoolKind(kind), Pubkey.from_string(address))
