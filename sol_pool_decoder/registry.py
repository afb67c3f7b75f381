from typing import Callable, Dict, NamedTuple, Optional, Union

from construct import Construct
from solders.pubkey import Pubkey

from .constants import DISCRIMINATOR_SIZE
from .pool_base import PoolKind
from .pump.amm import PumpAmmPool, decode_pump_amm_pool
from .pump.bonding_curve import PumpBondingCurve, decode_bonding_curve
from .pump.constants import PUMP_AMM_PROGRAM_ID, PUMP_FUN_PROGRAM_ID
from .pump.layouts import (
    BONDING_CURVE_DISCRIMINATOR,
    BONDING_CURVE_LAYOUT,
    PUMP_AMM_POOL_DISCRIMINATOR,
    PUMP_AMM_POOL_LAYOUT,
)
from .raydium.cpmm.constants import CPMM_PROGRAM_ID
from .raydium.cpmm.cpmm import RaydiumCpmmPool, decode_cpmm_pool_state
from .raydium.cpmm.layouts import CPMM_POOL_STATE_DISCRIMINATOR, CPMM_POOL_STATE_LAYOUT


DecodedPool = Union[PumpBondingCurve, PumpAmmPool, RaydiumCpmmPool]


class PoolSchema(NamedTuple):
    kind: PoolKind
    display_name: str
    program_id: Pubkey
    discriminator: bytes
    layout: Construct
    decode: Callable[[bytes], DecodedPool]

    @property
    def min_size(self) -> int:
        return DISCRIMINATOR_SIZE + self.layout.sizeof()


SCHEMAS: Dict[PoolKind, PoolSchema] = {
    PoolKind.PUMP_BONDING_CURVE: PoolSchema(
        kind=PoolKind.PUMP_BONDING_CURVE,
        display_name="Pump.fun Bonding Curve",
        program_id=PUMP_FUN_PROGRAM_ID,
        discriminator=BONDING_CURVE_DISCRIMINATOR,
        layout=BONDING_CURVE_LAYOUT,
        decode=decode_bonding_curve,
    ),
    PoolKind.PUMP_AMM: PoolSchema(
        kind=PoolKind.PUMP_AMM,
        display_name="PumpSwap AMM",
        program_id=PUMP_AMM_PROGRAM_ID,
        discriminator=PUMP_AMM_POOL_DISCRIMINATOR,
        layout=PUMP_AMM_POOL_LAYOUT,
        decode=decode_pump_amm_pool,
    ),
    PoolKind.RAYDIUM_CPMM: PoolSchema(
        kind=PoolKind.RAYDIUM_CPMM,
        display_name="Raydium CPMM",
        program_id=CPMM_PROGRAM_ID,
        discriminator=CPMM_POOL_STATE_DISCRIMINATOR,
        layout=CPMM_POOL_STATE_LAYOUT,
        decode=decode_cpmm_pool_state,
    ),
}

_missing = set(PoolKind) - set(SCHEMAS)
if _missing:
    raise RuntimeError(f"No pool schema registered for {sorted(k.value for k in _missing)}")


def resolve(kind: PoolKind) -> PoolSchema:
    return SCHEMAS[kind]


def display_name(kind: PoolKind) -> str:
    return SCHEMAS[kind].display_name


def program_id(kind: PoolKind) -> Pubkey:
    return SCHEMAS[kind].program_id


def kind_for_program(owner: Pubkey) -> Optional[PoolKind]:
    """
    Returns the pool kind whose program owns accounts of the given owner,
    or None for programs that are not supported.
    """
    for schema in SCHEMAS.values():
        if schema.program_id == owner:
            return schema.kind
    return None
