from construct import *
from construct import Struct as cStruct

from sol_pool_decoder.account_layout import BorshBool, account_discriminator

BONDING_CURVE_DISCRIMINATOR = account_discriminator("BondingCurve")
PUMP_AMM_POOL_DISCRIMINATOR = account_discriminator("Pool")

# Both layouts start right after the 8 byte discriminator.
BONDING_CURVE_LAYOUT = cStruct(
    "virtualTokenReserves" / Int64ul,
    "virtualSolReserves" / Int64ul,
    "realTokenReserves" / Int64ul,
    "realSolReserves" / Int64ul,
    "tokenTotalSupply" / Int64ul,
    "complete" / BorshBool,
    "creator" / Bytes(32),
)

PUMP_AMM_POOL_LAYOUT = cStruct(
    "poolBump" / Int8ul,
    "index" / Int16ul,
    "creator" / Bytes(32),
    "baseMint" / Bytes(32),
    "quoteMint" / Bytes(32),
    "lpMint" / Bytes(32),
    "poolBaseTokenAccount" / Bytes(32),
    "poolQuoteTokenAccount" / Bytes(32),
    "lpSupply" / Int64ul,
    "coinCreator" / Bytes(32),
)
