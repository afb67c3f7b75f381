from construct import *
from construct import Struct as cStruct

from sol_pool_decoder.account_layout import BorshBool, account_discriminator

CPMM_POOL_STATE_DISCRIMINATOR = account_discriminator("PoolState")

CPMM_POOL_STATE_LAYOUT = cStruct(
    "ammConfig" / Bytes(32),
    "poolCreator" / Bytes(32),
    "token0Vault" / Bytes(32),
    "token1Vault" / Bytes(32),
    "lpMint" / Bytes(32),
    "token0Mint" / Bytes(32),
    "token1Mint" / Bytes(32),
    "token0Program" / Bytes(32),
    "token1Program" / Bytes(32),
    "observationKey" / Bytes(32),
    "authBump" / Int8ul,
    "status" / Int8ul,
    "lpMintDecimals" / Int8ul,
    "mint0Decimals" / Int8ul,
    "mint1Decimals" / Int8ul,
    "lpSupply" / Int64ul,
    "protocolFeesToken0" / Int64ul,
    "protocolFeesToken1" / Int64ul,
    "fundFeesToken0" / Int64ul,
    "fundFeesToken1" / Int64ul,
    "openTime" / Int64ul,
    "recentEpoch" / Int64ul,
    "creatorFeeOn" / Int8ul,
    "enableCreatorFee" / BorshBool,
    Padding(6),
    "creatorFeesToken0" / Int64ul,
    "creatorFeesToken1" / Int64ul,
    Padding(28 * 8),
)
