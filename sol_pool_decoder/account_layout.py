import hashlib
import logging
from typing import Callable, TypeVar

from construct import Construct, ConstructError, ExprAdapter, Int8ul, OneOf

from .constants import DISCRIMINATOR_SIZE
from .errors import SchemaError
from .pool_base import PoolKind


T = TypeVar("T")

# Borsh bools are a single byte that must be 0 or 1.
BorshBool = ExprAdapter(
    OneOf(Int8ul, [0, 1]),
    lambda obj, ctx: obj == 1,
    lambda obj, ctx: int(obj),
)


def account_discriminator(account_name: str) -> bytes:
    """
    Anchor prefixes every account with the first 8 bytes of
    sha256("account:<AccountName>").
    """
    return hashlib.sha256(f"account:{account_name}".encode("utf-8")).digest()[:DISCRIMINATOR_SIZE]


def decode_account(
    kind: PoolKind,
    data: bytes,
    discriminator: bytes,
    layout: Construct,
    build: Callable[[dict], T],
) -> T:
    if len(data) < DISCRIMINATOR_SIZE:
        raise SchemaError(kind, f"account data too short: {len(data)} bytes")

    if data[:DISCRIMINATOR_SIZE] != discriminator:
        raise SchemaError(
            kind,
            f"discriminator mismatch: expected {discriminator.hex()}, "
            f"got {bytes(data[:DISCRIMINATOR_SIZE]).hex()}"
        )

    try:
        decoded = layout.parse(data[DISCRIMINATOR_SIZE:])
    except ConstructError as e:
        logging.debug(f"Error parsing {kind.value} account data: {e}")
        raise SchemaError(kind, f"could not parse account data: {e}", e) from e

    try:
        return build(decoded)
    except (KeyError, ValueError) as e:
        raise SchemaError(kind, f"could not build pool from decoded data: {e}", e) from e
