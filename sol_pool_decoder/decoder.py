from .pool_base import PoolKind
from .registry import DecodedPool, resolve


def decode_pool(data: bytes, kind: PoolKind) -> DecodedPool:
    """
    Decodes raw account bytes with the layout registered for the given kind.
    Raises SchemaError when the bytes do not match that layout.
    """
    return resolve(kind).decode(data)
