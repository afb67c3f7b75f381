import asyncio
import logging
from typing import Iterable, List, Union

from .decoder import decode_pool
from .errors import FetchError, PoolDecodeError
from .pool_base import PoolSelector
from .registry import DecodedPool, display_name
from .solana_client import AccountFetcher


async def get_pool(selector: PoolSelector, fetcher: AccountFetcher) -> DecodedPool:
    """
    Fetches the account named by the selector and decodes it with the
    layout of the selector's pool kind.

    Raises FetchError when the account could not be retrieved, in which case
    no decode is attempted, and SchemaError when the account data does not
    match the layout.
    """
    try:
        data = await fetcher.get_account_bytes(selector.address)
    except FetchError:
        raise
    except Exception as e:
        raise FetchError(selector.address, e) from e

    pool = decode_pool(data, selector.kind)
    logging.debug(f"Decoded {display_name(selector.kind)} pool {selector.address}")
    return pool


async def get_pools(
    selectors: Iterable[PoolSelector],
    fetcher: AccountFetcher,
) -> List[Union[DecodedPool, PoolDecodeError]]:
    """
    Runs get_pool for every selector concurrently. Results keep the order of
    the selectors; failed pools are reported by their PoolDecodeError.
    """
    results = await asyncio.gather(
        *(get_pool(selector, fetcher) for selector in selectors),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, PoolDecodeError):
            raise result
    return results
