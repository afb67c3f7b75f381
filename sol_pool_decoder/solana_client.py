import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solders.pubkey import Pubkey

from .constants import (
    SOL_RPC_URL,
    DEFAULT_COMMITMENT,
    MAX_RETRIES,
    BACKOFF_FACTOR,
    RPC_TIMEOUT,
    RPC_CONCURRENCY_LIMIT,
)
from .errors import FetchError


class AccountFetcher(ABC):
    @abstractmethod
    async def get_account_bytes(self, address: Pubkey) -> bytes:
        """
        Returns the raw data of the account at address.
        Raises FetchError when the account cannot be retrieved.
        """
        pass


def _http_status(exc: BaseException) -> Optional[int]:
    while exc is not None:
        if isinstance(exc, httpx.HTTPStatusError):
            return exc.response.status_code
        exc = exc.__cause__
    return None


class SolanaClient(AccountFetcher):
    """
    A class responsible for handling Solana RPC calls with
    built-in retry logic and concurrency control.
    """

    def __init__(
        self,
        rpc_url: str = SOL_RPC_URL,
        commitment: Commitment = DEFAULT_COMMITMENT,
        max_retries: int = MAX_RETRIES,
        backoff_factor: float = BACKOFF_FACTOR,
        rpc_timeout: int = RPC_TIMEOUT,
        rpc_concurrency_limit: int = RPC_CONCURRENCY_LIMIT
    ):
        self.rpc_url = rpc_url
        self.commitment = commitment
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.semaphore = asyncio.Semaphore(rpc_concurrency_limit)

        self.client = AsyncClient(
            self.rpc_url,
            commitment=commitment,
            timeout=rpc_timeout
        )

    async def __aenter__(self) -> "SolanaClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.close()

    async def _rpc_call(self, address: Pubkey, func, *args, **kwargs) -> Any:
        last_error: Optional[BaseException] = None
        for attempt in range(1, self.max_retries + 1):
            will_retry = attempt < self.max_retries
            async with self.semaphore:
                try:
                    return await func(*args, **kwargs)
                except (SolanaRpcException, httpx.HTTPError) as e:
                    last_error = e
                    status = _http_status(e)
                    if status is not None and status != 429:
                        logging.error(f"Client response error: {e}. No further retry.")
                        raise FetchError(address, e) from e
                    if status == 429:
                        if will_retry:
                            logging.warning(
                                f"429 Too Many Requests. Retrying in {self._wait_time(attempt)} seconds "
                                f"(Attempt {attempt}/{self.max_retries})..."
                            )
                        else:
                            logging.warning(f"429 Too Many Requests (Attempt {attempt}/{self.max_retries}).")
                    else:
                        logging.error(f"RPC call error: {e}.{' Retrying...' if will_retry else ''}")
                except Exception as e:
                    last_error = e
                    logging.error(f"RPC call error: {e}.{' Retrying...' if will_retry else ''}")
            if will_retry:
                await asyncio.sleep(self._wait_time(attempt))

        logging.error(f"Max retries exceeded fetching account {address}")
        raise FetchError(address, last_error) from last_error

    def _wait_time(self, attempt: int) -> float:
        return self.backoff_factor * (2 ** (attempt - 1))

    async def get_account_bytes(self, address: Pubkey) -> bytes:
        response = await self._rpc_call(
            address,
            self.client.get_account_info,
            address,
            self.commitment
        )
        if response.value is None:
            raise FetchError(address, message=f"account {address} not found")
        return bytes(response.value.data)
