import sys
import asyncio
import logging
import argparse

from solana.rpc.commitment import Processed, Confirmed, Finalized
from solders.pubkey import Pubkey

from sol_pool_decoder.constants import SOL_RPC_URL
from sol_pool_decoder.dispatcher import get_pool
from sol_pool_decoder.errors import PoolDecodeError
from sol_pool_decoder.pool_base import PoolKind, PoolSelector
from sol_pool_decoder.registry import display_name
from sol_pool_decoder.solana_client import SolanaClient


COMMITMENTS = {
    "processed": Processed,
    "confirmed": Confirmed,
    "finalized": Finalized,
}


def pubkey_arg(value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid account address {value!r}: {e}") from e


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode an AMM pool account")
    parser.add_argument(
        "--kind",
        "-k",
        type=str,
        required=True,
        choices=[kind.value for kind in PoolKind],
        help="Pool layout of the account"
    )
    parser.add_argument(
        "--address",
        "-a",
        type=pubkey_arg,
        required=True,
        help="Pool account address"
    )
    parser.add_argument(
        "--rpc-url",
        "-r",
        type=str,
        required=False,
        default=SOL_RPC_URL,
        help="Solana RPC"
    )
    parser.add_argument(
        "--commitment",
        "-c",
        type=str,
        choices=list(COMMITMENTS),
        default="confirmed",
        help="Commitment level used to read the account"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


async def main(selector: PoolSelector, rpc_url: str, commitment: str) -> int:
    async with SolanaClient(rpc_url=rpc_url, commitment=COMMITMENTS[commitment]) as solana_client:
        try:
            pool = await get_pool(selector, solana_client)
        except PoolDecodeError as e:
            logging.error(f"Could not decode {display_name(selector.kind)} pool {selector.address}: {e}")
            return 1

    print(f"Deserialized {display_name(selector.kind)} pool {selector.address}: {pool}")
    return 0


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    selector = PoolSelector(PoolKind(args.kind), args.address)
    sys.exit(asyncio.run(main(selector, args.rpc_url, args.commitment)))
