from solana.rpc.commitment import Confirmed


SOL_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_COMMITMENT = Confirmed

MAX_RETRIES = 5
BACKOFF_FACTOR = 1.0
RPC_TIMEOUT = 10
RPC_CONCURRENCY_LIMIT = 5

DISCRIMINATOR_SIZE = 8
