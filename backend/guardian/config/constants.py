"""
Constants and static configuration for the Guardian token risk API
"""
from guardian.core.data_models import ChainKind

# Default chain registry (key -> static chain data)
# RPC endpoints can be overridden per chain from settings
DEFAULT_CHAINS = {
    "base": {
        "kind": ChainKind.EVM,
        "rpc_endpoint": "https://mainnet.base.org",
        "explorer_base_url": "https://basescan.org",
        "chain_id": 8453
    },
    "ethereum": {
        "kind": ChainKind.EVM,
        "rpc_endpoint": "https://eth.llamarpc.com",
        "explorer_base_url": "https://etherscan.io",
        "chain_id": 1
    },
    "bsc": {
        "kind": ChainKind.EVM,
        "rpc_endpoint": "https://bsc-dataseed.binance.org",
        "explorer_base_url": "https://bscscan.com",
        "chain_id": 56
    },
    "solana": {
        "kind": ChainKind.SOLANA,
        "rpc_endpoint": "https://api.mainnet-beta.solana.com",
        "explorer_base_url": "https://solscan.io"
    }
}

# Etherscan multichain API (one key for every EVM chain)
ETHERSCAN_V2_URL = "https://api.etherscan.io/v2/api"

DEXSCREENER_URL = "https://api.dexscreener.com"

# Owners that mean "renounced"
RENOUNCED_OWNERS = {
    "0x0000000000000000000000000000000000000000",
    "0x000000000000000000000000000000000000dead"
}

LIVENESS_MESSAGE = "Guardian Protocol API running"
