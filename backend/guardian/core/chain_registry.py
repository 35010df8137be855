"""
Chain registry - resolves chain keys to their static configuration
"""
from typing import Dict, Iterable, List
import logging

from guardian.config.constants import DEFAULT_CHAINS
from guardian.config.settings import Settings
from guardian.core.data_models import ChainConfig, ChainKind
from guardian.core.exceptions import UnknownChainError


logger = logging.getLogger(__name__)


class ChainRegistry:
    """Immutable lookup table of configured chains"""

    def __init__(self, chains: Iterable[ChainConfig]):
        self._chains: Dict[str, ChainConfig] = {c.key: c for c in chains}

    def resolve(self, chain_key: str) -> ChainConfig:
        """Get chain config by key, raising UnknownChainError when absent"""
        chain = self._chains.get(chain_key)
        if chain is None:
            raise UnknownChainError(chain_key)
        return chain

    def get(self, chain_key: str):
        return self._chains.get(chain_key)

    def keys(self) -> List[str]:
        return sorted(self._chains)


def load_chain_registry(settings: Settings) -> ChainRegistry:
    """Build the registry from the default chain table and settings overrides"""
    overrides = settings.rpc_overrides
    chains = []

    for key, data in DEFAULT_CHAINS.items():
        explorer_key = settings.ETHERSCAN_API_KEY if data["kind"] == ChainKind.EVM else None
        chains.append(ChainConfig(
            key=key,
            kind=data["kind"],
            rpc_endpoint=overrides.get(key, data["rpc_endpoint"]),
            explorer_base_url=data["explorer_base_url"],
            explorer_api_key=explorer_key or None,
            chain_id=data.get("chain_id")
        ))

    registry = ChainRegistry(chains)
    logger.info(f"Loaded chain registry: {', '.join(registry.keys())}")
    return registry
