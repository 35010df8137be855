"""
Collaborator contracts consumed by the orchestrators
Concrete readers live in guardian.connectors; analysis engines are plugged in
through ANALYTICS_ENGINE
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib import import_module
from typing import Any, Dict, Optional
import logging

from guardian.config.settings import Settings
from guardian.core.data_models import (
    AnalysisWindow,
    ContractSource,
    GraphResult,
    JeeterResult,
    TokenMetadata
)
from guardian.core.exceptions import FeatureUnavailableError


logger = logging.getLogger(__name__)


class TokenMetadataReader(ABC):
    """Primary EVM token metadata source"""

    @abstractmethod
    async def read_token_metadata(self, rpc: str, token: str) -> TokenMetadata:
        """Read name, symbol, decimals, supply and owner of a token"""
        pass


class ContractSourceLookup(ABC):
    """Block explorer verification lookup"""

    @abstractmethod
    async def lookup_contract_source(
        self,
        chain_key: str,
        token: str,
        api_key: Optional[str] = None
    ) -> ContractSource:
        """Get verification status and owner of a contract"""
        pass


class PriceSource(ABC):
    """Price / pair lookup service"""

    @abstractmethod
    async def lookup_price_pairs(self, token: str) -> Dict[str, Any]:
        """Get {"pairs": [...]} for a token address"""
        pass


class AnalysisEngine(ABC):
    """On-chain analysis engines for both chain families"""

    @abstractmethod
    async def estimate_top_holders_pct(
        self,
        provider: Any,
        iface: Any,
        token: str,
        decimals: Optional[int],
        window: AnalysisWindow
    ) -> Optional[float]:
        """Percentage of supply held by the top 10 holders"""
        pass

    @abstractmethod
    async def build_transfer_graph(
        self,
        provider: Any,
        token: str,
        center: str,
        window: AnalysisWindow
    ) -> GraphResult:
        """EVM transfer graph around center; nodes and links are passed through as-is"""
        pass

    @abstractmethod
    async def build_jeeter_report(
        self,
        chain_key: str,
        token: str,
        provider: Any,
        decimals: Optional[int],
        window: AnalysisWindow
    ) -> JeeterResult:
        """Early sellers of an EVM token; price_now must be numeric or None"""
        pass

    @abstractmethod
    async def analyze_solana_mint(
        self,
        rpc: str,
        mint: str,
        explorer: str,
        api_key: Optional[str] = None
    ) -> Dict[str, Any]:
        """Full Solana mint analysis payload"""
        pass

    @abstractmethod
    async def build_solana_graph(
        self,
        mint: str,
        center: str,
        api_key: Optional[str] = None
    ) -> GraphResult:
        """Solana transfer graph around center"""
        pass


class UnconfiguredEngine(AnalysisEngine):
    """Engine used when ANALYTICS_ENGINE is not set"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings

    def _unavailable(self, feature: str):
        raise FeatureUnavailableError(f"{feature} not configured", code="engine_unconfigured")

    async def estimate_top_holders_pct(self, provider, iface, token, decimals, window):
        self._unavailable("Top holder estimator")

    async def build_transfer_graph(self, provider, token, center, window):
        self._unavailable("EVM graph builder")

    async def build_jeeter_report(self, chain_key, token, provider, decimals, window):
        self._unavailable("Jeeter report")

    async def analyze_solana_mint(self, rpc, mint, explorer, api_key=None):
        self._unavailable("Solana analyzer")

    async def build_solana_graph(self, mint, center, api_key=None):
        self._unavailable("Solana graph builder")


def load_engine(path: str, settings: Settings) -> AnalysisEngine:
    """
    Load an analysis engine from a "package.module:attribute" path

    Classes and factory functions are called with the settings; any other
    attribute is used as the engine itself. An empty path gives the
    unconfigured engine.
    """
    if not path:
        logger.warning("No analysis engine configured, engine features disabled")
        return UnconfiguredEngine()

    module_name, _, attr = path.partition(":")
    if not attr:
        raise ValueError(f"ANALYTICS_ENGINE must look like 'module:attribute', got {path!r}")

    target = getattr(import_module(module_name), attr)
    engine = target(settings) if callable(target) else target

    if not isinstance(engine, AnalysisEngine):
        raise TypeError(f"{path} did not produce an AnalysisEngine")

    logger.info(f"Loaded analysis engine {path}")
    return engine


@dataclass
class Collaborators:
    """Everything the orchestrators depend on, wired once at startup"""
    metadata_reader: TokenMetadataReader
    contract_source: ContractSourceLookup
    price_source: PriceSource
    engine: AnalysisEngine
    cache: Any
    birdeye_api_key: str = ""
    cache_ttl_seconds: int = 600
