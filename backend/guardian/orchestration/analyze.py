"""
/analyze workflow - token identity facts plus best-effort risk signals
"""
from typing import Dict, Optional

from guardian.core.chain_registry import ChainRegistry
from guardian.core.collaborators import Collaborators
from guardian.core.data_models import (
    ChainConfig,
    ChainKind,
    ContractSource,
    RequestParams,
    TokenMetadata
)
from guardian.core.exceptions import MissingTokenError
from guardian.core.feature_guard import FeatureGuard
from guardian.orchestration.assembler import assemble_analysis, assemble_solana_analysis
from guardian.orchestration.base import BaseOrchestrator, Handler
from guardian.orchestration.enrichment import MetadataFallbackFetcher


class AnalyzeOrchestrator(BaseOrchestrator):
    """
    EVM: mandatory metadata read, then metadata fallback, holder
    concentration (skipped in fast mode) and contract verification, each
    guarded. Solana: delegated to the mint analyzer.
    """

    def __init__(
        self,
        registry: ChainRegistry,
        collaborators: Collaborators,
        guard: FeatureGuard
    ):
        super().__init__(registry, collaborators, guard)
        self.enricher = MetadataFallbackFetcher(collaborators.price_source, guard)

    def handlers(self) -> Dict[ChainKind, Handler]:
        return {
            ChainKind.EVM: self._analyze_evm,
            ChainKind.SOLANA: self._analyze_solana
        }

    async def run(self, params: RequestParams):
        chain = self.registry.resolve(params.chain_key)
        if not params.token:
            raise MissingTokenError()

        handler = self.dispatch(chain)
        return await handler(chain, params)

    async def _analyze_evm(self, chain: ChainConfig, params: RequestParams):
        token = params.token
        window = params.window

        metadata = await self.read_metadata(chain, token)
        metadata = await self.enricher.enrich(metadata, token)

        top10_pct = None
        if not window.fast:
            top10_pct = await self.guard.run(
                "top_holders",
                lambda: self._top_holders_pct(metadata, token, params),
                None
            )

        source = await self.guard.run(
            "contract_source",
            lambda: self._contract_source(chain, token),
            ContractSource()
        )

        return assemble_analysis(chain, token, metadata, top10_pct, source, window)

    async def _analyze_solana(self, chain: ChainConfig, params: RequestParams):
        payload = await self.collaborators.engine.analyze_solana_mint(
            rpc=chain.rpc_endpoint,
            mint=params.token,
            explorer=chain.explorer_base_url,
            api_key=self.collaborators.birdeye_api_key
        )
        return assemble_solana_analysis(payload)

    async def _top_holders_pct(
        self,
        metadata: TokenMetadata,
        token: str,
        params: RequestParams
    ) -> Optional[float]:
        return await self.collaborators.engine.estimate_top_holders_pct(
            provider=metadata.provider,
            iface=metadata.iface,
            token=token,
            decimals=metadata.decimals,
            window=params.window
        )

    async def _contract_source(self, chain: ChainConfig, token: str) -> ContractSource:
        """Explorer lookup, cached per chain and token when a cache is configured"""

        async def lookup():
            source = await self.collaborators.contract_source.lookup_contract_source(
                chain.key, token, chain.explorer_api_key
            )
            return source.model_dump()

        cached = await self.collaborators.cache.get_or_set(
            f"contract_source:{chain.key}:{token.lower()}",
            lookup,
            ttl_seconds=self.collaborators.cache_ttl_seconds
        )
        return ContractSource.model_validate(cached)
