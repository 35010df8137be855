"""
/graph workflow - token transfer graph around a center address
"""
from typing import Dict

from guardian.core.data_models import ChainConfig, ChainKind, GraphResult, RequestParams
from guardian.core.exceptions import BadSolAddressError, MissingTokenOrCenterError
from guardian.orchestration.assembler import assemble_graph
from guardian.orchestration.base import BaseOrchestrator, Handler
from guardian.utils.validators import AddressValidator


class GraphOrchestrator(BaseOrchestrator):
    """EVM graphs degrade to an empty graph; Solana graphs are mandatory"""

    def handlers(self) -> Dict[ChainKind, Handler]:
        return {
            ChainKind.EVM: self._graph_evm,
            ChainKind.SOLANA: self._graph_solana
        }

    async def run(self, params: RequestParams):
        chain = self.registry.resolve(params.chain_key)
        if not params.token or not params.center:
            raise MissingTokenOrCenterError()

        handler = self.dispatch(chain)
        return await handler(chain, params)

    async def _graph_evm(self, chain: ChainConfig, params: RequestParams):
        metadata = await self.read_metadata(chain, params.token)

        async def build():
            graph = await self.collaborators.engine.build_transfer_graph(
                provider=metadata.provider,
                token=params.token,
                center=params.center.lower(),
                window=params.window
            )
            return GraphResult.model_validate(graph)

        graph = await self.guard.run("transfer_graph", build, GraphResult())
        return assemble_graph(graph, params.window)

    async def _graph_solana(self, chain: ChainConfig, params: RequestParams):
        if not AddressValidator.validate_solana_address(params.center):
            raise BadSolAddressError()

        graph = await self.collaborators.engine.build_solana_graph(
            mint=params.token,
            center=params.center,
            api_key=self.collaborators.birdeye_api_key
        )
        return assemble_graph(GraphResult.model_validate(graph), params.window)
