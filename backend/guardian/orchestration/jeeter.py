"""
/jeeter workflow - early-seller report, EVM chains only
"""
from typing import Dict

from guardian.core.data_models import ChainConfig, ChainKind, JeeterResult, RequestParams
from guardian.core.exceptions import EvmOnlyError, GuardianException, MissingTokenError
from guardian.orchestration.assembler import assemble_jeeter
from guardian.orchestration.base import BaseOrchestrator, Handler


class JeeterOrchestrator(BaseOrchestrator):

    def handlers(self) -> Dict[ChainKind, Handler]:
        return {ChainKind.EVM: self._jeeter_evm}

    def unsupported_kind(self) -> GuardianException:
        return EvmOnlyError()

    async def run(self, params: RequestParams):
        # Unknown chains are reported the same way as non-EVM chains
        chain = self.registry.get(params.chain_key)
        if chain is None:
            raise EvmOnlyError()

        handler = self.dispatch(chain)
        if not params.token:
            raise MissingTokenError()

        return await handler(chain, params)

    async def _jeeter_evm(self, chain: ChainConfig, params: RequestParams):
        metadata = await self.read_metadata(chain, params.token)

        async def report():
            result = await self.collaborators.engine.build_jeeter_report(
                chain_key=chain.key,
                token=params.token,
                provider=metadata.provider,
                decimals=metadata.decimals,
                window=params.window
            )
            return JeeterResult.model_validate(result)

        result = await self.guard.run("jeeter_report", report, JeeterResult())
        return assemble_jeeter(result, params.window)
