"""
Shared orchestration plumbing for the endpoint workflows
"""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict
import logging

from guardian.core.chain_registry import ChainRegistry
from guardian.core.collaborators import Collaborators
from guardian.core.data_models import ChainConfig, ChainKind, TokenMetadata
from guardian.core.exceptions import GuardianException, UnsupportedChainKindError
from guardian.core.feature_guard import FeatureGuard


logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable]


class BaseOrchestrator(ABC):
    """Base class for endpoint orchestrators"""

    def __init__(
        self,
        registry: ChainRegistry,
        collaborators: Collaborators,
        guard: FeatureGuard
    ):
        self.registry = registry
        self.collaborators = collaborators
        self.guard = guard

    @abstractmethod
    def handlers(self) -> Dict[ChainKind, Handler]:
        """Pipeline per chain kind; kinds without an entry are unsupported"""
        pass

    def unsupported_kind(self) -> GuardianException:
        return UnsupportedChainKindError()

    def dispatch(self, chain: ChainConfig) -> Handler:
        handler = self.handlers().get(chain.kind)
        if handler is None:
            logger.warning(f"No {type(self).__name__} pipeline for {chain.kind.value} chain {chain.key}")
            raise self.unsupported_kind()
        return handler

    async def read_metadata(self, chain: ChainConfig, token: str) -> TokenMetadata:
        """Mandatory primary metadata read; failures propagate"""
        return await self.collaborators.metadata_reader.read_token_metadata(
            rpc=chain.rpc_endpoint,
            token=token
        )
