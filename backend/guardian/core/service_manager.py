"""
Service Manager for dependency injection and lifecycle management
"""
import logging
from typing import Optional

from guardian.config.settings import Settings, settings as default_settings
from guardian.connectors.evm.dexscreener import DexScreenerConnector
from guardian.connectors.evm.erc20 import Erc20MetadataReader
from guardian.connectors.evm.explorer import EtherscanConnector
from guardian.core.chain_registry import ChainRegistry, load_chain_registry
from guardian.core.collaborators import Collaborators, load_engine
from guardian.core.feature_guard import FeatureGuard
from guardian.orchestration.analyze import AnalyzeOrchestrator
from guardian.orchestration.graph import GraphOrchestrator
from guardian.orchestration.jeeter import JeeterOrchestrator
from guardian.storage.cache_manager import CacheManager, NullCache
from guardian.storage.mongo_manager import MongoManager
from guardian.storage.redis_manager import RedisManager

logger = logging.getLogger(__name__)


class ServiceManager:
    _instance = None

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

        self.registry: Optional[ChainRegistry] = None
        self.collaborators: Optional[Collaborators] = None
        self.guard: Optional[FeatureGuard] = None

        # Orchestrators
        self.analyze: Optional[AnalyzeOrchestrator] = None
        self.graph: Optional[GraphOrchestrator] = None
        self.jeeter: Optional[JeeterOrchestrator] = None

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = ServiceManager()
        return cls._instance

    def bind(self, registry: ChainRegistry, collaborators: Collaborators, guard: Optional[FeatureGuard] = None):
        """Build the orchestrators over already constructed collaborators"""
        self.registry = registry
        self.collaborators = collaborators
        self.guard = guard or FeatureGuard()

        self.analyze = AnalyzeOrchestrator(registry, collaborators, self.guard)
        self.graph = GraphOrchestrator(registry, collaborators, self.guard)
        self.jeeter = JeeterOrchestrator(registry, collaborators, self.guard)
        return self

    async def initialize(self):
        """Initialize all services"""
        logger.info("Initializing services...")
        settings = self.settings

        registry = load_chain_registry(settings)
        cache = await self._create_cache()

        timeout = settings.HTTP_TIMEOUT_SECONDS
        explorer = EtherscanConnector(registry, api_key=settings.ETHERSCAN_API_KEY, timeout_seconds=timeout)
        await explorer.connect()

        dexscreener = DexScreenerConnector(timeout_seconds=timeout)
        await dexscreener.connect()

        collaborators = Collaborators(
            metadata_reader=Erc20MetadataReader(timeout_seconds=timeout),
            contract_source=explorer,
            price_source=dexscreener,
            engine=load_engine(settings.ANALYTICS_ENGINE, settings),
            cache=cache,
            birdeye_api_key=settings.BIRDEYE_API_KEY,
            cache_ttl_seconds=settings.CACHE_TTL_SECONDS
        )

        self.bind(registry, collaborators)
        logger.info("All services initialized successfully")

    async def _create_cache(self):
        """Redis if configured, else MongoDB if configured, else no caching"""
        settings = self.settings

        if settings.REDIS_URL:
            backend = RedisManager(settings.REDIS_URL)
        elif settings.MONGO_URI:
            backend = MongoManager(settings.MONGO_URI, settings.MONGO_DB)
        else:
            logger.info("No cache store configured (caching disabled)")
            return NullCache()

        await backend.connect()
        return CacheManager(backend)

    async def cleanup(self):
        """Cleanup all services"""
        logger.info("Cleaning up services...")

        if self.collaborators:
            for collaborator in (
                self.collaborators.contract_source,
                self.collaborators.price_source,
                self.collaborators.metadata_reader
            ):
                disconnect = getattr(collaborator, "disconnect", None)
                if disconnect is not None:
                    await disconnect()

            await self.collaborators.cache.close()

        logger.info("Cleanup completed")


def get_service_manager() -> ServiceManager:
    """FastAPI dependency returning the process-wide service manager"""
    return ServiceManager.get_instance()
