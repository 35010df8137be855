"""
Shared fixtures: in-memory collaborators, no network access
"""
import pytest
from fastapi.testclient import TestClient

from guardian.api.rest_api import app
from guardian.core.chain_registry import ChainRegistry
from guardian.core.collaborators import (
    AnalysisEngine,
    Collaborators,
    ContractSourceLookup,
    PriceSource,
    TokenMetadataReader
)
from guardian.core.data_models import (
    ChainConfig,
    ChainKind,
    ContractSource,
    GraphResult,
    JeeterResult,
    TokenMetadata
)
from guardian.core.feature_guard import FeatureGuard
from guardian.core.service_manager import ServiceManager, get_service_manager
from guardian.storage.cache_manager import NullCache


EVM_TOKEN = "0x4200000000000000000000000000000000000006"
EVM_CENTER = "0xAbC0000000000000000000000000000000000001"
SOL_MINT = "So11111111111111111111111111111111111111112"
SOL_CENTER = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


class FakeMetadataReader(TokenMetadataReader):
    def __init__(self, metadata=None, error=None):
        self.metadata = metadata or TokenMetadata(
            provider="provider",
            iface="iface",
            name="Wrapped Ether",
            symbol="WETH",
            decimals=18,
            total_supply="1000000000000000000000",
            owner=None,
            owner_renounced=None
        )
        self.error = error
        self.calls = []

    async def read_token_metadata(self, rpc, token):
        self.calls.append({"rpc": rpc, "token": token})
        if self.error:
            raise self.error
        return self.metadata.model_copy()


class FakeContractSource(ContractSourceLookup):
    def __init__(self, source=None, error=None):
        self.source = source or ContractSource(verified=True, owner="0xdeployer")
        self.error = error
        self.calls = []

    async def lookup_contract_source(self, chain_key, token, api_key=None):
        self.calls.append({"chain_key": chain_key, "token": token, "api_key": api_key})
        if self.error:
            raise self.error
        return self.source


class FakePriceSource(PriceSource):
    def __init__(self, pairs=None, error=None):
        self.pairs = pairs if pairs is not None else []
        self.error = error
        self.calls = []

    async def lookup_price_pairs(self, token):
        self.calls.append(token)
        if self.error:
            raise self.error
        return {"pairs": self.pairs}


class FakeEngine(AnalysisEngine):
    """Engine returning fixed data; put an exception in errors[<method>] to make it fail"""

    def __init__(self):
        self.calls = {}
        self.top10_pct = 42.5
        self.graph = GraphResult(
            from_block=100,
            to_block=300,
            nodes=[{"id": EVM_CENTER.lower()}, {"id": "0xpeer"}],
            links=[{"source": EVM_CENTER.lower(), "target": "0xpeer", "value": 10.0}]
        )
        self.jeeter = JeeterResult(
            price_now=0.0012,
            from_block=100,
            to_block=300,
            jeeters=[{"address": "0xseller", "soldPct": 80.0}]
        )
        self.solana_payload = {"facts": {"mint": SOL_MINT, "decimals": 9}, "chain": "solana"}
        self.solana_graph = {"nodes": [{"id": SOL_CENTER}], "links": []}
        self.errors = {}

    def _record(self, name, **kwargs):
        self.calls.setdefault(name, []).append(kwargs)
        if name in self.errors:
            raise self.errors[name]

    async def estimate_top_holders_pct(self, provider, iface, token, decimals, window):
        self._record("estimate_top_holders_pct", provider=provider, token=token, decimals=decimals, window=window)
        return self.top10_pct

    async def build_transfer_graph(self, provider, token, center, window):
        self._record("build_transfer_graph", provider=provider, token=token, center=center, window=window)
        return self.graph

    async def build_jeeter_report(self, chain_key, token, provider, decimals, window):
        self._record("build_jeeter_report", chain_key=chain_key, token=token, decimals=decimals, window=window)
        return self.jeeter

    async def analyze_solana_mint(self, rpc, mint, explorer, api_key=None):
        self._record("analyze_solana_mint", rpc=rpc, mint=mint, explorer=explorer, api_key=api_key)
        return self.solana_payload

    async def build_solana_graph(self, mint, center, api_key=None):
        self._record("build_solana_graph", mint=mint, center=center, api_key=api_key)
        return self.solana_graph


@pytest.fixture
def registry():
    return ChainRegistry([
        ChainConfig(
            key="base",
            kind=ChainKind.EVM,
            rpc_endpoint="https://rpc.base.test",
            explorer_base_url="https://basescan.org",
            explorer_api_key="scan-key",
            chain_id=8453
        ),
        ChainConfig(
            key="solana",
            kind=ChainKind.SOLANA,
            rpc_endpoint="https://rpc.solana.test",
            explorer_base_url="https://solscan.io"
        )
    ])


@pytest.fixture
def metadata_reader():
    return FakeMetadataReader()


@pytest.fixture
def contract_source():
    return FakeContractSource()


@pytest.fixture
def price_source():
    return FakePriceSource()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def collaborators(metadata_reader, contract_source, price_source, engine):
    return Collaborators(
        metadata_reader=metadata_reader,
        contract_source=contract_source,
        price_source=price_source,
        engine=engine,
        cache=NullCache(),
        birdeye_api_key="birdeye-key"
    )


@pytest.fixture
def services(registry, collaborators):
    return ServiceManager().bind(registry, collaborators, FeatureGuard())


@pytest.fixture
def client(services):
    """Create test client bound to the fake services"""
    app.dependency_overrides[get_service_manager] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()


class DictStore:
    """In-memory stand-in for a Redis/MongoDB cache store"""
    name = "dict"

    def __init__(self):
        self.data = {}
        self.disconnected = False

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, expire=None):
        self.data[key] = value
        return True

    async def delete(self, key):
        self.data.pop(key, None)
        return True

    async def disconnect(self):
        self.disconnected = True
