"""
Tests for the feature guard and the chain registry
"""
import asyncio
import logging
import pytest

from guardian.config.settings import Settings
from guardian.core.chain_registry import load_chain_registry
from guardian.core.data_models import ChainKind
from guardian.core.exceptions import UnknownChainError
from guardian.core.feature_guard import Failed, FeatureGuard, Ok


@pytest.mark.asyncio
async def test_guard_returns_value_on_success():
    guard = FeatureGuard()

    async def operation():
        return 12

    assert await guard.run("holders", operation, None) == 12
    assert await guard.attempt("holders", operation) == Ok(12)


@pytest.mark.asyncio
async def test_guard_returns_default_and_logs_on_failure(caplog):
    guard = FeatureGuard()

    async def operation():
        raise RuntimeError("rpc down")

    with caplog.at_level(logging.ERROR):
        result = await guard.run("holders", operation, "default")

    assert result == "default"
    assert "holders failed: rpc down" in caplog.text
    assert caplog.records[-1].feature == "holders"


@pytest.mark.asyncio
async def test_guard_attempt_reports_failure_reason():
    guard = FeatureGuard()

    async def operation():
        raise TimeoutError()

    result = await guard.attempt("graph", operation)

    assert isinstance(result, Failed)
    assert result.feature == "graph"
    assert result.reason == "TimeoutError"


@pytest.mark.asyncio
async def test_guard_does_not_swallow_cancellation():
    guard = FeatureGuard()

    async def operation():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await guard.run("graph", operation, None)


def test_registry_resolves_known_chain(registry):
    chain = registry.resolve("base")

    assert chain.kind == ChainKind.EVM
    assert chain.token_url("0xabc") == "https://basescan.org/token/0xabc"


def test_registry_unknown_chain(registry):
    with pytest.raises(UnknownChainError) as exc:
        registry.resolve("unknown")

    assert exc.value.message == "Unknown chain"
    assert exc.value.status_code == 400
    assert registry.get("unknown") is None


def test_load_chain_registry_applies_overrides():
    settings = Settings(BASE_RPC_URL=" https://my.base.rpc ", ETHERSCAN_API_KEY="key")

    registry = load_chain_registry(settings)

    assert registry.keys() == ["base", "bsc", "ethereum", "solana"]
    assert registry.resolve("base").rpc_endpoint == "https://my.base.rpc"
    assert registry.resolve("base").explorer_api_key == "key"
    assert registry.resolve("solana").kind == ChainKind.SOLANA
    assert registry.resolve("solana").explorer_api_key is None
