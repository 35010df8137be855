"""
Tests for FastAPI endpoints
"""
from guardian.core.exceptions import ContractError

from conftest import EVM_CENTER, EVM_TOKEN, SOL_MINT


def test_liveness(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Guardian Protocol API running"


def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["chains"] == ["base", "solana"]
    assert data["cache"] == "disabled"


def test_analyze_unknown_chain(client):
    response = client.get("/analyze?chain=unknown&token=0xabc")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Unknown chain"}


def test_analyze_missing_token(client):
    response = client.get("/analyze?chain=base")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Missing token/mint"}


def test_analyze_fast(client, engine):
    response = client.get(f"/analyze?chain=base&token={EVM_TOKEN}&fast=1")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["mode"] == "fast"
    assert data["facts"]["holders"]["top10Pct"] is None
    assert "estimate_top_holders_pct" not in engine.calls


def test_analyze_standard_response_shape(client):
    response = client.get(f"/analyze?chain=BASE&token=%20{EVM_TOKEN}%20&window=abc&span=0&delay=-5")

    assert response.status_code == 200
    data = response.json()
    assert list(data) == [
        "ok", "facts", "contractVerified", "explorerOwner", "explorer",
        "mode", "windowBlocks", "span", "delay"
    ]
    assert data["facts"]["chain"] == "base"
    assert data["facts"]["token"] == EVM_TOKEN
    assert data["facts"]["totalSupply"] == "1000000000000000000000"
    assert data["facts"]["liquidity"] == {"locked": None, "locker": None, "unlockDate": None}
    assert data["facts"]["holders"] == {"top10Pct": 42.5}
    assert data["mode"] == "standard"
    assert (data["windowBlocks"], data["span"], data["delay"]) == (200, 1, 0)


def test_analyze_estimator_failure_still_200(client, engine):
    engine.errors["estimate_top_holders_pct"] = RuntimeError("rpc limit")

    response = client.get(f"/analyze?chain=base&token={EVM_TOKEN}")

    assert response.status_code == 200
    assert response.json()["facts"]["holders"]["top10Pct"] is None


def test_analyze_metadata_failure_is_500(client, metadata_reader):
    metadata_reader.error = ContractError("Not an ERC-20 token at 0xabc")

    response = client.get(f"/analyze?chain=base&token={EVM_TOKEN}")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "Not an ERC-20 token at 0xabc"}


def test_unexpected_error_without_message_uses_fallback(client, metadata_reader):
    metadata_reader.error = RuntimeError()

    response = client.get(f"/analyze?chain=base&token={EVM_TOKEN}")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "Analyze failed"}


def test_analyze_solana(client):
    response = client.get(f"/analyze?chain=solana&token={SOL_MINT}")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["chain"] == "solana"


def test_graph_bad_sol_address(client, engine):
    response = client.get(f"/graph?chain=solana&token={SOL_MINT}&center=not-an-address")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Bad Sol address"}
    assert "build_solana_graph" not in engine.calls


def test_graph_missing_center(client):
    response = client.get(f"/graph?chain=base&token={EVM_TOKEN}")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Missing token/center"}


def test_graph_is_idempotent(client):
    url = f"/graph?chain=base&token={EVM_TOKEN}&center={EVM_CENTER}&window=500&span=2&delay=100"

    first = client.get(url)
    second = client.get(url)

    assert first.status_code == 200
    assert first.content == second.content
    data = first.json()
    assert data["fromBlock"] == 100
    assert (data["windowBlocks"], data["span"], data["delay"]) == (500, 2, 100)


def test_jeeter_solana_is_evm_only(client):
    response = client.get(f"/jeeter?chain=solana&token={SOL_MINT}")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "EVM only"}


def test_jeeter_failure_is_zeroed(client, engine):
    engine.errors["build_jeeter_report"] = RuntimeError("no pair")

    response = client.get(f"/jeeter?chain=base&token={EVM_TOKEN}&window=50")

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "priceNow": None,
        "fromBlock": None,
        "toBlock": None,
        "jeeters": [],
        "windowBlocks": 50,
        "span": 5,
        "delay": 500
    }


def test_request_id_header(client):
    response = client.get("/")

    assert "X-Request-ID" in response.headers
    assert response.headers["X-Content-Type-Options"] == "nosniff"
