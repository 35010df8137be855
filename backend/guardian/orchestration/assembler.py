"""
Response assembly - builds the response models of every endpoint
"""
from typing import Any, Dict, Mapping, Optional

from guardian.core.data_models import (
    AnalysisMode,
    AnalysisResponse,
    AnalysisWindow,
    ChainConfig,
    ContractSource,
    ErrorResponse,
    GraphResponse,
    GraphResult,
    HolderStats,
    JeeterResponse,
    JeeterResult,
    SolanaAnalysisResponse,
    TokenFacts,
    TokenMetadata
)


def window_echo(window: AnalysisWindow) -> Dict[str, int]:
    """Effective window parameters as echoed in responses"""
    return {
        "window_blocks": window.window_blocks,
        "span": window.span,
        "delay": window.delay_ms
    }


def assemble_analysis(
    chain: ChainConfig,
    token: str,
    metadata: TokenMetadata,
    top10_pct: Optional[float],
    source: ContractSource,
    window: AnalysisWindow
) -> AnalysisResponse:
    facts = TokenFacts(
        chain=chain.key,
        token=token,
        name=metadata.name,
        symbol=metadata.symbol,
        decimals=metadata.decimals,
        total_supply=metadata.total_supply,
        owner=metadata.owner,
        owner_renounced=metadata.owner_renounced,
        holders=HolderStats(top10_pct=top10_pct)
    )

    return AnalysisResponse(
        facts=facts,
        contract_verified=source.verified,
        explorer_owner=source.owner,
        explorer=chain.token_url(token),
        mode=AnalysisMode.FAST if window.fast else AnalysisMode.STANDARD,
        **window_echo(window)
    )


def assemble_solana_analysis(payload: Any) -> SolanaAnalysisResponse:
    """Pass the Solana analyzer payload through, forcing ok=true"""
    if hasattr(payload, "model_dump"):
        payload = payload.model_dump(mode="json", by_alias=True)
    data = {k: v for k, v in dict(payload or {}).items() if k != "ok"}
    return SolanaAnalysisResponse(ok=True, **data)


def assemble_graph(graph: GraphResult, window: AnalysisWindow) -> GraphResponse:
    return GraphResponse(
        from_block=graph.from_block,
        to_block=graph.to_block,
        nodes=graph.nodes,
        links=graph.links,
        **window_echo(window)
    )


def assemble_jeeter(report: JeeterResult, window: AnalysisWindow) -> JeeterResponse:
    return JeeterResponse(
        price_now=report.price_now,
        from_block=report.from_block,
        to_block=report.to_block,
        jeeters=report.jeeters,
        **window_echo(window)
    )


def assemble_error(message: str) -> ErrorResponse:
    return ErrorResponse(error=message)


def as_payload(response: Any) -> Mapping[str, Any]:
    """JSON-ready dict of a response model"""
    return response.to_json_dict()
