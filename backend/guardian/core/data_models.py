"""
Data models for the Guardian token risk API
Uses Pydantic for validation and serialization
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from enum import Enum


class ChainKind(str, Enum):
    """Chain family enumeration"""
    EVM = "evm"
    SOLANA = "solana"


class AnalysisMode(str, Enum):
    """Analysis depth for /analyze"""
    FAST = "fast"
    STANDARD = "standard"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ===== Registry & request =====

class ChainConfig(BaseModel):
    """Static configuration of one supported chain"""

    model_config = ConfigDict(frozen=True)

    key: str
    kind: ChainKind
    rpc_endpoint: str
    explorer_base_url: str
    explorer_api_key: Optional[str] = None
    chain_id: Optional[int] = None

    def token_url(self, token: str) -> str:
        return f"{self.explorer_base_url.rstrip('/')}/token/{token}"


class AnalysisWindow(BaseModel):
    """Block-range scanning parameters for optional on-chain scans"""

    model_config = ConfigDict(frozen=True)

    window_blocks: int = Field(200, ge=1)
    span: int = Field(5, ge=1, le=10)
    delay_ms: int = Field(500, ge=0)
    fast: bool = False


class RequestParams(BaseModel):
    """Normalized query parameters of one request"""

    model_config = ConfigDict(frozen=True)

    chain_key: str
    token: str
    center: str = ""
    window: AnalysisWindow


# ===== Collaborator outputs =====

class TokenMetadata(BaseModel):
    """Primary EVM token metadata plus data-access handles"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: Any = None
    iface: Any = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    total_supply: Optional[str] = None
    owner: Optional[str] = None
    owner_renounced: Optional[bool] = None


class ContractSource(BaseModel):
    """Explorer verification status and owner"""
    verified: Optional[bool] = None
    owner: Optional[str] = None


class GraphResult(CamelModel):
    """Token transfer graph around a center address"""
    from_block: Optional[int] = None
    to_block: Optional[int] = None
    nodes: List[Any] = Field(default_factory=list)
    links: List[Any] = Field(default_factory=list)


class JeeterResult(CamelModel):
    """Early-seller report"""
    price_now: Optional[float] = None
    from_block: Optional[int] = None
    to_block: Optional[int] = None
    jeeters: List[Any] = Field(default_factory=list)


# ===== Response payloads =====

class LiquidityLock(CamelModel):
    """LP lock status; no collaborator produces it yet"""
    locked: Optional[bool] = None
    locker: Optional[str] = None
    unlock_date: Optional[str] = None


class HolderStats(CamelModel):
    top10_pct: Optional[float] = None


class TokenFacts(CamelModel):
    """Primary identity facts of an EVM token"""
    chain: str
    token: str
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    total_supply: Optional[str] = None
    owner: Optional[str] = None
    owner_renounced: Optional[bool] = None
    liquidity: LiquidityLock = Field(default_factory=LiquidityLock)
    holders: HolderStats = Field(default_factory=HolderStats)


class AnalysisResponse(CamelModel):
    ok: bool = True
    facts: TokenFacts
    contract_verified: Optional[bool] = None
    explorer_owner: Optional[str] = None
    explorer: str
    mode: AnalysisMode
    window_blocks: int
    span: int
    delay: int


class SolanaAnalysisResponse(CamelModel):
    """Solana analyzer payload, passed through as-is"""

    model_config = ConfigDict(extra="allow")

    ok: bool = True


class GraphResponse(CamelModel):
    ok: bool = True
    from_block: Optional[int] = None
    to_block: Optional[int] = None
    nodes: List[Any] = Field(default_factory=list)
    links: List[Any] = Field(default_factory=list)
    window_blocks: int
    span: int
    delay: int


class JeeterResponse(CamelModel):
    ok: bool = True
    price_now: Optional[float] = None
    from_block: Optional[int] = None
    to_block: Optional[int] = None
    jeeters: List[Any] = Field(default_factory=list)
    window_blocks: int
    span: int
    delay: int


class ErrorResponse(CamelModel):
    ok: bool = False
    error: str
