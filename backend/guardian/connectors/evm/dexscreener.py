"""
DexScreener connector - token pair lookup
"""
from typing import Any, Dict
import logging

from guardian.config.constants import DEXSCREENER_URL
from guardian.core.base_connector import BaseConnector
from guardian.core.collaborators import PriceSource


logger = logging.getLogger(__name__)


class DexScreenerConnector(BaseConnector, PriceSource):
    """DexScreener public API connector"""

    BASE_URL = DEXSCREENER_URL

    def __init__(self, timeout_seconds: int = 20):
        super().__init__(
            source_name="DexScreener",
            rate_limit=10,
            timeout_seconds=timeout_seconds
        )

    def _get_base_url(self) -> str:
        return self.BASE_URL

    async def lookup_price_pairs(self, token: str) -> Dict[str, Any]:
        """Get all pairs trading the token"""
        data = await self._make_request("GET", f"/latest/dex/tokens/{token}")
        pairs = (data or {}).get("pairs") or []
        return {"pairs": pairs}
