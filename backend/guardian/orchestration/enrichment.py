"""
Metadata fallback - fills missing token name/symbol from the pair source
"""
from typing import Dict
import logging

from guardian.core.collaborators import PriceSource
from guardian.core.data_models import TokenMetadata
from guardian.core.feature_guard import FeatureGuard


logger = logging.getLogger(__name__)


class MetadataFallbackFetcher:
    """Best-effort enrichment of primary EVM metadata"""

    def __init__(self, price_source: PriceSource, guard: FeatureGuard):
        self.price_source = price_source
        self.guard = guard

    async def enrich(self, metadata: TokenMetadata, token: str) -> TokenMetadata:
        """
        Copy name/symbol of the first pair's base token into missing fields

        Returns the metadata unchanged when nothing is missing or the pair
        lookup fails, finds nothing or returns malformed data.
        """
        if metadata.name and metadata.symbol:
            return metadata

        fields = await self.guard.run(
            "metadata_fallback",
            lambda: self._fallback_fields(token),
            {}
        )

        updates = {}
        if not metadata.name and fields.get("name"):
            updates["name"] = fields["name"]
        if not metadata.symbol and fields.get("symbol"):
            updates["symbol"] = fields["symbol"]

        if updates:
            logger.debug(f"Filled {', '.join(updates)} for {token} from pair data")
        return metadata.model_copy(update=updates)

    async def _fallback_fields(self, token: str) -> Dict[str, str]:
        """Non-empty string name/symbol of the first pair's base token"""
        result = await self.price_source.lookup_price_pairs(token)

        pairs = (result or {}).get("pairs") or []
        if not pairs:
            return {}

        base_token = pairs[0].get("baseToken") or {}
        return {
            key: base_token[key]
            for key in ("name", "symbol")
            if isinstance(base_token.get(key), str) and base_token[key]
        }
