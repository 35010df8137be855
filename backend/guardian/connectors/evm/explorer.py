"""
Etherscan-family explorer connector
Contract verification and owner lookup through the multichain API
"""
from typing import Any, Dict, Optional
import logging

from guardian.config.constants import ETHERSCAN_V2_URL
from guardian.core.base_connector import BaseConnector
from guardian.core.chain_registry import ChainRegistry
from guardian.core.collaborators import ContractSourceLookup
from guardian.core.data_models import ContractSource
from guardian.core.exceptions import APIError


logger = logging.getLogger(__name__)


class EtherscanConnector(BaseConnector, ContractSourceLookup):
    """Etherscan V2 connector (one endpoint, chain selected by chainid)"""

    def __init__(self, registry: ChainRegistry, api_key: Optional[str] = None, timeout_seconds: int = 20):
        super().__init__(
            source_name="Etherscan",
            api_key=api_key,
            rate_limit=5,
            timeout_seconds=timeout_seconds
        )
        self.registry = registry

    def _get_base_url(self) -> str:
        return ETHERSCAN_V2_URL

    async def _call(self, chain_id: int, action: str, api_key: Optional[str], **params) -> Any:
        query = {
            "chainid": chain_id,
            "module": "contract",
            "action": action,
            "apikey": api_key or self.api_key or "",
            **params
        }
        data = await self._make_request("GET", "", params=query)

        if str(data.get("status")) != "1":
            # "No data found" style answers are empty results, anything else is an error
            result = data.get("result")
            if isinstance(result, list) or "no data" in str(data.get("message", "")).lower():
                return []
            raise APIError(f"{self.source_name} {action} failed: {result or data.get('message')}")

        return data.get("result") or []

    async def lookup_contract_source(
        self,
        chain_key: str,
        token: str,
        api_key: Optional[str] = None
    ) -> ContractSource:
        """Get verification status (getsourcecode) and creator (getcontractcreation)"""
        chain = self.registry.resolve(chain_key)
        if chain.chain_id is None:
            raise APIError(f"No explorer API for chain {chain_key}")

        sources = await self._call(chain.chain_id, "getsourcecode", api_key, address=token)
        verified = self._parse_verified(sources)

        creations = await self._call(
            chain.chain_id, "getcontractcreation", api_key, contractaddresses=token
        )
        owner = self._parse_creator(creations)

        return ContractSource(verified=verified, owner=owner)

    @staticmethod
    def _parse_verified(result: Any) -> Optional[bool]:
        if not isinstance(result, list) or not result:
            return None
        entry: Dict[str, Any] = result[0]
        return bool((entry.get("SourceCode") or "").strip())

    @staticmethod
    def _parse_creator(result: Any) -> Optional[str]:
        if not isinstance(result, list) or not result:
            return None
        creator = result[0].get("contractCreator")
        return creator.lower() if creator else None
