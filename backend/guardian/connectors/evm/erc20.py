"""
ERC-20 metadata reader
Handles on-chain token metadata retrieval via Web3.py
"""
from typing import Any, Dict, Optional
from web3 import AsyncWeb3
import logging

from guardian.config.constants import RENOUNCED_OWNERS
from guardian.core.collaborators import TokenMetadataReader
from guardian.core.data_models import TokenMetadata
from guardian.core.exceptions import ContractError
from guardian.utils.validators import AddressValidator


logger = logging.getLogger(__name__)


# Minimal ABI: ERC-20 views plus Ownable.owner()
ERC20_ABI = [
    {"inputs": [], "name": "name", "outputs": [{"name": "", "type": "string"}],
     "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "symbol", "outputs": [{"name": "", "type": "string"}],
     "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "decimals", "outputs": [{"name": "", "type": "uint8"}],
     "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "totalSupply", "outputs": [{"name": "", "type": "uint256"}],
     "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "owner", "outputs": [{"name": "", "type": "address"}],
     "stateMutability": "view", "type": "function"},
    {"inputs": [{"name": "account", "type": "address"}], "name": "balanceOf",
     "outputs": [{"name": "", "type": "uint256"}], "stateMutability": "view", "type": "function"}
]


class Erc20MetadataReader(TokenMetadataReader):
    """Reads ERC-20 metadata, keeping one AsyncWeb3 client per RPC endpoint"""

    def __init__(self, timeout_seconds: int = 20):
        self.timeout_seconds = timeout_seconds
        self._clients: Dict[str, AsyncWeb3] = {}

    def _get_web3(self, rpc: str) -> AsyncWeb3:
        if rpc not in self._clients:
            self._clients[rpc] = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(
                rpc,
                request_kwargs={"timeout": self.timeout_seconds}
            ))
        return self._clients[rpc]

    async def read_token_metadata(self, rpc: str, token: str) -> TokenMetadata:
        """
        Read token metadata

        decimals and totalSupply are required; name, symbol and owner are
        optional views and come back as None when they revert.
        """
        if not AddressValidator.validate_evm_address(token):
            raise ContractError(f"Invalid token address: {token}")

        address = AsyncWeb3.to_checksum_address(token)

        w3 = self._get_web3(rpc)
        contract = w3.eth.contract(address=address, abi=ERC20_ABI)

        try:
            decimals = await contract.functions.decimals().call()
            total_supply = await contract.functions.totalSupply().call()
        except Exception as e:
            raise ContractError(f"Not an ERC-20 token at {token}: {str(e)}")

        name = await self._optional_call(contract, "name")
        symbol = await self._optional_call(contract, "symbol")
        owner = await self._optional_call(contract, "owner")

        owner = owner.lower() if owner else None

        return TokenMetadata(
            provider=w3,
            iface=contract,
            name=name or None,
            symbol=symbol or None,
            decimals=int(decimals),
            total_supply=str(total_supply),
            owner=owner,
            owner_renounced=(owner in RENOUNCED_OWNERS) if owner else None
        )

    @staticmethod
    async def _optional_call(contract, function_name: str) -> Optional[Any]:
        try:
            return await getattr(contract.functions, function_name)().call()
        except Exception as e:
            logger.debug(f"{function_name}() unavailable on {contract.address}: {str(e)}")
            return None

    async def disconnect(self) -> None:
        """Close provider sessions"""
        for w3 in self._clients.values():
            disconnect = getattr(w3.provider, "disconnect", None)
            if disconnect is not None:
                await disconnect()
        self._clients.clear()
