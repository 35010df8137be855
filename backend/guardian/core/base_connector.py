"""
Base connector class for HTTP JSON data sources
Provides common session handling, rate limiting and error mapping
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Any
import asyncio
import aiohttp
import logging

from guardian.core.exceptions import ConnectionError, APIError, RateLimitError


logger = logging.getLogger(__name__)


class BaseConnector(ABC):
    """Base class for all HTTP API connectors"""

    def __init__(
        self,
        source_name: str,
        api_key: Optional[str] = None,
        rate_limit: int = 5,
        timeout_seconds: int = 20
    ):
        self.source_name = source_name
        self.api_key = api_key
        self.rate_limit = rate_limit
        self.timeout_seconds = timeout_seconds
        self.session: Optional[aiohttp.ClientSession] = None
        self._rate_limiter = asyncio.Semaphore(rate_limit)
        self._is_connected = False

        logger.info(f"Initialized {source_name} connector")

    async def __aenter__(self):
        """Async context manager entry"""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.disconnect()

    async def connect(self) -> None:
        """Open the HTTP session"""
        if not self.session:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self.session = aiohttp.ClientSession(timeout=timeout)
            self._is_connected = True
            logger.info(f"Connected to {self.source_name}")

    async def disconnect(self) -> None:
        """Close the HTTP session"""
        if self.session:
            await self.session.close()
            self.session = None
            self._is_connected = False
            logger.info(f"Disconnected from {self.source_name}")

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None
    ) -> Any:
        """Make HTTP request with rate limiting and error handling"""
        if not self.session:
            await self.connect()

        async with self._rate_limiter:
            try:
                url = f"{self._get_base_url()}{endpoint}"

                async with self.session.request(
                    method=method,
                    url=url,
                    params=params,
                    headers=headers or {}
                ) as response:
                    if response.status == 429:
                        raise RateLimitError(f"Rate limit exceeded for {self.source_name}")

                    if response.status >= 400:
                        error_text = await response.text()
                        raise APIError(
                            f"API error from {self.source_name}: {response.status} - {error_text[:200]}"
                        )

                    return await response.json(content_type=None)

            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise ConnectionError(f"Connection error to {self.source_name}: {str(e) or 'timeout'}")

    @abstractmethod
    def _get_base_url(self) -> str:
        """Get base URL for API requests"""
        pass

    @property
    def is_connected(self) -> bool:
        """Check if connector is connected"""
        return self._is_connected
