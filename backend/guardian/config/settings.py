"""
Configuration settings for the Guardian token risk API
Manages environment variables and application settings
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application configuration settings"""

    # Application
    APP_NAME: str = "Guardian Protocol API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # API Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    # Cache - MongoDB (optional)
    MONGO_URI: str = ""
    MONGO_DB: str = "guardian"

    # Cache - Redis (optional, preferred over MongoDB when both are set)
    REDIS_URL: str = ""

    CACHE_TTL_SECONDS: int = 600

    # Third-party API keys
    BIRDEYE_API_KEY: str = ""
    ETHERSCAN_API_KEY: str = ""

    # Blockchain RPC endpoint overrides (registry defaults are used when unset)
    ETHEREUM_RPC_URL: str = ""
    BASE_RPC_URL: str = ""
    BSC_RPC_URL: str = ""
    SOLANA_RPC_URL: str = ""

    # Connectors
    HTTP_TIMEOUT_SECONDS: int = 20

    # Analysis engine factory, "package.module:attribute"
    ANALYTICS_ENGINE: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def rpc_overrides(self) -> dict:
        """RPC overrides keyed by chain key"""
        overrides = {
            "ethereum": self.ETHEREUM_RPC_URL,
            "base": self.BASE_RPC_URL,
            "bsc": self.BSC_RPC_URL,
            "solana": self.SOLANA_RPC_URL
        }
        return {key: url.strip() for key, url in overrides.items() if url.strip()}


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
