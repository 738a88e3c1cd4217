"""Application configuration using pydantic-settings.

RPC endpoints are configured per supported network and resolved by the
network's display name.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")
    log_level: str = Field(
        default="INFO", description="Log level used when debug is disabled"
    )

    # ======================
    # Chain RPC Endpoints
    # ======================
    base_rpc_url: str = Field(
        default="https://mainnet.base.org", description="Base RPC URL"
    )
    arbitrum_rpc_url: str = Field(
        default="https://arb1.arbitrum.io/rpc", description="Arbitrum One RPC URL"
    )
    bsc_rpc_url: str = Field(
        default="https://bsc-dataseed.bnbchain.org/", description="BNB Smart Chain RPC URL"
    )
    polygon_rpc_url: str = Field(
        default="https://polygon-rpc.com", description="Polygon RPC URL"
    )
    scroll_rpc_url: str = Field(
        default="https://rpc.scroll.io", description="Scroll RPC URL"
    )
    optimism_rpc_url: str = Field(
        default="https://mainnet.optimism.io", description="Optimism RPC URL"
    )
    rpc_timeout: float = Field(
        default=10.0, description="Per-request RPC timeout in seconds"
    )

    # ======================
    # Encryption
    # ======================
    aggregator_public_key_pem: Optional[str] = Field(
        default=None, description="PEM-encoded RSA public key for sealing payloads"
    )

    @property
    def logging_level(self) -> int:
        """Resolve the numeric logging level; debug mode forces DEBUG."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_rpc_url(self, network: str) -> str:
        """Get RPC URL for a network by its display name."""
        rpc_map = {
            "Base": self.base_rpc_url,
            "Arbitrum One": self.arbitrum_rpc_url,
            "BNB Smart Chain": self.bsc_rpc_url,
            "Polygon": self.polygon_rpc_url,
            "Scroll": self.scroll_rpc_url,
            "Optimism": self.optimism_rpc_url,
        }
        return rpc_map.get(network, "")

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "log_level": self.log_level,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "rpc_timeout": self.rpc_timeout,
            "networks": {
                "Base": {"rpc": self.base_rpc_url},
                "Arbitrum One": {"rpc": self.arbitrum_rpc_url},
                "BNB Smart Chain": {"rpc": self.bsc_rpc_url},
                "Polygon": {"rpc": self.polygon_rpc_url},
                "Scroll": {"rpc": self.scroll_rpc_url},
                "Optimism": {"rpc": self.optimism_rpc_url},
            },
            "public_key": "***" if self.aggregator_public_key_pem else "(not set)",
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
