"""
API Configuration

Centralized settings for the FastAPI application.
API metadata is hardcoded, while environment-specific settings load from .env file.
"""

from decimal import Decimal
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_nft.units import DEFAULT_DECIMALS, to_base_units


# Get the project root directory (one level up from api/)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings for the Simple NFT API

    API metadata (title, description, version) are hardcoded.
    Environment-specific settings are loaded from .env file.
    """

    # ============================================================================
    # API Metadata (hardcoded - versioned with code)
    # ============================================================================

    api_title: str = "Simple NFT API"
    api_description: str = (
        "Minimal NFT issuance contract. Register token definitions, mint tokens "
        "against the latest definition for a fixed fee, and read fully on-chain "
        "metadata as inline JSON data locators."
    )
    api_version: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # ============================================================================
    # Environment Settings (loaded from .env)
    # ============================================================================

    environment: str = "development"  # development, staging, production
    api_port: int = 8000
    log_level: str = "INFO"

    # Mint fee in native currency units (e.g. 0.0069 ETH)
    mint_fee: Decimal = Decimal("0.0069")
    currency_decimals: int = DEFAULT_DECIMALS
    currency_symbol: str = "ETH"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def mint_fee_base_units(self) -> int:
        """Mint fee in smallest currency units"""
        return to_base_units(self.mint_fee, self.currency_decimals)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.environment.lower() == "production"


# ============================================================================
# Global settings instance
# ============================================================================

settings = Settings()
