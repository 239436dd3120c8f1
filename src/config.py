"""Centralized configuration management for the STRK tip action service.

Loads all configuration from environment variables with sensible defaults.
"""

from decimal import Decimal
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Config(BaseSettings):
    """Main configuration class for the tip service."""

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, description="Listening port (PORT)")
    static_dir: str = Field(default="public", description="Landing page and images")

    # Starknet
    donation_destination_wallet: str = Field(
        default="0x046da3ee187b8b0d3716f1c08b0c751f62ce9df30e8513a1c070526cfab12507",
        description="Recipient of every tip",
    )
    strk_contract_address: str = Field(
        default="0x04718f5a0fc34cc1af16a1cdee98ffb20c31f5cd61d6ab07201858f4287c938d",
        description="STRK ERC-20 token contract",
    )
    token_symbol: str = Field(default="STRK")
    token_decimals: int = Field(default=18)
    preset_amounts: list[Decimal] = Field(
        default_factory=lambda: [Decimal(10), Decimal(50), Decimal(100)],
        description="Preset tip amounts in display units",
    )
    prepare_timeout_seconds: float = Field(
        default=5.0, description="Upper bound for building a transfer call"
    )

    # Social preview
    tip_base_url: str = Field(
        default="https://buy-me-a-cofee-action-sotoijuan.vercel.app/api/tip",
        description="Public URL of the tip action, used as redirect target",
    )
    unfurler_url: str = Field(default="https://ethereum-blink-unfurler.vercel.app/")
    image_url: str = Field(
        default="https://buy-me-a-cofee-action-sotoijuan.vercel.app/images/buy-me-coffee.png"
    )
    twitter_handle: str = Field(default="@tjelailah")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="json")

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global config instance
config = Config()


def _is_felt_hex(value: str) -> bool:
    if not value.startswith("0x"):
        return False
    try:
        int(value, 16)
    except ValueError:
        return False
    return True


def validate_config() -> None:
    """Validate the fixed tip configuration before serving requests.

    Raises:
        ValueError: If any address or preset amount is malformed.
    """
    errors = []

    if not _is_felt_hex(config.donation_destination_wallet):
        errors.append("DONATION_DESTINATION_WALLET must be a 0x-prefixed hex address")
    if not _is_felt_hex(config.strk_contract_address):
        errors.append("STRK_CONTRACT_ADDRESS must be a 0x-prefixed hex address")

    if not config.preset_amounts:
        errors.append("PRESET_AMOUNTS must contain at least one amount")
    for amount in config.preset_amounts:
        if not amount.is_finite() or amount < 0:
            errors.append(f"Preset amount {amount} must be a non-negative number")

    if config.prepare_timeout_seconds <= 0:
        errors.append("PREPARE_TIMEOUT_SECONDS must be positive")

    if errors:
        error_msg = "Configuration errors for tip service:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
