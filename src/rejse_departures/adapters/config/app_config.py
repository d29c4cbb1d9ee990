"""12-factor configuration adapter using environment variables."""

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rejse_departures.adapters.rejseplanen_api.constants import (
    BUS_PRODUCT_BIT,
    REJSEPLANEN_BASE_URL,
    TRAIN_PRODUCT_BIT,
)
from rejse_departures.domain.models.place import TransportMode


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Rejseplanen API configuration
    access_token: SecretStr | None = Field(
        default=None, description="Access id for the Rejseplanen API (ACCESS_TOKEN)"
    )
    api_base_url: str = Field(
        default=REJSEPLANEN_BASE_URL, description="Base URL of the Rejseplanen API"
    )
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")
    bus_product_bit: int = Field(
        default=BUS_PRODUCT_BIT, description="Product bit selecting buses on the departure board"
    )
    train_product_bit: int = Field(
        default=TRAIN_PRODUCT_BIT,
        description="Product bit selecting trains on the departure board",
    )

    # Board configuration
    timezone: str = Field(
        default="Europe/Copenhagen",
        description="Timezone departure dates and times are interpreted in (IANA name)",
    )
    refresh_interval_seconds: int = Field(
        default=10, description="Interval between countdown updates in seconds"
    )

    # Persisted trip configuration
    config_store_path: str = Field(
        default="~/.config/rejse-departures/store.json",
        description="Path of the JSON file holding the persisted trip configuration",
    )
    config_namespace: str = Field(
        default="rejseplanen-config",
        description="Key the trip configuration is stored under",
    )
    current_location_sentinel: str = Field(
        default="CURRENT_LOCATION",
        description="Origin id meaning 'use the device position'",
    )

    # Device position for the current-location origin
    latitude: float | None = Field(default=None, description="Device latitude")
    longitude: float | None = Field(default=None, description="Device longitude")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("bus_product_bit", "train_product_bit")
    @classmethod
    def validate_product_bit(cls, v: int) -> int:
        """Validate a product bit is a single positive bit."""
        if v <= 0 or v & (v - 1):
            raise ValueError("product bits must be positive powers of two")
        return v

    @field_validator("rate_limit_per_minute")
    @classmethod
    def validate_rate_limit(cls, v: int) -> int:
        """Validate the per-IP quota is positive."""
        if v <= 0:
            raise ValueError("rate_limit_per_minute must be greater than 0")
        return v

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        """Validate the countdown interval is positive."""
        if v <= 0:
            raise ValueError("refresh_interval_seconds must be greater than 0")
        return v

    @property
    def product_bits(self) -> dict[TransportMode, int]:
        """Mode to product bit table for the departure board."""
        return {
            TransportMode.BUS: self.bus_product_bit,
            TransportMode.TRAIN: self.train_product_bit,
        }

    @property
    def resolved_config_store_path(self) -> Path:
        """Store path with the user directory expanded."""
        return Path(self.config_store_path).expanduser()
