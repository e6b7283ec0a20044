"""Application configuration."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dog_licence.constants import fees
from dog_licence.models.domain.fee import FeeSchedule


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Dog Licence Fee API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # CORS settings
    cors_origins: str = "http://localhost:3000"  # Comma-separated list

    # Licence status: days before expiry a licence counts as "expiring"
    expiring_within_days: int = Field(default=fees.DEFAULT_EXPIRING_WITHIN_DAYS, ge=0)

    # Municipal fee schedule
    fee_replacement: Decimal = Field(default=fees.REPLACEMENT_FEE, ge=0)
    fee_dangerous: Decimal = Field(default=fees.DANGEROUS_DOG_FEE, ge=0)
    fee_nuisance: Decimal = Field(default=fees.NUISANCE_DOG_FEE, ge=0)
    fee_under_minimum_age: Decimal = Field(default=fees.UNDER_MINIMUM_AGE_FEE, ge=0)
    fee_spayed_neutered: Decimal = Field(default=fees.SPAYED_NEUTERED_FEE, ge=0)
    fee_unaltered: Decimal = Field(default=fees.UNALTERED_FEE, ge=0)
    fee_kennel: Decimal = Field(default=fees.KENNEL_LICENCE_FEE, ge=0)
    minimum_age_months: int = Field(default=fees.MINIMUM_AGE_MONTHS, ge=0)

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings for deployment requirements."""
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG mode cannot be enabled in production environment. "
                "This would expose API documentation and detailed error messages."
            )
        return self

    @property
    def fee_schedule(self) -> FeeSchedule:
        """Build the fee schedule value object from the configured amounts."""
        return FeeSchedule(
            replacement=self.fee_replacement,
            dangerous=self.fee_dangerous,
            nuisance=self.fee_nuisance,
            under_minimum_age=self.fee_under_minimum_age,
            spayed_neutered=self.fee_spayed_neutered,
            unaltered=self.fee_unaltered,
            kennel=self.fee_kennel,
            minimum_age_months=self.minimum_age_months,
        )

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
