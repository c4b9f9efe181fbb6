"""Configuration management using Pydantic Settings"""

from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "laburar-pricing"
    log_level: str = "INFO"

    # Fee rates (fractions). IIBB is a flat average, not a per-province rate.
    platform_fee_rate: float = 0.05
    vat_rate: float = 0.21
    gross_receipts_rate: float = 0.02
    processor_fee_rate: float = 0.0499
    processor_vat_rate: Optional[float] = None

    # Installments: {count: interest rate percent}, JSON in the environment
    installment_table: Dict[int, float] = {1: 0.0, 3: 0.0, 6: 0.0, 12: 0.0, 18: 12.5}

    # Service card "N cuotas sin interés" teaser in checkout quotes
    promoted_installments_enabled: bool = True


settings = Settings()
