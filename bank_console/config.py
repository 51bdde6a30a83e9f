"""Configuration management for the bank console."""

import os
from dataclasses import dataclass


@dataclass
class BankConfig:
    """Runtime settings for the console session."""

    log_level: str = "WARNING"
    seed_demo_data: bool = True
    fixed_deposit_term_days: int = 30
    date_format: str = "%Y-%m-%d"

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("BANK_LOG_LEVEL", "WARNING").upper(),
            seed_demo_data=os.getenv("BANK_SEED_DEMO", "true").lower() == "true",
            fixed_deposit_term_days=int(os.getenv("BANK_FD_TERM_DAYS", "30")),
            date_format=os.getenv("BANK_DATE_FORMAT", "%Y-%m-%d"),
        )
