"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Lead storage
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    leads_db_name: str = "leads.db"  # empty disables storage; leads are only logged

    @property
    def leads_db_path(self) -> Optional[str]:
        if not self.leads_db_name:
            return None
        return os.path.join(self.data_path, self.leads_db_name)

    # Lead attribution
    default_lead_source: str = "bioage"
    calculator_lead_source: str = "bioage-calculator"

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    class Config:
        env_prefix = "BIOAGE_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
