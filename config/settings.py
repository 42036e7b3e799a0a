"""
Configuration for the Sample Schema API and the keyword relay
"""
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings:
    def __init__(self, **overrides):
        # Database
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "mysql+pymysql://root@localhost:3306/sample")
        self.DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
        self.DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "0"))
        self.DB_POOL_TIMEOUT: float = float(os.getenv("DB_POOL_TIMEOUT", "30"))
        self.DB_ECHO: bool = _env_bool("DB_ECHO")
        self.SEED_SAMPLE_DATA: bool = _env_bool("SEED_SAMPLE_DATA")

        # API Configuration
        self.API_TITLE: str = os.getenv("API_TITLE", "Sample Schema API")
        self.API_VERSION: str = os.getenv("API_VERSION", "1.0.0")
        self.API_DESCRIPTION: str = """
    REST API over the "sample" schema: agents, customers, companies and orders.

    - **Agents**: list, create, update commission, replace, delete
    - **Customers**: lookup by code
    - **Companies**: list
    - **Orders**: list, optionally filtered by minimum amount
    """
        self.DOCS_URL: str = os.getenv("DOCS_URL", "/docs")
        self.PORT: int = int(os.getenv("PORT", "3000"))

        # CORS
        self.CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", "*")

        # Update/replace on a missing AGENT_CODE reports 200 unless this is on
        self.REPORT_MISSING_ON_UPDATE: bool = _env_bool("REPORT_MISSING_ON_UPDATE")

        # Relay
        self.RELAY_EDGE_URL: str = os.getenv("RELAY_EDGE_URL", "http://localhost:3001/say")
        self.RELAY_TIMEOUT: float = float(os.getenv("RELAY_TIMEOUT", "10"))
        self.RELAY_SPEAKER: str = os.getenv("RELAY_SPEAKER", "Guna Pranith")
        self.RELAY_PORT: int = int(os.getenv("RELAY_PORT", "3000"))
        self.EDGE_PORT: int = int(os.getenv("EDGE_PORT", "3001"))

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Global settings instance
settings = Settings()
