"""
Centralized application settings
"""
import json
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "Creator Dashboard API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Seller dashboard statistics: revenue totals and earning history"
    API_DEBUG: bool = False

    # Database
    DATABASE_URL: Optional[str] = None

    # Auth (HS256 bearer tokens)
    AUTH_SECRET: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # Dashboard windows
    DASHBOARD_DAYS: int = 30
    DASHBOARD_MONTHS: int = 12

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
