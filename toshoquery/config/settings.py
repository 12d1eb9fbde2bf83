from typing import Optional, List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    # ===========================
    # Application Customization
    # ===========================
    APP_NAME: str = "ToshoQuery"
    VERSION: str = "1.0.0"

    # ===========================
    # Server Configuration
    # ===========================
    PORT: int = 3001

    # ===========================
    # Upstream Configuration
    # ===========================
    SEARCH_BASE_URL: str = "https://animetosho.org"
    USER_AGENT: str = "animeo-scraper/1.0"

    # ===========================
    # HTTP Timeout Configuration
    # ===========================
    HTTP_TIMEOUT: Optional[int] = 15
    HEALTH_CHECK_TIMEOUT: Optional[int] = 5

    # ===========================
    # Proxy Configuration
    # ===========================
    PROXY_URL: Optional[str] = None

    # ===========================
    # Query Defaults
    # ===========================
    DEFAULT_SCOPE_FIELD: str = "name"
    DEFAULT_EXCLUDE_TERMS: List[str] = ["batch", "complete", "compilation", "pack", "discussion", "preview"]

    # ===========================
    # Error Reporting
    # ===========================
    DISTINCT_ERROR_STATUS: bool = False

    # ===========================
    # Logging Configuration
    # ===========================
    LOG_LEVEL: str = "DEBUG"

    # ===========================
    # Field Validators
    # ===========================
    @field_validator("SEARCH_BASE_URL", "PROXY_URL")
    @classmethod
    def normalize_urls(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    def get_search_url(self, encoded_query: str) -> str:
        return f"{self.SEARCH_BASE_URL}/search?q={encoded_query}&qx=1"


# ===========================
# Settings Instance
# ===========================
settings = Settings()
