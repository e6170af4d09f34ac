from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student Records API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = ""

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # =============================================================================
    # STATIC FILES
    # =============================================================================
    STATIC_DIR: str = str(PROJECT_ROOT / "web")
    INDEX_FILE: str = "index.html"

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("API_PREFIX", mode="before")
    @classmethod
    def normalize_api_prefix(cls, v):
        """Strip trailing slashes so "/api/" and "/api" mount the same routes."""
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            if v and not v.startswith("/"):
                v = "/" + v
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()


# Helper function to display current config (for debugging)
def print_config():
    """Print current configuration."""
    print("=" * 80)
    print("📋 CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {settings.PROJECT_NAME}")
    print(f"Version: {settings.APP_VERSION}")
    print(f"Debug Mode: {settings.DEBUG}")
    print(f"API Prefix: {settings.API_PREFIX or '/'}")
    print("-" * 80)
    print(f"Listening on: {settings.HOST}:{settings.PORT}")
    print(f"Static Root: {settings.STATIC_DIR}")
    print(f"Index File: {settings.INDEX_FILE}")
    print(f"Log Level: {settings.LOG_LEVEL}")
    print("=" * 80)


if __name__ == "__main__":
    # Test config loading
    print_config()
