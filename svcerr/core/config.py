"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_json: Emit JSON log records instead of plain text.
        unanticipated_message: Client message sent for errors that were not
            built by this package.
    """

    model_config = SettingsConfigDict(
        env_prefix="SVCERR_", env_file=".env", env_file_encoding="utf-8"
    )

    project_name: str = "svcerr"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    unanticipated_message: str = "Unexpected error - contact support"


settings = Settings()
