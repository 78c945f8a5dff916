import logging
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration settings for the Code Connect generator service.
    Settings are loaded from environment variables and/or a .env file.
    """

    # --- General Service Settings ---
    SERVICE_NAME: str = Field(default="code_connect", description="Name of the service.")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level for the service."
    )
    API_VERSION: str = Field(default="v1", description="API version prefix for REST endpoints.")

    # --- Generation Settings ---
    OUTPUT_EXTENSION: str = Field(
        default="tsx",
        description="Extension of generated Code Connect files (written as <name>.figma.<ext>)."
    )

    # --- Formatter Settings ---
    FORMATTER: Literal["prettier", "none"] = Field(
        default="prettier",
        description="Formatter applied to generated source. 'none' writes the raw template output."
    )
    PRETTIER_COMMAND: List[str] = Field(
        default=["npx", "--yes", "prettier"],
        description="Command used to invoke Prettier. Source text is passed on stdin."
    )
    FORMATTER_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None,
        description="Optional timeout for the formatter process. Unset means wait indefinitely."
    )

    # --- API Server Settings ---
    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to."
    )
    API_PORT: int = Field(
        default=8004,
        description="Port to bind the API server to."
    )

    model_config = SettingsConfigDict(
        env_file=".env",  # Load .env file if present
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra environment variables
        case_sensitive=False,
    )


# Initialize settings globally for easy access
settings = Settings()

# Configure logging based on settings
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(settings.SERVICE_NAME)

logger.debug(f"Code Connect service settings loaded: {settings.model_dump()}")

if __name__ == "__main__":
    # Print the loaded settings, useful for debugging the configuration setup
    print("Loaded Code Connect Service Settings:")
    for field_name, value in settings.model_dump().items():
        print(f"  {field_name}: {value}")
