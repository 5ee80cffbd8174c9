from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# The documented codebase lives next to the backend checkout: <workspace>/docs/codebase
DEFAULT_CODEBASE_PATH = Path(__file__).resolve().parents[3] / "docs" / "codebase"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origin: str = "http://localhost:3000"

    # "development" echoes internal error details back to callers
    environment: str = "production"

    # AI / Anthropic
    anthropic_api_key: str = ""
    assistant_model: str = "claude-sonnet-4-20250514"
    assistant_max_tokens: int = 8192
    # Seconds before a model call is abandoned
    assistant_timeout: float = 120.0

    # Local folder scanned for analyze_codebase / process_with_files
    codebase_path: Path = DEFAULT_CODEBASE_PATH

    @property
    def expose_error_details(self) -> bool:
        """Check if internal error messages may be returned to the caller."""
        return self.environment.lower() == "development"

    @property
    def assistant_enabled(self) -> bool:
        """Check if the model service is configured (has API key)."""
        return bool(self.anthropic_api_key)


settings = Settings()
