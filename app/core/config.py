"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Content catalog
    content_backend: str = Field(
        default="markdown",
        description="Example repository strategy to use: 'markdown'.",
    )
    content_dir: Path = Field(
        default=Path("./content/examples"),
        description="Directory holding example markdown files with YAML front matter.",
    )
    content_encoding: str = Field(
        default="utf-8",
        description="Character encoding used when reading content files.",
    )

    # Prompt scoring
    score_base: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Starting score before any heuristic check is applied.",
    )
    detail_length_threshold: int = Field(
        default=100,
        ge=0,
        description="Prompts longer than this earn the 'Detailed instructions' bonus.",
    )
    brief_length_threshold: int = Field(
        default=30,
        ge=0,
        description="Prompts shorter than this get the 'too brief' suggestion.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )

    @field_validator("content_dir")
    @classmethod
    def resolve_content_dir(cls, v: Path) -> Path:
        """Resolve the content directory to an absolute path."""
        return v.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
