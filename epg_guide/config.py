from pathlib import Path
import logging

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class GuideSettings(BaseSettings):
    """Guide generation settings loaded from environment variables.

    Validates configuration at startup to catch misconfiguration early.
    """

    database_path: str = "./data/channels.db"
    public_path: str = "."
    programs_path: str | None = None
    output_path: str = "./guide.xml"
    log_level: str = "INFO"
    validate_output: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, value: str) -> str:
        """Validate database path is accessible."""
        path = Path(value)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return value
        except (OSError, PermissionError) as exc:
            raise ValueError(f"Cannot access database path '{value}': {exc}") from exc

    @field_validator("output_path")
    @classmethod
    def validate_output_path(cls, value: str) -> str:
        """Validate output path points at a file name."""
        if not value.strip() or value.endswith(("/", "\\")):
            raise ValueError(f"output_path must name a file: '{value}'")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level against stdlib level names."""
        normalized = value.upper()
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    @model_validator(mode="after")
    def resolve_programs_path(self):
        """Default the association file to the conventional output location."""
        if not self.programs_path:
            self.programs_path = str(
                Path(self.public_path) / "scripts" / "output" / "programs.json"
            )
        return self

    def __init__(self, **data):
        """Initialize settings and log configuration."""
        super().__init__(**data)

        logger.info("Configuration loaded:")
        logger.info("  Database: %s", self.database_path)
        logger.info("  Programs File: %s", self.programs_path)
        logger.info("  Output File: %s", self.output_path)
        logger.info("  Log Level: %s", self.log_level)
        logger.info("  Validate Output: %s", self.validate_output)


settings = GuideSettings()


def setup_logging(level: str | None = None) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
