import logging
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from creational.core.patterns.singleton import Singleton


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Catalog settings using Pydantic BaseSettings."""

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Development Settings
    debug: bool = False

    # Singleton demonstration
    demo_workers: int = Field(default=50, ge=1)
    construction_delay: float = Field(default=0.05, ge=0)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    class Config:
        env_prefix = "CREATIONAL_"
        env_file = ".env"
        extra = "ignore"


class ConfigManager(Singleton):
    """
    Singleton Configuration Manager.

    Loads the catalog settings from the environment on first access and
    shares them with every example. Invalid values surface as a
    ``ConstructionFailure`` from ``ConfigManager.get_instance()``.
    """

    def _setup(self):
        """Initialize the configuration manager."""
        self._logger = logging.getLogger(__name__)
        self._settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load settings from environment variables and .env file."""
        try:
            settings = Settings()
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise
        self._logger.info(f"Configuration loaded successfully. Debug mode: {settings.debug}")
        return settings

    @property
    def settings(self) -> Settings:
        """Get the catalog settings."""
        return self._settings

    def reload_settings(self):
        """
        Reload settings from environment variables and .env file.

        The current settings are kept if the new values do not validate.
        """
        self._logger.info("Reloading configuration settings...")
        self._settings = self._load_settings()

    def is_debug_mode(self) -> bool:
        """Check if the catalog runs in debug mode."""
        return self.settings.debug

    def get_logging_settings(self) -> dict:
        """Get logging configuration settings."""
        level = "DEBUG" if self.settings.debug else self.settings.log_level
        return {
            "level": level,
            "format": self.settings.log_format,
        }

    def get_demo_settings(self) -> dict:
        """Get the Singleton demonstration settings."""
        return {
            "workers": self.settings.demo_workers,
            "construction_delay": self.settings.construction_delay,
        }
