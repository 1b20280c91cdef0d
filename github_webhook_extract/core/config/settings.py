"""
Main configuration class that composes all configs.
"""

import logging
import os

from dotenv import load_dotenv

from github_webhook_extract.core.config.github_config import SIGNATURE_HEADER, GitHubConfig
from github_webhook_extract.core.config.logging_config import LoggingConfig
from github_webhook_extract.core.errors import ConfigurationError

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            webhook_secret=os.getenv("WEBHOOK_SECRET_GITHUB", ""),
            signature_header=os.getenv("SIGNATURE_HEADER_GITHUB", SIGNATURE_HEADER),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.github.webhook_secret:
            errors.append("WEBHOOK_SECRET_GITHUB is required")

        if not self.github.signature_header.strip():
            errors.append("SIGNATURE_HEADER_GITHUB must not be blank")

        if not isinstance(logging.getLevelName(self.logging.level.upper()), int):
            errors.append(f"LOG_LEVEL '{self.logging.level}' is not a valid logging level")

        if errors:
            raise ConfigurationError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
