"""
Configuration package.

The dataclass sections are importable without side effects; the environment
backed `Config` and its global instance live in `settings`, which loads `.env`
when first imported.
"""

from github_webhook_extract.core.config.github_config import SIGNATURE_HEADER, GitHubConfig
from github_webhook_extract.core.config.logging_config import LoggingConfig

__all__ = [
    "SIGNATURE_HEADER",
    "GitHubConfig",
    "LoggingConfig",
]
