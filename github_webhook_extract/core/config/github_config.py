"""
GitHub webhook configuration.
"""

from dataclasses import dataclass

SIGNATURE_HEADER = "X-Hub-Signature-256"


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub webhook configuration."""

    webhook_secret: str
    signature_header: str = SIGNATURE_HEADER
