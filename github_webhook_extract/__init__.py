"""
Verify GitHub webhook signatures and extract typed JSON event payloads in FastAPI.

Usage looks like:

    from fastapi import Depends, FastAPI
    from pydantic import BaseModel

    from github_webhook_extract import GitHubConfig, configure_webhook_verifier, github_event

    class Event(BaseModel):
        action: str

    app = FastAPI()
    configure_webhook_verifier(app, GitHubConfig(webhook_secret="d4705034dd0777ee9e1e3078a12a06985151b76f"))

    @app.post("/")
    async def echo(event: Event = Depends(github_event(Event))) -> str:
        return event.action

You will usually get the secret from your environment or configuration.
Configure the GitHub webhook to deliver JSON (content type application/json).
"""

from github_webhook_extract.core.config.github_config import SIGNATURE_HEADER, GitHubConfig
from github_webhook_extract.core.errors import (
    BodyReadError,
    ConfigurationError,
    MalformedSignatureError,
    MissingSignatureError,
    PayloadDecodeError,
    SignatureError,
    SignatureMismatchError,
    UnsupportedAlgorithmError,
    WebhookError,
)
from github_webhook_extract.webhooks.auth import (
    configure_webhook_verifier,
    get_signature_verifier,
    github_event,
    verify_github_signature,
)
from github_webhook_extract.webhooks.extractor import PayloadExtractor, extract_payload
from github_webhook_extract.webhooks.signature import SignatureVerifier, VerifiedPayload, compute_signature

__version__ = "0.1.0"

__all__ = [
    "SIGNATURE_HEADER",
    "BodyReadError",
    "ConfigurationError",
    "GitHubConfig",
    "MalformedSignatureError",
    "MissingSignatureError",
    "PayloadDecodeError",
    "PayloadExtractor",
    "SignatureError",
    "SignatureMismatchError",
    "SignatureVerifier",
    "UnsupportedAlgorithmError",
    "VerifiedPayload",
    "WebhookError",
    "compute_signature",
    "configure_webhook_verifier",
    "extract_payload",
    "get_signature_verifier",
    "github_event",
    "verify_github_signature",
]
