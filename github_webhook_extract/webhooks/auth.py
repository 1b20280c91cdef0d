from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.requests import ClientDisconnect

from github_webhook_extract.core.config.github_config import SIGNATURE_HEADER, GitHubConfig
from github_webhook_extract.core.errors import BodyReadError, PayloadDecodeError, WebhookError
from github_webhook_extract.webhooks.extractor import PayloadExtractor
from github_webhook_extract.webhooks.signature import SignatureVerifier, VerifiedPayload, parse_signature_header

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def configure_webhook_verifier(app: FastAPI, github_config: GitHubConfig) -> SignatureVerifier:
    """
    Attach a SignatureVerifier built from `github_config` to the application state.

    Raises:
        ConfigurationError: If the configured webhook secret is empty.
    """
    verifier = SignatureVerifier.from_config(github_config)
    app.state.signature_verifier = verifier
    app.state.signature_header = github_config.signature_header
    return verifier


def get_signature_verifier(request: Request) -> SignatureVerifier:
    """Returns the verifier stored on the application state."""
    verifier = getattr(request.app.state, "signature_verifier", None)
    if verifier is None:
        logger.error("webhook_verifier_not_configured", path=request.url.path)
        raise HTTPException(status_code=500, detail="server misconfiguration")
    return verifier


def _reject(error: WebhookError, **context: object) -> HTTPException:
    logger.error("webhook_rejected", reason=str(error), error_type=type(error).__name__, **context)
    return HTTPException(status_code=error.status_code, detail=str(error))


async def verify_github_signature(
    request: Request,
    verifier: SignatureVerifier = Depends(get_signature_verifier),
) -> VerifiedPayload:
    """
    FastAPI dependency that verifies the GitHub webhook signature.

    Reads the signature header and compares it with an HMAC of the raw
    request body, using the verifier configured on the application.

    Raises:
        HTTPException: 400 if the signature is missing, malformed, uses an
            unsupported algorithm or does not match the body.

    Returns:
        The verified raw body.
    """
    header_name = getattr(request.app.state, "signature_header", SIGNATURE_HEADER)
    # Starlette returns the first occurrence when a header is repeated.
    signature = request.headers.get(header_name)

    try:
        # Reject unsigned or garbled requests before reading the body.
        algorithm, digest = parse_signature_header(signature)

        try:
            body = await request.body()
        except ClientDisconnect as e:
            raise BodyReadError() from e

        return verifier.verify_parsed(body, algorithm, digest)
    except WebhookError as e:
        raise _reject(e, header=header_name, path=request.url.path) from e


def github_event(target: type[T]) -> Callable[..., Awaitable[T]]:
    """
    Build a FastAPI dependency that verifies the request and decodes it into `target`.

    Example:
        @app.post("/webhooks/github")
        async def on_push(event: PushEvent = Depends(github_event(PushEvent))):
            ...
    """
    extractor = PayloadExtractor(target)

    async def dependency(payload: VerifiedPayload = Depends(verify_github_signature)) -> T:
        try:
            return extractor(payload)
        except PayloadDecodeError as e:
            raise _reject(e) from e

    return dependency
