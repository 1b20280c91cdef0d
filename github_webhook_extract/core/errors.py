"""
Core error classes for github-webhook-extract.
"""

from typing import Any


class WebhookError(Exception):
    """Base class for every error that rejects a single webhook request."""

    status_code: int = 400


class SignatureError(WebhookError):
    """Raised when the request signature cannot be trusted."""

    pass


class MissingSignatureError(SignatureError):
    """Raised when the signature header is absent or empty."""

    def __init__(self, message: str = "signature missing") -> None:
        super().__init__(message)


class MalformedSignatureError(SignatureError):
    """Raised when the signature header is not a well-formed `<algorithm>=<hex>` value."""

    def __init__(self, message: str = "signature malformed") -> None:
        super().__init__(message)


class UnsupportedAlgorithmError(SignatureError):
    """Raised when the signature header names an algorithm other than sha256."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__("signature algorithm unsupported")


class SignatureMismatchError(SignatureError):
    """Raised when the digest in the header does not match the body."""

    def __init__(self, message: str = "signature mismatch") -> None:
        super().__init__(message)


class BodyReadError(WebhookError):
    """Raised when the raw request body could not be read."""

    def __init__(self, message: str = "error reading body") -> None:
        super().__init__(message)


class PayloadDecodeError(WebhookError):
    """Raised when a verified body is not valid JSON or does not match the event type."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class ConfigurationError(ValueError):
    """Raised when the webhook secret or other settings are unusable."""

    pass
