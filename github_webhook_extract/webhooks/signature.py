import hashlib
import hmac
import re
from dataclasses import dataclass

import structlog

from github_webhook_extract.core.config.github_config import GitHubConfig
from github_webhook_extract.core.errors import (
    ConfigurationError,
    MalformedSignatureError,
    MissingSignatureError,
    SignatureMismatchError,
    UnsupportedAlgorithmError,
)

logger = structlog.get_logger(__name__)

SUPPORTED_ALGORITHM = "sha256"
DIGEST_SIZE = hashlib.sha256().digest_size

# <algorithm>=<hex>, where the hex digest is whole bytes with no whitespace.
_HEADER_PATTERN = re.compile(r"(?P<algorithm>[A-Za-z0-9]+)=(?P<digest>(?:[0-9A-Fa-f]{2})+)")


@dataclass(frozen=True)
class VerifiedPayload:
    """
    Raw request body whose signature has been checked.

    SignatureVerifier is the only producer inside this package. Building one
    directly skips verification; that is meant for tests and for bodies
    verified by other means.
    """

    body: bytes
    algorithm: str = SUPPORTED_ALGORITHM


def _to_key(secret: str | bytes) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def compute_signature(secret: str | bytes, body: bytes) -> str:
    """Compute the ``sha256=<hexdigest>`` header value for a raw request body."""
    mac = hmac.new(_to_key(secret), msg=body, digestmod=hashlib.sha256)
    return f"{SUPPORTED_ALGORITHM}={mac.hexdigest()}"


def parse_signature_header(header_value: str | None) -> tuple[str, bytes]:
    """
    Split a signature header into its algorithm tag and decoded digest.

    Raises:
        MissingSignatureError: If the header value is absent or empty.
        MalformedSignatureError: If the value is not ``<algorithm>=<hex>`` or the
            digest has the wrong length for sha256.
        UnsupportedAlgorithmError: If the algorithm tag is not ``sha256``.
    """
    if not header_value:
        raise MissingSignatureError()

    match = _HEADER_PATTERN.fullmatch(header_value)
    if match is None:
        raise MalformedSignatureError()

    algorithm = match.group("algorithm")
    if algorithm != SUPPORTED_ALGORITHM:
        raise UnsupportedAlgorithmError(algorithm)

    digest = bytes.fromhex(match.group("digest"))
    if len(digest) != DIGEST_SIZE:
        raise MalformedSignatureError()

    return algorithm, digest


class SignatureVerifier:
    """
    Verifies GitHub webhook signatures.

    The verifier holds the shared secret and nothing else, so one instance can
    be shared by every concurrent request.

    Example:
        verifier = SignatureVerifier("mysecret")
        payload = verifier.verify(body, request.headers.get("X-Hub-Signature-256"))
    """

    def __init__(self, secret: str | bytes):
        key = _to_key(secret)
        if not key:
            raise ConfigurationError("webhook secret must not be empty")
        self._key = key

    @classmethod
    def from_config(cls, github_config: GitHubConfig) -> "SignatureVerifier":
        """Build a verifier from the configured webhook secret."""
        return cls(github_config.webhook_secret)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=<redacted>)"

    def sign(self, body: bytes) -> str:
        """Return the signature header value GitHub would send for ``body``."""
        return compute_signature(self._key, body)

    def verify(self, body: bytes, header_value: str | None) -> VerifiedPayload:
        """
        Check that ``header_value`` is a valid HMAC-SHA256 of ``body``.

        Args:
            body: The exact raw request body, before any parsing
            header_value: The signature header value, or None if absent

        Returns:
            The verified payload wrapping ``body``.

        Raises:
            SignatureError: One of its subclasses, if the request is not authentic.
        """
        algorithm, provided = parse_signature_header(header_value)
        return self.verify_parsed(body, algorithm, provided)

    def verify_parsed(self, body: bytes, algorithm: str, provided: bytes) -> VerifiedPayload:
        """
        Check a digest already split out by `parse_signature_header`.

        Raises:
            UnsupportedAlgorithmError: If `algorithm` is not sha256.
            SignatureMismatchError: If `provided` is not the HMAC-SHA256 of `body`.
        """
        if algorithm != SUPPORTED_ALGORITHM:
            raise UnsupportedAlgorithmError(algorithm)

        expected = hmac.new(self._key, msg=body, digestmod=hashlib.sha256).digest()

        # Securely compare the digests
        if not hmac.compare_digest(expected, provided):
            raise SignatureMismatchError()

        logger.debug("webhook_signature_verified", body_bytes=len(body))
        return VerifiedPayload(body=body, algorithm=algorithm)
