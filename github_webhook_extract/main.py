import structlog
from fastapi import Depends, FastAPI, Header

from github_webhook_extract.core.config.settings import Config, config
from github_webhook_extract.core.utils.logging import setup_logging
from github_webhook_extract.webhooks.auth import configure_webhook_verifier, github_event
from github_webhook_extract.webhooks.models import GitHubEventModel, WebhookResponse

logger = structlog.get_logger(__name__)


def create_app(app_config: Config = config) -> FastAPI:
    """
    Build the example application: a single webhook endpoint that verifies the
    request and echoes the event action back.

    Raises:
        ConfigurationError: If the configuration is invalid (e.g. no webhook secret).
    """
    app_config.validate()
    setup_logging(app_config.logging)

    app = FastAPI(
        title="github-webhook-extract",
        description="Verified GitHub webhook events for FastAPI.",
        version="0.1.0",
        debug=app_config.debug,
    )
    configure_webhook_verifier(app, app_config.github)

    # --- Root Endpoint ---

    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the service is running."""
        return {"status": "ok", "webhook": "POST /webhooks/github"}

    # --- Webhook Endpoint ---

    @app.post("/webhooks/github", response_model=WebhookResponse, tags=["GitHub Webhooks"])
    async def github_webhook_endpoint(
        event: GitHubEventModel = Depends(github_event(GitHubEventModel)),
        x_github_event: str | None = Header(default=None),
    ) -> WebhookResponse:
        """Echo the action of a verified event."""
        logger.info(
            "webhook_event_received",
            event_type=x_github_event,
            repository=event.repository.full_name,
            action=event.action,
        )
        return WebhookResponse(status="received", detail=event.action, event_type=x_github_event)

    return app
