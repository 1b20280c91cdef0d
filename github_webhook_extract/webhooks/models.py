from typing import Any

from pydantic import BaseModel, Field


class WebhookSender(BaseModel):
    """GitHub webhook sender metadata."""

    login: str = Field(..., description="GitHub username of the event actor")
    id: int = Field(..., description="GitHub user ID")
    type: str = Field(..., description="Actor type: User, Organization, etc.")


class WebhookRepository(BaseModel):
    """GitHub repository metadata from webhook payload."""

    id: int = Field(..., description="GitHub repository ID")
    name: str = Field(..., description="Repository name (without owner)")
    full_name: str = Field(..., description="Owner/repo format")
    private: bool = Field(..., description="Repository visibility")
    html_url: str = Field(..., description="Public-facing URL")
    default_branch: str = Field(default="main", description="Default branch name")


class GitHubEventModel(BaseModel):
    """Standard GitHub webhook event payload structure."""

    action: str | None = Field(None, description="Event action type (e.g., 'opened', 'closed')")
    sender: WebhookSender = Field(..., description="User who triggered the event")
    repository: WebhookRepository = Field(..., description="Target repository")


class PushCommit(BaseModel):
    """A single commit listed in a push event."""

    id: str = Field(..., description="Commit SHA")
    message: str = Field(default="", description="Commit message")
    url: str | None = Field(None, description="Commit URL")


class PushEvent(GitHubEventModel):
    """Payload of the `push` event."""

    ref: str = Field(..., description="Full ref that was pushed, e.g. refs/heads/main")
    before: str | None = Field(None, description="SHA of the ref before the push")
    after: str | None = Field(None, description="SHA of the ref after the push")
    forced: bool = Field(default=False, description="Whether the push was a force push")
    commits: list[PushCommit] = Field(default_factory=list, description="Pushed commits")

    @property
    def branch(self) -> str | None:
        """Branch name for branch pushes, None for tags."""
        prefix = "refs/heads/"
        return self.ref[len(prefix) :] if self.ref.startswith(prefix) else None


class PullRequestEvent(GitHubEventModel):
    """Payload of the `pull_request` event."""

    action: str = Field(..., description="Pull request action, e.g. 'opened'")
    number: int = Field(..., description="Pull request number")
    pull_request: dict[str, Any] = Field(..., description="Pull request object as sent by GitHub")


class WebhookResponse(BaseModel):
    """Standardized response model for webhook handlers."""

    status: str = Field(..., description="Processing status: success, received, error")
    detail: str | None = Field(None, description="Additional context or error message")
    event_type: str | None = Field(None, description="GitHub event type from X-GitHub-Event")
