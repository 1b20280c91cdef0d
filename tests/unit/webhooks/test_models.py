import pytest
from pydantic import ValidationError

from github_webhook_extract.webhooks.models import (
    GitHubEventModel,
    PullRequestEvent,
    PushEvent,
    WebhookRepository,
    WebhookResponse,
)


@pytest.fixture
def base_payload() -> dict[str, object]:
    """Sender and repository shared by every event."""
    return {
        "sender": {"login": "octocat", "id": 1, "type": "User"},
        "repository": {
            "id": 1296269,
            "name": "Hello-World",
            "full_name": "octocat/Hello-World",
            "private": False,
            "html_url": "https://github.com/octocat/Hello-World",
        },
    }


class TestWebhookRepository:
    def test_default_branch_defaults_to_main(self, base_payload: dict[str, object]) -> None:
        """Test default_branch falls back to 'main' when GitHub omits it."""
        repo = WebhookRepository(**base_payload["repository"])  # type: ignore[arg-type]

        assert repo.default_branch == "main"

    def test_missing_required_fields(self) -> None:
        """Test validation names each missing field."""
        with pytest.raises(ValidationError) as exc_info:
            WebhookRepository(name="Hello-World", full_name="octocat/Hello-World")  # type: ignore[call-arg]

        error_fields = {err["loc"][0] for err in exc_info.value.errors()}
        assert error_fields == {"id", "private", "html_url"}


class TestGitHubEventModel:
    def test_action_optional(self, base_payload: dict[str, object]) -> None:
        """Test events without an action (push, ping) still validate."""
        event = GitHubEventModel(**base_payload)

        assert event.action is None
        assert event.sender.login == "octocat"

    def test_unknown_fields_ignored(self, base_payload: dict[str, object]) -> None:
        """Test extra payload keys do not break validation."""
        event = GitHubEventModel(**base_payload, installation={"id": 99}, action="created")

        assert event.action == "created"
        assert not hasattr(event, "installation")

    def test_missing_sender(self, base_payload: dict[str, object]) -> None:
        base_payload.pop("sender")

        with pytest.raises(ValidationError) as exc_info:
            GitHubEventModel(**base_payload)

        assert exc_info.value.errors()[0]["loc"][0] == "sender"


class TestPushEvent:
    def test_branch_push(self, base_payload: dict[str, object]) -> None:
        event = PushEvent(
            **base_payload,
            ref="refs/heads/feature/login",
            before="0" * 40,
            after="a" * 40,
            commits=[{"id": "a" * 40, "message": "Add login"}],
        )

        assert event.branch == "feature/login"
        assert event.forced is False
        assert event.commits[0].message == "Add login"

    def test_tag_push_has_no_branch(self, base_payload: dict[str, object]) -> None:
        event = PushEvent(**base_payload, ref="refs/tags/v1.0.0")

        assert event.branch is None
        assert event.commits == []

    def test_ref_required(self, base_payload: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            PushEvent(**base_payload)


class TestPullRequestEvent:
    def test_valid(self, valid_event_payload: dict[str, object]) -> None:
        event = PullRequestEvent(**valid_event_payload)

        assert event.action == "opened"
        assert event.number == 42
        assert event.pull_request["title"] == "Test PR"

    def test_action_required(self, valid_event_payload: dict[str, object]) -> None:
        """Test pull_request events must carry an action."""
        valid_event_payload.pop("action")

        with pytest.raises(ValidationError) as exc_info:
            PullRequestEvent(**valid_event_payload)

        assert exc_info.value.errors()[0]["loc"] == ("action",)


class TestWebhookResponse:
    def test_minimal_response(self) -> None:
        response = WebhookResponse(status="received")

        assert response.detail is None
        assert response.event_type is None
