"""Tests for GitHub client models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from gh_observer.github_client.models import (
    GitHubComment,
    GitHubIssue,
    GitHubRepository,
    GitHubUser,
)


class TestGitHubUser:
    """Test GitHubUser model."""

    def test_valid_user(self) -> None:
        """Test creating a valid user."""
        user = GitHubUser(login="testuser", id=12345)
        assert user.login == "testuser"
        assert user.id == 12345

    def test_node_id_and_missing_id(self) -> None:
        """Test that GraphQL node ids and missing ids are accepted."""
        assert GitHubUser(login="testuser", id="MDQ6VXNlcjE=").id == "MDQ6VXNlcjE="
        assert GitHubUser(login="testuser").id is None

    def test_missing_login(self) -> None:
        """Test validation with missing login."""
        with pytest.raises(ValidationError):
            GitHubUser(id=12345)  # type: ignore[call-arg]


class TestGitHubComment:
    """Test GitHubComment model."""

    def test_from_gh_cli_payload(self) -> None:
        """Test parsing the camelCase payload printed by gh."""
        comment = GitHubComment.model_validate(
            {
                "id": "IC_kwDOAbc123",
                "author": {"login": "commenter"},
                "authorAssociation": "MEMBER",
                "body": "Thanks!",
                "createdAt": "2024-01-01T10:00:00Z",
                "url": "https://github.com/o/r/issues/1#issuecomment-1",
            }
        )

        assert comment.id == "IC_kwDOAbc123"
        assert comment.author.login == "commenter"
        assert comment.created_at == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)

    def test_integer_id(self) -> None:
        """Test that REST integer ids stay integers."""
        comment = GitHubComment(id=98765, author=GitHubUser(login="commenter"))
        assert comment.id == 98765

    def test_missing_author(self) -> None:
        """Test validation with missing author."""
        with pytest.raises(ValidationError):
            GitHubComment.model_validate({"id": 1, "body": "orphan"})


class TestGitHubIssue:
    """Test GitHubIssue model."""

    def test_from_gh_cli_payload(self) -> None:
        """Test parsing the camelCase payload printed by gh."""
        issue = GitHubIssue.model_validate(
            {
                "number": 42,
                "title": "Test Issue",
                "state": "OPEN",
                "author": {"login": "issueuser", "is_bot": False},
                "createdAt": "2024-01-01T12:00:00Z",
                "updatedAt": "2024-01-02T12:00:00Z",
                "url": "https://github.com/o/r/issues/42",
            }
        )

        assert issue.number == 42
        assert issue.state == "OPEN"
        assert issue.updated_at > issue.created_at

    def test_field_names_accepted(self) -> None:
        """Test construction with snake_case field names."""
        created = datetime(2024, 1, 1)
        issue = GitHubIssue(
            number=1,
            title="t",
            state="open",
            author=GitHubUser(login="u"),
            created_at=created,
            updated_at=created,
        )
        assert issue.created_at == created
        assert issue.url is None

    def test_missing_updated_at(self) -> None:
        """Test fail-fast parsing when a required field is absent."""
        with pytest.raises(ValidationError):
            GitHubIssue.model_validate(
                {
                    "number": 1,
                    "title": "t",
                    "state": "open",
                    "author": {"login": "u"},
                    "createdAt": "2024-01-01T12:00:00Z",
                }
            )

    def test_issue_is_immutable(self) -> None:
        """Test that fetched issues cannot be modified."""
        issue = GitHubIssue(
            number=1,
            title="t",
            state="open",
            author=GitHubUser(login="u"),
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
        )
        with pytest.raises(ValidationError):
            issue.title = "changed"  # type: ignore[misc]


class TestGitHubRepository:
    """Test GitHubRepository model."""

    def test_defaults(self) -> None:
        """Test optional fields default to None."""
        repo = GitHubRepository(full_name="octo/app")
        assert repo.url is None
        assert repo.description is None
        assert repo.organization is None
