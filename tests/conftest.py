"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from gh_observer.github_client.errors import FetchError
from gh_observer.github_client.models import GitHubComment, GitHubIssue, GitHubUser

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeIssueSource:
    """In-memory issue source; tests edit ``issues`` and ``comments`` freely."""

    def __init__(self) -> None:
        self.issues: dict[str, list[GitHubIssue]] = {}
        self.comments: dict[tuple[str, int], list[GitHubComment]] = {}
        self.failing_repos: set[str] = set()
        self.failing_comments: set[tuple[str, int]] = set()
        self.comment_errors: dict[tuple[str, int], Exception] = {}
        self.issue_calls: list[str] = []
        self.comment_calls: list[tuple[str, int]] = []

    def fetch_issues(self, repo_id: str) -> list[GitHubIssue]:
        self.issue_calls.append(repo_id)
        if repo_id in self.failing_repos:
            raise FetchError(f"cannot reach {repo_id}")
        return list(self.issues.get(repo_id, []))

    def fetch_comments(self, repo_id: str, issue_number: int) -> list[GitHubComment]:
        self.comment_calls.append((repo_id, issue_number))
        if (repo_id, issue_number) in self.comment_errors:
            raise self.comment_errors[(repo_id, issue_number)]
        if (repo_id, issue_number) in self.failing_comments:
            raise FetchError(f"cannot fetch comments for {repo_id}#{issue_number}")
        return list(self.comments.get((repo_id, issue_number), []))


@pytest.fixture
def fake_source() -> FakeIssueSource:
    """Provide an empty fake issue source."""
    return FakeIssueSource()


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Build issues; ``minutes`` shifts updated_at forward from a fixed time."""

    def _make(
        number: int,
        minutes: int = 0,
        title: str | None = None,
        state: str = "open",
        author: str = "issueuser",
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title or f"Issue {number}",
            state=state,
            author=GitHubUser(login=author, id=11111),
            created_at=T0,
            updated_at=T0 + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def make_comment() -> Callable[..., GitHubComment]:
    """Build comments with a given id and author."""

    def _make(comment_id: int | str, author: str = "commenter") -> GitHubComment:
        return GitHubComment(
            id=comment_id,
            author=GitHubUser(login=author, id=22222),
            body=f"Comment {comment_id}",
            created_at=T0,
        )

    return _make


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create temporary config directory."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory
