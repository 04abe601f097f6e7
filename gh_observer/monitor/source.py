"""Interface the engine expects from an issue source."""

from typing import Protocol

from ..github_client.models import GitHubComment, GitHubIssue


class IssueSource(Protocol):
    """Fetches current issues and comments for a repository.

    Implementations raise ``FetchError`` when data cannot be delivered,
    including when a payload does not parse.
    """

    def fetch_issues(self, repo_id: str) -> list[GitHubIssue]: ...

    def fetch_comments(
        self, repo_id: str, issue_number: int
    ) -> list[GitHubComment]: ...
