"""Issue source that shells out to the GitHub CLI (``gh``)."""

import json
import logging
import subprocess
from typing import Any

from pydantic import ValidationError

from .errors import FetchError
from .models import GitHubComment, GitHubIssue

logger = logging.getLogger(__name__)

ISSUE_FIELDS = "number,title,state,createdAt,updatedAt,author,url"


class GhCliClient:
    """Issue source backed by ``gh issue list`` and ``gh issue view``.

    Commands are run as argument vectors, never through a shell. Repository
    ids must still be validated by the caller before they get here.
    """

    def __init__(
        self,
        executable: str = "gh",
        limit: int = 100,
        timeout: float | None = 60.0,
    ):
        self.executable = executable
        self.limit = limit
        self.timeout = timeout

    def _run(self, args: list[str]) -> Any:
        """Run a gh command and return its decoded JSON output."""
        command = [self.executable, *args]
        logger.debug("Running: %s", " ".join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FetchError(f"{self.executable} executable not found", cause=e) from e
        except subprocess.TimeoutExpired as e:
            raise FetchError(
                f"{self.executable} timed out after {self.timeout}s", cause=e
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise FetchError(
                f"{self.executable} exited with status {e.returncode}: {stderr}",
                cause=e,
            ) from e

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise FetchError(f"Unparsable output from {self.executable}: {e}", cause=e) from e

    def fetch_issues(self, repo_id: str) -> list[GitHubIssue]:
        """List open issues of a repository."""
        payload = self._run(
            [
                "issue",
                "list",
                "--repo",
                repo_id,
                "--json",
                ISSUE_FIELDS,
                "--limit",
                str(self.limit),
            ]
        )
        if not isinstance(payload, list):
            raise FetchError(
                f"Malformed issue list for {repo_id}: "
                f"expected a list, got {type(payload).__name__}"
            )
        try:
            return [GitHubIssue.model_validate(item) for item in payload]
        except ValidationError as e:
            raise FetchError(f"Malformed issue list for {repo_id}: {e}", cause=e) from e

    def fetch_comments(self, repo_id: str, issue_number: int) -> list[GitHubComment]:
        """List comments of one issue."""
        payload = self._run(
            ["issue", "view", str(issue_number), "--repo", repo_id, "--json", "comments"]
        )
        if not isinstance(payload, dict):
            raise FetchError(
                f"Malformed comment payload for {repo_id}#{issue_number}: "
                f"expected an object, got {type(payload).__name__}"
            )
        comments = payload.get("comments") or []
        if not isinstance(comments, list):
            raise FetchError(
                f"Malformed comments for {repo_id}#{issue_number}: expected a list"
            )
        try:
            return [GitHubComment.model_validate(item) for item in comments]
        except ValidationError as e:
            raise FetchError(
                f"Malformed comments for {repo_id}#{issue_number}: {e}", cause=e
            ) from e
