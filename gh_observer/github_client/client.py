"""GitHub API issue source using PyGitHub."""

import logging
import os
import time

from github import Github
from github.GithubException import GithubException, UnknownObjectException
from github.Issue import Issue
from github.IssueComment import IssueComment
from github.NamedUser import NamedUser
from github.Repository import Repository
from requests.exceptions import RequestException

from .errors import FetchError
from .models import GitHubComment, GitHubIssue, GitHubRepository, GitHubUser

logger = logging.getLogger(__name__)

DEFAULT_ISSUE_LIMIT = 100


class GitHubClient:
    """Issue source backed by the GitHub REST API."""

    def __init__(self, token: str | None = None, limit: int = DEFAULT_ISSUE_LIMIT):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            limit: Maximum number of issues returned per repository fetch
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.limit = limit
        self.github = Github(self.token)
        self._check_rate_limit()

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.core.remaining

            logger.debug("GitHub API rate limit: %s requests remaining", remaining)

            if remaining < 10:
                reset_time = rate_limit.core.reset.timestamp()
                sleep_time = reset_time - time.time() + 1
                logger.warning(
                    "Rate limit low, sleeping for %.1f seconds...", sleep_time
                )
                time.sleep(sleep_time)

        except Exception as e:
            logger.warning("Could not check rate limit: %s", e)

    def _convert_user(self, github_user: NamedUser | None) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        if github_user is None:
            # Deleted accounts come back without a user object
            return GitHubUser(login="ghost")
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_comment(self, github_comment: IssueComment) -> GitHubComment:
        """Convert PyGitHub comment to our model."""
        return GitHubComment(
            id=github_comment.id,
            author=self._convert_user(github_comment.user),
            body=github_comment.body,
            created_at=github_comment.created_at,
            url=github_comment.html_url,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            state=github_issue.state,
            author=self._convert_user(github_issue.user),
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
            url=github_issue.html_url,
        )

    def get_repository(self, repo_id: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(repo_id)
        except UnknownObjectException as e:
            raise FetchError(f"Repository {repo_id} not found", cause=e) from e
        except GithubException as e:
            raise FetchError(f"Could not open repository {repo_id}: {e}", cause=e) from e
        except RequestException as e:
            raise FetchError(f"Could not reach GitHub for {repo_id}: {e}", cause=e) from e

    def fetch_issues(self, repo_id: str) -> list[GitHubIssue]:
        """Fetch open issues of a repository, newest first.

        Pull requests share the issues endpoint and are skipped.

        Raises:
            FetchError: If the API call fails or returns unexpected data
        """
        self._check_rate_limit()
        repository = self.get_repository(repo_id)

        try:
            issues: list[GitHubIssue] = []
            for github_issue in repository.get_issues(state="open"):
                if len(issues) >= self.limit:
                    break
                if github_issue.pull_request is not None:
                    continue
                issues.append(self._convert_issue(github_issue))
            return issues
        except (GithubException, RequestException) as e:
            raise FetchError(f"Could not list issues for {repo_id}: {e}", cause=e) from e
        except ValueError as e:
            raise FetchError(f"Malformed issue data for {repo_id}: {e}", cause=e) from e

    def fetch_comments(self, repo_id: str, issue_number: int) -> list[GitHubComment]:
        """Fetch all comments of one issue in posting order.

        Raises:
            FetchError: If the API call fails or returns unexpected data
        """
        repository = self.get_repository(repo_id)

        try:
            github_issue = repository.get_issue(issue_number)
            return [
                self._convert_comment(comment) for comment in github_issue.get_comments()
            ]
        except (GithubException, RequestException) as e:
            raise FetchError(
                f"Could not fetch comments for {repo_id}#{issue_number}: {e}", cause=e
            ) from e
        except ValueError as e:
            raise FetchError(
                f"Malformed comment data for {repo_id}#{issue_number}: {e}", cause=e
            ) from e

    def list_repositories(self) -> list[GitHubRepository]:
        """List repositories owned by the user and by each of their organizations.

        Failures for a single organization are logged and skipped.
        """
        self._check_rate_limit()
        user = self.github.get_user()

        repositories = [
            self._convert_repository(repo)
            for repo in user.get_repos(affiliation="owner")
        ]

        for org in user.get_orgs():
            try:
                repositories.extend(
                    self._convert_repository(repo, organization=org.login)
                    for repo in org.get_repos()
                )
            except GithubException as e:
                logger.warning("Could not list repositories for %s: %s", org.login, e)

        return repositories

    def _convert_repository(
        self, repository: Repository, organization: str | None = None
    ) -> GitHubRepository:
        """Convert PyGitHub repository to our model."""
        return GitHubRepository(
            full_name=repository.full_name,
            url=repository.html_url,
            description=repository.description,
            organization=organization,
        )
