"""GitHub client package for API and CLI interaction."""

from .client import GitHubClient
from .errors import FetchError
from .gh_cli import GhCliClient
from .models import GitHubComment, GitHubIssue, GitHubRepository, GitHubUser

__all__ = [
    "FetchError",
    "GhCliClient",
    "GitHubClient",
    "GitHubComment",
    "GitHubIssue",
    "GitHubRepository",
    "GitHubUser",
]
