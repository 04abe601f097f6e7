"""Errors reported by the change-detection engine."""

import logging


class MonitorError(Exception):
    """Base class for per-repository monitoring failures."""

    #: Log level the scheduler uses when reporting this failure.
    severity = logging.ERROR

    def __init__(self, repo: str, message: str):
        super().__init__(message)
        self.repo = repo


class InvalidRepositoryIdError(MonitorError):
    """Repository identifier is not a safe ``owner/name`` pair."""

    def __init__(self, repo: str):
        super().__init__(repo, f"Invalid repository identifier: {repo!r}")


class FetchFailedError(MonitorError):
    """Issues or comments could not be fetched; retried on the next cycle."""

    severity = logging.WARNING

    def __init__(
        self,
        repo: str,
        cause: BaseException,
        issue_number: int | None = None,
    ):
        target = repo if issue_number is None else f"{repo}#{issue_number}"
        what = "issues" if issue_number is None else "comments"
        super().__init__(repo, f"Failed to fetch {what} for {target}: {cause}")
        self.cause = cause
        self.issue_number = issue_number


class UnexpectedMonitorError(MonitorError):
    """Anything else that went wrong while processing one repository."""

    def __init__(self, repo: str, cause: BaseException):
        super().__init__(repo, f"Monitoring failed for {repo}: {cause}")
        self.cause = cause
