"""Change detection over successive issue snapshots.

The engine keeps one snapshot per repository. The first pass for a
repository only records a baseline; every later pass compares the fresh
issue list against it:

- an issue number not seen before is a new issue; its comments become the
  baseline for later comment detection
- an issue whose ``updated_at`` moved forward is refetched for comments;
  comment ids not in the cache are new comments, otherwise the update is
  reported on its own
- issues that disappeared are dropped silently

Issue lists are replaced wholesale at the end of each pass. Comment lists
are replaced per issue, and only when new comments were found.
"""

import logging
from collections.abc import Iterable, Iterator

from ..github_client.models import GitHubComment, GitHubIssue
from .errors import FetchFailedError, MonitorError, UnexpectedMonitorError
from .events import (
    ChangeEvent,
    IssueUpdatedEvent,
    NewCommentEvent,
    NewIssueEvent,
    PollReport,
)
from .source import IssueSource
from .store import RepositorySnapshot, SnapshotStore
from .validator import ensure_valid_repository

logger = logging.getLogger(__name__)


class ChangeDetectionEngine:
    """Detects new issues, new comments and issue updates per repository."""

    def __init__(self, source: IssueSource, store: SnapshotStore | None = None):
        """Initialize the engine.

        Args:
            source: Collaborator that fetches issues and comments
            store: Snapshot store to own; a fresh empty one if None
        """
        self.source = source
        self._store = store if store is not None else SnapshotStore()

    def process_all_repositories(self, repo_ids: Iterable[str] | None) -> PollReport:
        """Run one poll cycle over ``repo_ids`` in the given order.

        A failing repository is recorded in the report and never stops the
        ones after it.
        """
        report = PollReport()
        for repo_id in repo_ids or []:
            try:
                for event in self.process_repository(repo_id, report.failures):
                    report.events.append(event)
            except MonitorError as e:
                report.failures.append(e)
            except Exception as e:
                logger.debug("Unexpected error for %s", repo_id, exc_info=True)
                report.failures.append(UnexpectedMonitorError(repo_id, e))
        return report

    def process_repository(
        self,
        repo_id: str,
        failures: list[MonitorError] | None = None,
    ) -> Iterator[ChangeEvent]:
        """Yield the changes of one repository since its last pass.

        Comment fetch failures do not interrupt the pass. They are appended
        to ``failures`` when given and logged as warnings otherwise.

        Raises:
            InvalidRepositoryIdError: ``repo_id`` is not a safe owner/name pair
            FetchFailedError: the issue list could not be fetched
        """
        ensure_valid_repository(repo_id)
        current = self._fetch_issues(repo_id)

        snapshot = self._store.get(repo_id)
        if snapshot is None:
            self._cold_start(repo_id, current, failures)
            return

        yield from self._diff(repo_id, snapshot, current, failures)

    def reset_cache(self) -> None:
        """Forget all snapshots; every repository starts cold again."""
        self._store.clear()

    def snapshot(self, repo_id: str) -> RepositorySnapshot | None:
        """Return a copy of the cached snapshot for ``repo_id``."""
        return self._store.copy_of(repo_id)

    def _fetch_issues(self, repo_id: str) -> list[GitHubIssue]:
        # Anything the source raises counts as a fetch failure
        try:
            return list(self.source.fetch_issues(repo_id))
        except Exception as e:
            raise FetchFailedError(repo_id, e) from e

    def _fetch_comments(
        self,
        repo_id: str,
        issue_number: int,
        failures: list[MonitorError] | None,
    ) -> list[GitHubComment] | None:
        """Fetch comments of one issue, or None if the fetch failed."""
        try:
            return list(self.source.fetch_comments(repo_id, issue_number))
        except Exception as e:
            error = FetchFailedError(repo_id, e, issue_number=issue_number)
            if failures is None:
                logger.warning("%s", error)
            else:
                failures.append(error)
            return None

    def _cold_start(
        self,
        repo_id: str,
        current: list[GitHubIssue],
        failures: list[MonitorError] | None,
    ) -> None:
        snapshot = RepositorySnapshot(issues=current)
        for issue in current:
            comments = self._fetch_comments(repo_id, issue.number, failures)
            snapshot.comments[issue.number] = comments or []

        self._store.put(repo_id, snapshot)
        logger.info("Monitoring started: %s (%d issues)", repo_id, len(current))

    def _diff(
        self,
        repo_id: str,
        snapshot: RepositorySnapshot,
        current: list[GitHubIssue],
        failures: list[MonitorError] | None,
    ) -> Iterator[ChangeEvent]:
        previous = {issue.number: issue for issue in snapshot.issues}

        new_issues = [issue for issue in current if issue.number not in previous]
        updated_issues = [
            issue
            for issue in current
            if issue.number in previous
            and issue.updated_at > previous[issue.number].updated_at
        ]

        for issue in new_issues:
            comments = self._fetch_comments(repo_id, issue.number, failures)
            if comments is not None:
                snapshot.comments[issue.number] = comments
            yield NewIssueEvent(repo=repo_id, issue=issue)

        for issue in updated_issues:
            fresh = self._fetch_comments(repo_id, issue.number, failures)
            if fresh is None:
                continue

            cached_ids = {comment.id for comment in snapshot.comments.get(issue.number, [])}
            new_comments = [comment for comment in fresh if comment.id not in cached_ids]

            if not new_comments:
                # Title, state or label edits; the comment baseline stays
                yield IssueUpdatedEvent(repo=repo_id, issue=issue)
                continue

            snapshot.comments[issue.number] = fresh
            for comment in new_comments:
                yield NewCommentEvent(repo=repo_id, issue=issue, comment=comment)

        snapshot.issues = list(current)
