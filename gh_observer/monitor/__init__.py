"""Change detection for watched repositories."""

from .engine import ChangeDetectionEngine
from .errors import (
    FetchFailedError,
    InvalidRepositoryIdError,
    MonitorError,
    UnexpectedMonitorError,
)
from .events import (
    ChangeEvent,
    IssueUpdatedEvent,
    NewCommentEvent,
    NewIssueEvent,
    PollReport,
    format_event,
)
from .scheduler import MonitorScheduler
from .source import IssueSource
from .store import RepositorySnapshot, SnapshotStore
from .validator import ensure_valid_repository, is_valid_repository

__all__ = [
    "ChangeDetectionEngine",
    "ChangeEvent",
    "FetchFailedError",
    "InvalidRepositoryIdError",
    "IssueSource",
    "IssueUpdatedEvent",
    "MonitorError",
    "MonitorScheduler",
    "NewCommentEvent",
    "NewIssueEvent",
    "PollReport",
    "RepositorySnapshot",
    "SnapshotStore",
    "UnexpectedMonitorError",
    "ensure_valid_repository",
    "format_event",
    "is_valid_repository",
]
