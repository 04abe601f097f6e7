"""Change events produced by the detection engine."""

from dataclasses import dataclass, field

from ..github_client.models import GitHubComment, GitHubIssue
from .errors import MonitorError


@dataclass(frozen=True)
class NewIssueEvent:
    """An issue number appeared that the previous snapshot did not have."""

    repo: str
    issue: GitHubIssue


@dataclass(frozen=True)
class NewCommentEvent:
    """An updated issue gained a comment whose id was not cached."""

    repo: str
    issue: GitHubIssue
    comment: GitHubComment


@dataclass(frozen=True)
class IssueUpdatedEvent:
    """An issue's updated_at advanced without any new comment."""

    repo: str
    issue: GitHubIssue


ChangeEvent = NewIssueEvent | NewCommentEvent | IssueUpdatedEvent


@dataclass
class PollReport:
    """Everything one poll cycle produced, in processing order."""

    events: list[ChangeEvent] = field(default_factory=list)
    failures: list[MonitorError] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)


def format_event(event: ChangeEvent) -> str:
    """Render an event as the text of its log line."""
    issue = event.issue
    ref = f'{event.repo}#{issue.number} "{issue.title}"'
    if isinstance(event, NewIssueEvent):
        return f"New issue: {ref} (by @{issue.author.login})"
    if isinstance(event, NewCommentEvent):
        return f"New comment: {ref} (by @{event.comment.author.login})"
    if isinstance(event, IssueUpdatedEvent):
        return f"Issue updated: {ref}"
    raise TypeError(f"Unsupported event type: {type(event).__name__}")
