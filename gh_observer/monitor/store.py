"""In-memory snapshot store used by the detection engine."""

import copy
from dataclasses import dataclass, field

from ..github_client.models import GitHubComment, GitHubIssue


@dataclass
class RepositorySnapshot:
    """Last known issues of a repository and the comments cached per issue."""

    issues: list[GitHubIssue] = field(default_factory=list)
    comments: dict[int, list[GitHubComment]] = field(default_factory=dict)


class SnapshotStore:
    """Maps repository ids to their snapshots for one engine instance.

    Nothing is written to disk; a new store starts cold.
    """

    def __init__(self) -> None:
        self._snapshots: dict[str, RepositorySnapshot] = {}

    def __contains__(self, repo_id: object) -> bool:
        return repo_id in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)

    def get(self, repo_id: str) -> RepositorySnapshot | None:
        """Return the live snapshot for ``repo_id``, if any."""
        return self._snapshots.get(repo_id)

    def put(self, repo_id: str, snapshot: RepositorySnapshot) -> None:
        """Store ``snapshot`` as the state of ``repo_id``."""
        self._snapshots[repo_id] = snapshot

    def copy_of(self, repo_id: str) -> RepositorySnapshot | None:
        """Return a deep copy of a snapshot, safe to hand to callers."""
        snapshot = self._snapshots.get(repo_id)
        return copy.deepcopy(snapshot) if snapshot is not None else None

    def clear(self) -> None:
        """Forget every repository."""
        self._snapshots.clear()
