"""Repository identifier validation.

Identifiers end up as arguments of external commands and as cache keys, so
anything that is not a plain ``owner/name`` pair is rejected here.
"""

import re

from .errors import InvalidRepositoryIdError

REPOSITORY_PATTERN = re.compile(r"[A-Za-z0-9._-]+/[A-Za-z0-9._-]+")


def is_valid_repository(repo_id: object) -> bool:
    """Return True if ``repo_id`` is a safe ``owner/name`` identifier.

    Segments made only of dots (``.``, ``..``) are refused as path traversal.
    """
    if not isinstance(repo_id, str) or not REPOSITORY_PATTERN.fullmatch(repo_id):
        return False
    return all(segment.strip(".") for segment in repo_id.split("/"))


def ensure_valid_repository(repo_id: str) -> str:
    """Return ``repo_id`` unchanged or raise InvalidRepositoryIdError."""
    if not is_valid_repository(repo_id):
        raise InvalidRepositoryIdError(repo_id)
    return repo_id
