"""Pydantic models for the GitHub records the observer compares.

Field names follow GitHub's REST API (``created_at``); the camelCase
names emitted by ``gh --json`` (``createdAt``) are accepted as aliases.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """GitHub user model representing an issue or comment author.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="GitHub username/login (string)")
    id: int | str | None = Field(
        None, description="User identifier (REST integer id or GraphQL node id)"
    )


class GitHubComment(BaseModel):
    """GitHub comment model representing an issue comment.

    Only ``id`` takes part in change detection; two fetches of the same
    comment are the same comment if their ids are equal.
    API Reference: https://docs.github.com/en/rest/issues/comments
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | str = Field(
        ..., description="Comment identifier, unique within the issue"
    )
    author: GitHubUser = Field(..., description="Comment author details")
    body: str | None = Field(None, description="Text content of the comment")
    created_at: datetime | None = Field(
        None, alias="createdAt", description="Timestamp of comment creation"
    )
    url: str | None = Field(None, description="HTML URL of the comment")


class GitHubIssue(BaseModel):
    """GitHub issue model as seen by one fetch.

    Immutable once fetched; a later fetch may return an issue with the same
    ``number`` and a later ``updated_at``.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int = Field(..., description="Issue number within the repository")
    title: str = Field(..., description="Short description/title of the issue")
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    author: GitHubUser = Field(..., description="Creator/author of the issue")
    created_at: datetime = Field(
        ..., alias="createdAt", description="Timestamp of issue creation"
    )
    updated_at: datetime = Field(
        ..., alias="updatedAt", description="Timestamp of last issue update"
    )
    url: str | None = Field(None, description="HTML URL of the issue")


class GitHubRepository(BaseModel):
    """Repository visible to the authenticated user."""

    full_name: str = Field(..., description="owner/name identifier")
    url: str | None = Field(None, description="HTML URL of the repository")
    description: str | None = Field(None, description="Repository description")
    organization: str | None = Field(
        None, description="Organization login when listed through an org"
    )
