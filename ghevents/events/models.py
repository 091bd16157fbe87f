"""Typed activity events shared by the fetch and export layers.

Every event is a :class:`msgspec.Struct` tagged with its variant name in the
``kind`` field, so ``msgspec.json.encode`` produces a self-describing payload
and ``msgspec.convert(data, EventUnion)`` restores the right variant.
"""

from __future__ import annotations

import typing as typ

import msgspec

from ghevents.common.time import parse_timestamp

if typ.TYPE_CHECKING:
    import datetime as dt


class Author(msgspec.Struct, kw_only=True):
    """GitHub account that authored an event."""

    login: str | None = None
    url: str | None = None


class RepositoryRef(msgspec.Struct, kw_only=True):
    """Repository an event belongs to.

    Visibility is intentionally absent; it only matters while filtering raw
    nodes.
    """

    name: str | None = None
    owner: str | None = None
    url: str | None = None


class Label(msgspec.Struct, kw_only=True):
    """Issue label name and hex colour."""

    name: str | None = None
    color: str | None = None


class IssueRef(msgspec.Struct, kw_only=True):
    """Issue a comment was posted on."""

    number: int | None = None
    title: str | None = None
    url: str | None = None


class PullRequestRef(msgspec.Struct, kw_only=True):
    """Pull request a review was submitted against."""

    number: int | None = None
    title: str | None = None
    url: str | None = None


class DiscussionRef(msgspec.Struct, kw_only=True):
    """Discussion a comment was posted on."""

    title: str | None = None
    url: str | None = None


class Category(msgspec.Struct, kw_only=True):
    """Discussion category."""

    name: str | None = None


class Event(msgspec.Struct, kw_only=True, tag_field="kind", tag=True):
    """Fields common to every activity event.

    Attributes
    ----------
    created_at : str
        ISO 8601 timestamp as reported by GitHub; the sole sort key.
    url : str, optional
        Permalink of the event itself.
    title : str, optional
        Title of the issue, pull request or discussion.
    body : str, optional
        Markdown body text.
    author : Author, optional
        Account that produced the event.
    repository : RepositoryRef, optional
        Repository the event belongs to.

    """

    created_at: str
    url: str | None = None
    title: str | None = None
    body: str | None = None
    author: Author | None = None
    repository: RepositoryRef | None = None

    @property
    def kind(self) -> str:
        """Return the variant tag, e.g. ``"PullRequestReview"``."""
        return str(self.__struct_config__.tag)

    @property
    def occurred_at(self) -> dt.datetime:
        """Return ``created_at`` parsed as an aware UTC datetime."""
        return parse_timestamp(self.created_at)


class Issue(Event):
    """Issue opened by the user; ``state`` is ``OPEN`` or ``CLOSED``."""

    number: int | None = None
    state: str | None = None
    labels: list[Label] = msgspec.field(default_factory=list)


class IssueComment(Event):
    """Comment the user posted on an issue."""

    issue: IssueRef | None = None


class Discussion(Event):
    """Discussion started by the user."""

    category: Category | None = None


class DiscussionComment(Event):
    """Comment the user posted on a discussion."""

    discussion: DiscussionRef | None = None


class PullRequest(Event):
    """Pull request opened by the user.

    ``state`` is one of ``OPEN``, ``CLOSED`` or ``MERGED``.
    """

    number: int | None = None
    state: str | None = None
    base_ref: str | None = None
    head_ref: str | None = None
    changed_files: int = 0
    additions: int = 0
    deletions: int = 0


class PullRequestReview(Event):
    """Review the user submitted on a pull request.

    ``state`` is GitHub's review state, e.g. ``APPROVED``, ``CHANGES_REQUESTED``
    or ``COMMENTED``.
    """

    state: str | None = None
    pull_request: PullRequestRef | None = None


class Commit(Event):
    """Commit authored by the user."""

    sha: str | None = None
    message: str | None = None
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0


EventUnion = (
    Issue
    | IssueComment
    | Discussion
    | DiscussionComment
    | PullRequest
    | PullRequestReview
    | Commit
)
