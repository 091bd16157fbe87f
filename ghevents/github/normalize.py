"""Map raw search nodes onto the unified event model.

Each ``normalize_*`` function takes one raw node plus the login the searches
ran for and returns the events it contributes. Nodes with missing nested
objects still normalize: absent values stay ``None`` or fall back to zero.
A record without a parseable timestamp cannot be ordered and is dropped.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ghevents.common.time import parse_timestamp
from ghevents.events.models import (
    Author,
    Commit,
    Event,
    Issue,
    IssueComment,
    IssueRef,
    Label,
    PullRequest,
    PullRequestRef,
    PullRequestReview,
    RepositoryRef,
)
from ghevents.logging import get_logger, log_debug

if typ.TYPE_CHECKING:
    from .raw import (
        RawActor,
        RawCommentedIssueNode,
        RawCommitNode,
        RawIssueNode,
        RawLabelConnection,
        RawPullRequestNode,
        RawRepository,
        RawReviewedPullRequestNode,
    )

logger = get_logger(__name__)

Normalizer = cabc.Callable[[typ.Any, str], list[Event]]


def _checked_timestamp(
    value: str | None, *, record: str, url: str | None
) -> str | None:
    """Return ``value`` when it parses as a timestamp, otherwise ``None``."""
    if not value:
        log_debug(logger, "dropping %s without timestamp (%s)", record, url or "-")
        return None
    try:
        parse_timestamp(value)
    except ValueError:
        log_debug(logger, "dropping %s with bad timestamp %r", record, value)
        return None
    return value


def _repository(raw: RawRepository | None) -> RepositoryRef | None:
    if raw is None:
        return None
    return RepositoryRef(
        name=raw.name,
        owner=raw.owner.login if raw.owner is not None else None,
        url=raw.url,
    )


def _author(raw: RawActor | None) -> Author | None:
    if raw is None:
        return None
    return Author(login=raw.login, url=raw.url)


def _labels(raw: RawLabelConnection | None) -> list[Label]:
    if raw is None:
        return []
    return [
        Label(name=label.name, color=label.color)
        for label in raw.nodes
        if label is not None
    ]


def _authored_by(raw: RawActor | None, username: str) -> bool:
    return raw is not None and raw.login == username


def normalize_issue(node: RawIssueNode, username: str) -> list[Event]:
    """Return the issue event for an issues-search node."""
    del username
    created_at = _checked_timestamp(node.created_at, record="issue", url=node.url)
    if created_at is None:
        return []
    return [
        Issue(
            created_at=created_at,
            number=node.number,
            state=node.state,
            title=node.title,
            body=node.body,
            url=node.url,
            labels=_labels(node.labels),
            repository=_repository(node.repository),
            author=_author(node.author),
        )
    ]


def normalize_issue_comments(
    node: RawCommentedIssueNode, username: str
) -> list[Event]:
    """Return the comments ``username`` wrote on one issue.

    The comments search matches issues, not comments, so the first page of
    every matched issue's comments is filtered by author here.
    """
    if node.comments is None:
        return []
    issue = IssueRef(number=node.number, title=node.title, url=node.url)
    repository = _repository(node.repository)
    events: list[Event] = []
    for comment in node.comments.nodes:
        if comment is None or not _authored_by(comment.author, username):
            continue
        created_at = _checked_timestamp(
            comment.created_at, record="issue comment", url=comment.url
        )
        if created_at is None:
            continue
        events.append(
            IssueComment(
                created_at=created_at,
                body=comment.body,
                url=comment.url,
                issue=issue,
                repository=repository,
                author=_author(comment.author),
            )
        )
    return events


def normalize_pull_request(node: RawPullRequestNode, username: str) -> list[Event]:
    """Return the pull request event for a pull-request-search node."""
    del username
    created_at = _checked_timestamp(
        node.created_at, record="pull request", url=node.url
    )
    if created_at is None:
        return []
    return [
        PullRequest(
            created_at=created_at,
            number=node.number,
            state=node.state,
            title=node.title,
            body=node.body,
            url=node.url,
            base_ref=node.base_ref_name,
            head_ref=node.head_ref_name,
            changed_files=node.changed_files or 0,
            additions=node.additions or 0,
            deletions=node.deletions or 0,
            repository=_repository(node.repository),
            author=_author(node.author),
        )
    ]


def normalize_pull_request_reviews(
    node: RawReviewedPullRequestNode, username: str
) -> list[Event]:
    """Return the reviews ``username`` submitted on one pull request."""
    if node.reviews is None:
        return []
    pull_request = PullRequestRef(number=node.number, title=node.title, url=node.url)
    repository = _repository(node.repository)
    events: list[Event] = []
    for review in node.reviews.nodes:
        if review is None or not _authored_by(review.author, username):
            continue
        created_at = _checked_timestamp(
            review.created_at, record="pull request review", url=review.url
        )
        if created_at is None:
            continue
        events.append(
            PullRequestReview(
                created_at=created_at,
                state=review.state,
                body=review.body,
                url=review.url,
                pull_request=pull_request,
                repository=repository,
                author=_author(review.author),
            )
        )
    return events


def normalize_commit(node: RawCommitNode, username: str) -> list[Event]:
    """Return the commit event for a commits-search node.

    Commits whose email maps to no GitHub account are still attributed to
    ``username``, with an empty profile URL.
    """
    created_at = _checked_timestamp(
        node.committed_date, record="commit", url=node.url
    )
    if created_at is None:
        return []
    user = node.author.user if node.author is not None else None
    author = Author(
        login=(user.login if user is not None else None) or username,
        url=(user.url if user is not None else None) or "",
    )
    return [
        Commit(
            created_at=created_at,
            sha=node.oid,
            message=node.message,
            url=node.url,
            additions=node.additions or 0,
            deletions=node.deletions or 0,
            changed_files=node.changed_files or 0,
            repository=_repository(node.repository),
            author=author,
        )
    ]
