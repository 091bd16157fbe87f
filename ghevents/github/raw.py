"""Raw GraphQL search nodes, one struct per query kind.

Nodes are converted from decoded JSON with :func:`msgspec.convert` as soon as
a page arrives. Every field is optional so a node with missing nested objects
still converts; a field holding the wrong JSON type is schema drift and is
reported as :class:`GitHubResponseShapeError`.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .errors import GitHubResponseShapeError


class RawActor(msgspec.Struct, kw_only=True, rename="camel"):
    """``Actor`` selection: ``login`` and ``url``."""

    login: str | None = None
    url: str | None = None


class RawOwner(msgspec.Struct, kw_only=True, rename="camel"):
    """Repository owner selection."""

    login: str | None = None


class RawRepository(msgspec.Struct, kw_only=True, rename="camel"):
    """Repository selection including its visibility."""

    name: str | None = None
    owner: RawOwner | None = None
    url: str | None = None
    visibility: str | None = None


class RawNode(msgspec.Struct, kw_only=True, rename="camel"):
    """Base for search nodes that carry a repository."""

    repository: RawRepository | None = None

    @property
    def visibility(self) -> str | None:
        """Return the owning repository's visibility, when reported."""
        if self.repository is None:
            return None
        return self.repository.visibility


class RawLabel(msgspec.Struct, kw_only=True, rename="camel"):
    """Issue label selection."""

    name: str | None = None
    color: str | None = None


class RawLabelConnection(msgspec.Struct, kw_only=True, rename="camel"):
    """First page of an issue's labels."""

    nodes: list[RawLabel | None] = msgspec.field(default_factory=list)


class RawIssueNode(RawNode):
    """Node returned by the issues search."""

    number: int | None = None
    title: str | None = None
    body: str | None = None
    url: str | None = None
    state: str | None = None
    created_at: str | None = None
    labels: RawLabelConnection | None = None
    author: RawActor | None = None


class RawComment(msgspec.Struct, kw_only=True, rename="camel"):
    """Issue comment selection."""

    body: str | None = None
    url: str | None = None
    created_at: str | None = None
    author: RawActor | None = None


class RawCommentConnection(msgspec.Struct, kw_only=True, rename="camel"):
    """First page of an issue's comments."""

    nodes: list[RawComment | None] = msgspec.field(default_factory=list)


class RawCommentedIssueNode(RawNode):
    """Node returned by the issue comments search."""

    number: int | None = None
    title: str | None = None
    url: str | None = None
    comments: RawCommentConnection | None = None


class RawPullRequestNode(RawNode):
    """Node returned by the pull requests search."""

    number: int | None = None
    title: str | None = None
    body: str | None = None
    url: str | None = None
    state: str | None = None
    created_at: str | None = None
    base_ref_name: str | None = None
    head_ref_name: str | None = None
    changed_files: int | None = None
    additions: int | None = None
    deletions: int | None = None
    author: RawActor | None = None


class RawReview(msgspec.Struct, kw_only=True, rename="camel"):
    """Pull request review selection."""

    state: str | None = None
    body: str | None = None
    url: str | None = None
    created_at: str | None = None
    author: RawActor | None = None


class RawReviewConnection(msgspec.Struct, kw_only=True, rename="camel"):
    """First page of a pull request's reviews."""

    nodes: list[RawReview | None] = msgspec.field(default_factory=list)


class RawReviewedPullRequestNode(RawNode):
    """Node returned by the pull request reviews search."""

    number: int | None = None
    title: str | None = None
    url: str | None = None
    reviews: RawReviewConnection | None = None


class RawCommitAuthor(msgspec.Struct, kw_only=True, rename="camel"):
    """Git author; ``user`` is null when the email maps to no account."""

    user: RawActor | None = None


class RawCommitNode(RawNode):
    """Node returned by the commits search."""

    oid: str | None = None
    message: str | None = None
    url: str | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    committed_date: str | None = None
    author: RawCommitAuthor | None = None


class RawViewer(msgspec.Struct, kw_only=True, rename="camel"):
    """Authenticated user returned by the viewer query."""

    login: str
    url: str | None = None


def convert_node[NodeT](node: object, node_type: type[NodeT], *, field: str) -> NodeT:
    """Convert one decoded JSON object into ``node_type``.

    Raises
    ------
    GitHubResponseShapeError
        If ``node`` holds values of the wrong JSON type.

    """
    try:
        return msgspec.convert(node, type=node_type)
    except msgspec.ValidationError as exc:
        raise GitHubResponseShapeError.invalid(field, str(exc)) from exc


RawSearchNode: typ.TypeAlias = (
    RawIssueNode
    | RawCommentedIssueNode
    | RawPullRequestNode
    | RawReviewedPullRequestNode
    | RawCommitNode
)
