"""Unified activity event model."""

from __future__ import annotations

from .models import (
    Author,
    Category,
    Commit,
    Discussion,
    DiscussionComment,
    DiscussionRef,
    Event,
    EventUnion,
    Issue,
    IssueComment,
    IssueRef,
    Label,
    PullRequest,
    PullRequestRef,
    PullRequestReview,
    RepositoryRef,
)
from .ordering import SortOrder, sort_events

__all__ = [
    "Author",
    "Category",
    "Commit",
    "Discussion",
    "DiscussionComment",
    "DiscussionRef",
    "Event",
    "EventUnion",
    "Issue",
    "IssueComment",
    "IssueRef",
    "Label",
    "PullRequest",
    "PullRequestRef",
    "PullRequestReview",
    "RepositoryRef",
    "SortOrder",
    "sort_events",
]
