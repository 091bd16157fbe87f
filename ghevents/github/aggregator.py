"""Aggregate a user's activity across the five GitHub searches."""

from __future__ import annotations

import dataclasses
import typing as typ

from ghevents.common.time import to_github_datetime
from ghevents.events.ordering import SortOrder, sort_events
from ghevents.logging import get_logger, log_info
from ghevents.progress import NullProgressSink, ProgressSink, report_progress

from . import queries
from .normalize import (
    Normalizer,
    normalize_commit,
    normalize_issue,
    normalize_issue_comments,
    normalize_pull_request,
    normalize_pull_request_reviews,
)
from .raw import (
    RawCommentedIssueNode,
    RawCommitNode,
    RawIssueNode,
    RawPullRequestNode,
    RawReviewedPullRequestNode,
)
from .visibility import Visibility, admit

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from ghevents.events.models import Event

    from .client import ActivitySearchClient
    from .raw import RawSearchNode

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class QueryKind:
    """One activity search and how its nodes become events."""

    name: str
    label: str
    query: str
    search: cabc.Callable[[str, str, str], str]
    node_type: type[RawSearchNode]
    normalize: Normalizer


QUERY_KINDS: tuple[QueryKind, ...] = (
    QueryKind(
        name="issues",
        label="issues",
        query=queries.ISSUES_QUERY,
        search=queries.issues_search,
        node_type=RawIssueNode,
        normalize=normalize_issue,
    ),
    QueryKind(
        name="issue_comments",
        label="issue comments",
        query=queries.ISSUE_COMMENTS_QUERY,
        search=queries.issue_comments_search,
        node_type=RawCommentedIssueNode,
        normalize=normalize_issue_comments,
    ),
    QueryKind(
        name="pull_requests",
        label="pull requests",
        query=queries.PULL_REQUESTS_QUERY,
        search=queries.pull_requests_search,
        node_type=RawPullRequestNode,
        normalize=normalize_pull_request,
    ),
    QueryKind(
        name="pull_request_reviews",
        label="pull request reviews",
        query=queries.PULL_REQUEST_REVIEWS_QUERY,
        search=queries.pull_request_reviews_search,
        node_type=RawReviewedPullRequestNode,
        normalize=normalize_pull_request_reviews,
    ),
    QueryKind(
        name="commits",
        label="commits",
        query=queries.COMMITS_QUERY,
        search=queries.commits_search,
        node_type=RawCommitNode,
        normalize=normalize_commit,
    ),
)


class ActivityAggregator:
    """Collect and order every event a user produced in a time window."""

    def __init__(
        self,
        client: ActivitySearchClient,
        *,
        progress: ProgressSink | None = None,
        query_kinds: cabc.Sequence[QueryKind] = QUERY_KINDS,
    ) -> None:
        """Bind the aggregator to a search client and a progress sink."""
        self._client = client
        self._progress = progress or NullProgressSink()
        self._query_kinds = tuple(query_kinds)

    async def fetch_all(
        self,
        username: str,
        since: dt.datetime,
        until: dt.datetime,
        visibility: Visibility | str,
        order: SortOrder | str = SortOrder.ASC,
    ) -> list[Event]:
        """Return every admitted event for ``username``, sorted by timestamp.

        Query kinds run one after another; the first failure propagates and
        discards everything collected so far.
        """
        since_text = to_github_datetime(since)
        until_text = to_github_datetime(until)
        events: list[Event] = []
        for kind in self._query_kinds:
            report_progress(self._progress, f"Fetching {kind.label}...")
            kind_events = await self._fetch_kind(
                kind,
                username=username,
                since=since_text,
                until=until_text,
                visibility=visibility,
            )
            log_info(
                logger,
                "fetched %d %s for %s",
                len(kind_events),
                kind.label,
                username,
            )
            events.extend(kind_events)
        return sort_events(events, order)

    async def _fetch_kind(
        self,
        kind: QueryKind,
        *,
        username: str,
        since: str,
        until: str,
        visibility: Visibility | str,
    ) -> list[Event]:
        variables = {"searchQuery": kind.search(username, since, until)}
        events: list[Event] = []
        async for node in self._client.iter_search_nodes(
            kind.query, variables, node_type=kind.node_type
        ):
            if not admit(node.visibility, visibility):
                continue
            events.extend(kind.normalize(node, username))
        return events
