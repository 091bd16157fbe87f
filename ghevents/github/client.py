"""GitHub GraphQL client used to page through activity searches."""

from __future__ import annotations

import dataclasses
import typing as typ

import httpx

from ghevents.logging import get_logger, log_debug

from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .queries import VIEWER_QUERY
from .raw import RawViewer, convert_node

logger = get_logger(__name__)

DEFAULT_ENDPOINT = "https://api.github.com/graphql"
DEFAULT_PAGE_SIZE = 100

_HTTP_ERROR_STATUS_THRESHOLD = 400


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubGraphQLConfig:
    """Configuration for the GitHub GraphQL API client."""

    token: str
    endpoint: str = DEFAULT_ENDPOINT
    timeout_s: float = 30.0
    user_agent: str = "ghevents/0.1"
    page_size: int = DEFAULT_PAGE_SIZE


@dataclasses.dataclass(frozen=True, slots=True)
class SearchPage:
    """One page of a search connection."""

    nodes: list[dict[str, typ.Any]]
    end_cursor: str | None


class ActivitySearchClient(typ.Protocol):
    """Interface the aggregator needs from a GraphQL client."""

    def iter_search_nodes[NodeT](
        self,
        query: str,
        variables: dict[str, typ.Any],
        *,
        node_type: type[NodeT],
        page_size: int | None = None,
    ) -> typ.AsyncIterator[NodeT]:
        """Yield every node of a paginated search."""
        ...


def _parse_graphql_payload(payload_raw: object) -> dict[str, typ.Any]:
    """Validate a GraphQL response body and return its ``data`` object."""
    if not isinstance(payload_raw, dict):
        raise GitHubResponseShapeError.missing("response")

    errors = payload_raw.get("errors")
    if errors:
        raise GitHubAPIError.graphql_errors(errors)

    data = payload_raw.get("data")
    if not isinstance(data, dict):
        raise GitHubResponseShapeError.missing("data")
    return data


def _search_page(data: dict[str, typ.Any]) -> SearchPage:
    """Extract nodes and the next cursor from a ``search`` connection.

    ``end_cursor`` is ``None`` once GitHub reports no further pages.
    """
    search = data.get("search")
    if not isinstance(search, dict):
        raise GitHubResponseShapeError.missing("search")

    nodes = search.get("nodes")
    if not isinstance(nodes, list):
        raise GitHubResponseShapeError.missing("search.nodes")

    page_info = search.get("pageInfo")
    if not isinstance(page_info, dict):
        raise GitHubResponseShapeError.missing("search.pageInfo")

    end_cursor = page_info.get("endCursor")
    has_next_page = bool(page_info.get("hasNextPage"))
    return SearchPage(
        # ``... on Issue`` fragments can yield null entries for other types.
        nodes=[node for node in nodes if isinstance(node, dict)],
        end_cursor=end_cursor
        if has_next_page and isinstance(end_cursor, str)
        else None,
    )


class GitHubGraphQLClient:
    """Async GitHub GraphQL client backed by :mod:`httpx`."""

    def __init__(
        self,
        config: GitHubGraphQLConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client; an ``http_client`` passed in is not closed."""
        if not config.token.strip():
            raise GitHubConfigError.empty_token()

        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)
        self._headers = {
            "Authorization": f"Bearer {config.token}",
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GitHubGraphQLClient:
        """Return the client for use in ``async with``."""
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        """Close owned HTTP resources on exit."""
        await self.aclose()

    async def fetch_viewer(self) -> RawViewer:
        """Return the login and profile URL of the token's owner."""
        data = await self._graphql(VIEWER_QUERY, {})
        viewer = data.get("viewer")
        if not isinstance(viewer, dict):
            raise GitHubResponseShapeError.missing("viewer")
        return convert_node(viewer, RawViewer, field="viewer")

    async def iter_search_nodes[NodeT](
        self,
        query: str,
        variables: dict[str, typ.Any],
        *,
        node_type: type[NodeT],
        page_size: int | None = None,
    ) -> typ.AsyncIterator[NodeT]:
        """Yield every node of a paginated ``search`` query.

        The query is re-issued with the previous page's ``endCursor`` as
        ``$after`` until GitHub reports ``hasNextPage: false``. Each node is
        converted to ``node_type`` before it is yielded. Errors abort the
        iteration; pages already yielded are not retried.
        """
        first = page_size or self._config.page_size
        after: str | None = None
        page_number = 0
        while True:
            page = await self._fetch_page(query, variables, first=first, after=after)
            page_number += 1
            log_debug(
                logger,
                "search page %d returned %d nodes (more=%s)",
                page_number,
                len(page.nodes),
                page.end_cursor is not None,
            )
            for node in page.nodes:
                yield convert_node(node, node_type, field="search.nodes")

            if page.end_cursor is None:
                return
            after = page.end_cursor

    async def _fetch_page(
        self,
        query: str,
        variables: dict[str, typ.Any],
        *,
        first: int,
        after: str | None,
    ) -> SearchPage:
        """Execute one search page request."""
        data = await self._graphql(query, {**variables, "first": first, "after": after})
        return _search_page(data)

    async def _graphql(
        self, query: str, variables: dict[str, typ.Any]
    ) -> dict[str, typ.Any]:
        """Execute a GraphQL query and return the validated data field."""
        try:
            response = await self._client.post(
                self._config.endpoint,
                json={"query": query, "variables": variables},
                headers=self._headers,
            )
        except httpx.TransportError as exc:
            raise GitHubAPIError.transport(exc) from exc
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise GitHubAPIError.http_error(response.status_code)
        try:
            payload_raw = response.json()
        except ValueError as exc:
            raise GitHubResponseShapeError.missing("response") from exc
        return _parse_graphql_payload(payload_raw)
