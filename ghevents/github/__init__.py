"""GitHub GraphQL fetching and normalization."""

from __future__ import annotations

from .aggregator import QUERY_KINDS, ActivityAggregator, QueryKind
from .auth import resolve_token
from .client import (
    ActivitySearchClient,
    GitHubGraphQLClient,
    GitHubGraphQLConfig,
    SearchPage,
)
from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .visibility import Visibility, admit

__all__ = [
    "QUERY_KINDS",
    "ActivityAggregator",
    "ActivitySearchClient",
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubGraphQLClient",
    "GitHubGraphQLConfig",
    "GitHubResponseShapeError",
    "QueryKind",
    "SearchPage",
    "Visibility",
    "admit",
    "resolve_token",
]
