"""Builders for fake GitHub GraphQL responses."""

from __future__ import annotations

import dataclasses
import json
import secrets
import typing as typ

import httpx

from ghevents.github import GitHubGraphQLClient, GitHubGraphQLConfig

TOKEN = secrets.token_hex(8)
ENDPOINT = "https://example.test/graphql"

Payload = tuple[int, dict[str, typ.Any]]


def repository(
    name: str = "reef",
    *,
    owner: str = "octo",
    visibility: str | None = "PUBLIC",
) -> dict[str, typ.Any]:
    """Return a repository selection as GitHub would report it."""
    return {
        "name": name,
        "owner": {"login": owner},
        "url": f"https://github.com/{owner}/{name}",
        "visibility": visibility,
    }


def actor(login: str) -> dict[str, typ.Any]:
    """Return an actor selection for ``login``."""
    return {"login": login, "url": f"https://github.com/{login}"}


def search_page(
    nodes: list[dict[str, typ.Any] | None],
    *,
    has_next_page: bool = False,
    end_cursor: str | None = None,
) -> Payload:
    """Return a successful ``search`` response page."""
    return (
        200,
        {
            "data": {
                "search": {
                    "pageInfo": {
                        "hasNextPage": has_next_page,
                        "endCursor": end_cursor,
                    },
                    "nodes": nodes,
                }
            }
        },
    )


@dataclasses.dataclass(frozen=True, slots=True)
class IssueSpec:
    """Fields for a fake issues-search node."""

    number: int
    title: str
    created_at: str
    state: str = "OPEN"
    body: str = ""
    labels: tuple[tuple[str, str], ...] = ()
    author: str = "octo"
    visibility: str | None = "PUBLIC"


def issue_node(issue: IssueSpec) -> dict[str, typ.Any]:
    """Return an issues-search node."""
    return {
        "number": issue.number,
        "title": issue.title,
        "body": issue.body,
        "url": f"https://github.com/octo/reef/issues/{issue.number}",
        "state": issue.state,
        "createdAt": issue.created_at,
        "labels": {
            "nodes": [{"name": name, "color": color} for name, color in issue.labels]
        },
        "author": actor(issue.author),
        "repository": repository(visibility=issue.visibility),
    }


def commented_issue_node(
    number: int,
    comments: list[tuple[str, str, str]],
    *,
    visibility: str | None = "PUBLIC",
) -> dict[str, typ.Any]:
    """Return an issue-comments-search node.

    ``comments`` holds ``(author, created_at, body)`` tuples.
    """
    url = f"https://github.com/octo/reef/issues/{number}"
    return {
        "number": number,
        "title": f"Issue {number}",
        "url": url,
        "comments": {
            "nodes": [
                {
                    "body": body,
                    "url": f"{url}#issuecomment-{index}",
                    "createdAt": created_at,
                    "author": actor(author),
                }
                for index, (author, created_at, body) in enumerate(comments)
            ]
        },
        "repository": repository(visibility=visibility),
    }


def pull_request_node(
    number: int,
    created_at: str,
    *,
    state: str = "OPEN",
    visibility: str | None = "PUBLIC",
) -> dict[str, typ.Any]:
    """Return a pull-requests-search node."""
    return {
        "number": number,
        "title": f"Pull request {number}",
        "body": "Adds things",
        "url": f"https://github.com/octo/reef/pull/{number}",
        "state": state,
        "createdAt": created_at,
        "baseRefName": "main",
        "headRefName": f"feature/{number}",
        "changedFiles": 3,
        "additions": 40,
        "deletions": 2,
        "author": actor("octo"),
        "repository": repository(visibility=visibility),
    }


def reviewed_pull_request_node(
    number: int,
    reviews: list[tuple[str, str, str]],
    *,
    visibility: str | None = "PUBLIC",
) -> dict[str, typ.Any]:
    """Return a pull-request-reviews-search node.

    ``reviews`` holds ``(author, created_at, state)`` tuples.
    """
    url = f"https://github.com/octo/reef/pull/{number}"
    return {
        "number": number,
        "title": f"Pull request {number}",
        "url": url,
        "reviews": {
            "nodes": [
                {
                    "state": state,
                    "body": "",
                    "url": f"{url}#pullrequestreview-{index}",
                    "createdAt": created_at,
                    "author": actor(author),
                }
                for index, (author, created_at, state) in enumerate(reviews)
            ]
        },
        "repository": repository(visibility=visibility),
    }


def commit_node(
    oid: str,
    committed_date: str,
    *,
    user: str | None = "octo",
    visibility: str | None = "PUBLIC",
) -> dict[str, typ.Any]:
    """Return a commits-search node; ``user=None`` models an unlinked email."""
    return {
        "oid": oid,
        "message": f"commit {oid}",
        "url": f"https://github.com/octo/reef/commit/{oid}",
        "additions": 5,
        "deletions": 1,
        "changedFiles": 2,
        "committedDate": committed_date,
        "author": {"user": actor(user) if user is not None else None},
        "repository": repository(visibility=visibility),
    }


def make_client(
    payloads: list[Payload],
) -> tuple[GitHubGraphQLClient, httpx.AsyncClient, list[dict[str, typ.Any]]]:
    """Return a client answering requests with ``payloads`` in order."""
    calls: list[dict[str, typ.Any]] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content.decode("utf-8"))
        calls.append(body)
        status, payload = payloads[len(calls) - 1]
        return httpx.Response(status_code=status, json=payload)

    return _client_for(_handler, calls)


def make_routing_client(
    routes: dict[str, list[Payload]],
    *,
    viewer: str = "octo",
) -> tuple[GitHubGraphQLClient, httpx.AsyncClient, list[dict[str, typ.Any]]]:
    """Return a client that answers each search by its qualifier prefix.

    ``routes`` maps a search-string prefix such as ``"commenter:"`` to the
    pages returned for that search, in order. Searches without a route get
    an empty page; the viewer query returns ``viewer``.
    """
    calls: list[dict[str, typ.Any]] = []
    served: dict[str, int] = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content.decode("utf-8"))
        calls.append(body)
        search = body.get("variables", {}).get("searchQuery")
        if search is None:
            return httpx.Response(200, json={"data": {"viewer": actor(viewer)}})
        for prefix, pages in routes.items():
            if search.startswith(prefix):
                index = served.get(prefix, 0)
                served[prefix] = index + 1
                status, payload = pages[index]
                return httpx.Response(status_code=status, json=payload)
        status, payload = search_page([])
        return httpx.Response(status_code=status, json=payload)

    return _client_for(_handler, calls)


def _client_for(
    handler: typ.Callable[[httpx.Request], httpx.Response],
    calls: list[dict[str, typ.Any]],
) -> tuple[GitHubGraphQLClient, httpx.AsyncClient, list[dict[str, typ.Any]]]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = GitHubGraphQLClient(
        GitHubGraphQLConfig(token=TOKEN, endpoint=ENDPOINT),
        http_client=http_client,
    )
    return client, http_client, calls
