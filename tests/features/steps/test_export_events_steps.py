"""Behavioural coverage for exporting activity to XML files."""

from __future__ import annotations

import asyncio
import datetime as dt
import typing as typ
import xml.etree.ElementTree as ET

import pytest
from pytest_bdd import given, parsers, scenario, then, when

from ghevents.config import ExportConfig
from ghevents.pipeline import ExportResult, export_events
from tests.helpers.graphql import (
    IssueSpec,
    commit_node,
    issue_node,
    make_routing_client,
    pull_request_node,
    search_page,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

_NOW = dt.datetime(2024, 5, 15, tzinfo=dt.UTC)


class ExportContext(typ.TypedDict, total=False):
    """Mutable context shared between steps."""

    login: str
    routes: dict[str, list[tuple[int, dict[str, typ.Any]]]]
    result: ExportResult


@scenario(
    "../export_events.feature",
    "Public activity is exported oldest first",
)
def test_public_activity_scenario() -> None:
    """Wrapper for pytest-bdd scenario."""


@scenario(
    "../export_events.feature",
    "All visibilities are exported newest first",
)
def test_all_visibilities_scenario() -> None:
    """Wrapper for pytest-bdd scenario."""


@scenario(
    "../export_events.feature",
    "Large exports are split into standalone parts",
)
def test_split_export_scenario() -> None:
    """Wrapper for pytest-bdd scenario."""


@pytest.fixture
def context() -> ExportContext:
    """Return an empty step context."""
    return {}


def _tags(path: Path) -> list[str]:
    root = ET.fromstring(path.read_bytes())
    return [child.tag for child in root]


def _names(text: str) -> list[str]:
    return [name.strip() for name in text.split(",")]


@given(parsers.parse('a GitHub account "{login}" with public and private activity'))
def account_with_activity(context: ExportContext, login: str) -> None:
    """Serve one public issue, one public PR and two commits."""
    context["login"] = login
    context["routes"] = {
        f"author:{login} is:issue": [
            search_page(
                [
                    issue_node(
                        IssueSpec(
                            number=1,
                            title="Public issue",
                            created_at="2024-05-03T00:00:00Z",
                            author=login,
                        )
                    )
                ]
            )
        ],
        f"author:{login} is:pr": [
            search_page([pull_request_node(2, "2024-05-02T00:00:00Z")])
        ],
        f"author:{login} author-date": [
            search_page(
                [commit_node("pub", "2024-05-04T00:00:00Z")],
                has_next_page=True,
                end_cursor="page-2",
            ),
            search_page(
                [commit_node("priv", "2024-05-05T00:00:00Z", visibility="PRIVATE")]
            ),
        ],
    }


@when(
    parsers.parse(
        'I export {visibility} events in "{order}" order '
        "with a limit of {max_length:d} characters"
    )
)
def run_export(
    context: ExportContext,
    tmp_path: Path,
    visibility: str,
    order: str,
    max_length: int,
) -> None:
    """Run the export pipeline against the fake GitHub."""
    config = ExportConfig.from_options(
        output=tmp_path / "ghevents.xml",
        visibility=visibility,
        order=order,
        max_length=max_length,
        username=context["login"],
        now=_NOW,
    )
    config.validate()

    async def _run() -> ExportResult:
        client, http_client, _ = make_routing_client(context["routes"])
        try:
            return await export_events(client, config)
        finally:
            await http_client.aclose()

    context["result"] = asyncio.run(_run())


@then("one file is written")
def one_file_written(context: ExportContext, tmp_path: Path) -> None:
    """A small export keeps the requested file name."""
    assert context["result"].paths == [tmp_path / "ghevents.xml"], (
        "Expected a single unsuffixed file"
    )


@then(parsers.parse("{count:d} files are written"))
def files_written(context: ExportContext, count: int) -> None:
    """Split exports produce numbered files."""
    paths = context["result"].paths
    assert [path.name for path in paths] == [
        f"ghevents_{index}.xml" for index in range(1, count + 1)
    ], f"Expected {count} numbered files"


@then("every file is a well-formed XML document")
def every_file_parses(context: ExportContext) -> None:
    """Each part parses on its own."""
    for path in context["result"].paths:
        root = ET.fromstring(path.read_bytes())
        assert root.tag == "GitHubEvents", f"Expected GitHubEvents root in {path}"


@then(parsers.parse('the file lists "{kinds}"'))
def file_lists(context: ExportContext, kinds: str) -> None:
    """The single file holds the expected events in order."""
    (path,) = context["result"].paths
    assert _tags(path) == _names(kinds), f"Expected events {kinds}"


@then(parsers.parse('the files together list "{kinds}"'))
def files_together_list(context: ExportContext, kinds: str) -> None:
    """Concatenating the parts yields every event exactly once, in order."""
    tags = [tag for path in context["result"].paths for tag in _tags(path)]
    assert tags == _names(kinds), f"Expected events {kinds} across parts"
