"""End-to-end export: fetch, render, split and write.

Usage
-----
>>> import asyncio
>>> from ghevents.config import ExportConfig
>>> from ghevents.github import GitHubGraphQLClient, GitHubGraphQLConfig
>>> async def run() -> ExportResult:
...     async with GitHubGraphQLClient(GitHubGraphQLConfig(token="...")) as client:
...         return await export_events(client, ExportConfig.from_options())
>>> result = asyncio.run(run())

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ghevents.export.filesystem_sink import XmlFileSink
from ghevents.export.splitter import split_rendered
from ghevents.export.xml import render_event_blocks
from ghevents.github.aggregator import ActivityAggregator
from ghevents.logging import get_logger, log_info
from ghevents.progress import NullProgressSink, ProgressSink, report_progress

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ghevents.config import ExportConfig
    from ghevents.github.client import GitHubGraphQLClient

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ExportResult:
    """Outcome of a completed export."""

    username: str
    event_count: int
    paths: list[Path]


async def export_events(
    client: GitHubGraphQLClient,
    config: ExportConfig,
    *,
    progress: ProgressSink | None = None,
    sink: XmlFileSink | None = None,
) -> ExportResult:
    """Export the configured user's activity to one or more XML files.

    Raises
    ------
    GitHubAPIError
        If any GitHub request fails.
    ExportWriteError
        If a part cannot be written.

    """
    progress_sink = progress or NullProgressSink()
    username = config.username
    if username is None:
        report_progress(progress_sink, "Fetching user information...")
        username = (await client.fetch_viewer()).login

    aggregator = ActivityAggregator(client, progress=progress_sink)
    events = await aggregator.fetch_all(
        username,
        config.since,
        config.until,
        config.visibility,
        config.order,
    )

    report_progress(progress_sink, "Rendering XML...")
    blocks = render_event_blocks(events, config.order)
    parts = split_rendered(blocks, config.max_length)

    report_progress(progress_sink, "Writing files...")
    paths = await (sink or XmlFileSink()).write_parts(parts, config.output)
    log_info(
        logger,
        "exported %d events for %s into %d file(s)",
        len(events),
        username,
        len(paths),
    )
    return ExportResult(username=username, event_count=len(events), paths=paths)
