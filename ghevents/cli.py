"""Command-line entry point for exporting GitHub activity as XML."""

from __future__ import annotations

import asyncio
import os
import sys
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from ghevents import __version__
from ghevents.config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_OUTPUT,
    ExportConfig,
    ExportConfigError,
)
from ghevents.export.errors import ExportWriteError
from ghevents.github.auth import resolve_token
from ghevents.github.client import GitHubGraphQLClient, GitHubGraphQLConfig
from ghevents.github.errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
)
from ghevents.logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_warning,
)
from ghevents.pipeline import ExportResult, export_events
from ghevents.progress import (
    LoggingProgressSink,
    ProgressSink,
    report_complete,
    report_error,
)

logger = get_logger(__name__)

app = App(
    name="ghevents",
    help="Fetch GitHub activity events and export them to XML",
    version=__version__,
)

_EXPORT_ERRORS = (
    ExportConfigError,
    ExportWriteError,
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
)


def _build_client(token: str) -> GitHubGraphQLClient:
    return GitHubGraphQLClient(GitHubGraphQLConfig(token=token))


async def _run_export(
    token: str, config: ExportConfig, progress: ProgressSink
) -> ExportResult:
    async with _build_client(token) as client:
        return await export_events(client, config, progress=progress)


@app.default
def export(  # noqa: PLR0913 - one keyword per CLI option
    *,
    github_token: typ.Annotated[
        str | None, Parameter(name=["--github-token", "-t"])
    ] = None,
    output: typ.Annotated[
        Path, Parameter(name=["--output", "-o"], env_var="GHEVENTS_OUTPUT")
    ] = DEFAULT_OUTPUT,
    since: typ.Annotated[
        str | None, Parameter(name=["--since", "-s"], env_var="GHEVENTS_SINCE")
    ] = None,
    until: typ.Annotated[
        str | None, Parameter(name=["--until", "-u"], env_var="GHEVENTS_UNTIL")
    ] = None,
    visibility: typ.Annotated[
        str,
        Parameter(name=["--visibility", "-v"], env_var="GHEVENTS_VISIBILITY"),
    ] = "public",
    max_length: typ.Annotated[
        int, Parameter(name=["--max-length", "-m"], env_var="GHEVENTS_MAX_LENGTH")
    ] = DEFAULT_MAX_LENGTH,
    order: typ.Annotated[
        str, Parameter(name=["--order", "-r"], env_var="GHEVENTS_ORDER")
    ] = "asc",
    user: typ.Annotated[str | None, Parameter(env_var="GHEVENTS_USER")] = None,
    log_level: typ.Annotated[
        str, Parameter(env_var="GHEVENTS_LOG_LEVEL")
    ] = DEFAULT_LOG_LEVEL,
) -> int:
    """Export a user's issues, comments, pull requests, reviews and commits.

    Parameters
    ----------
    github_token
        GitHub access token. Falls back to GITHUB_TOKEN, then ``gh auth token``.
    output
        Output file name. Split exports are suffixed ``_1``, ``_2``, ...
    since
        Start date in ISO8601 format. Defaults to two weeks ago.
    until
        End date in ISO8601 format. Defaults to now.
    visibility
        Repository visibility: public, private, all.
    max_length
        Maximum characters per XML file.
    order
        Event order: asc, desc.
    user
        Login to export. Defaults to the token's owner.
    log_level
        femtologging level name.

    """
    _, invalid_level = configure_logging(log_level, force=True)
    if invalid_level:
        log_warning(
            logger, "Invalid log level %r; using %s", log_level, DEFAULT_LOG_LEVEL
        )

    progress = LoggingProgressSink()
    try:
        config = ExportConfig.from_options(
            since=since,
            until=until,
            output=output,
            visibility=visibility,
            max_length=max_length,
            order=order,
            username=user,
        )
        config.validate()
        token = resolve_token(github_token, environ=os.environ)
        result = asyncio.run(_run_export(token, config, progress))
    except _EXPORT_ERRORS as exc:
        report_error(progress, str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report_complete(progress)
    print(f"Successfully exported {result.event_count} events to {config.output}")
    return 0


def main() -> int:
    """Entry point for the ``ghevents`` console script."""
    return app()


if __name__ == "__main__":
    raise SystemExit(main())
