"""Progress reporting for long-running exports.

The export pipeline reports milestones ("Fetching commits...") through a
:class:`ProgressSink`. Sinks only observe the run, so a sink that raises
never aborts it: see :func:`report_progress`, :func:`report_complete` and
:func:`report_error`.
"""

from __future__ import annotations

import typing as typ

from ghevents.logging import get_logger, log_error, log_info, log_warning

logger = get_logger(__name__)


@typ.runtime_checkable
class ProgressSink(typ.Protocol):
    """Receiver of human-readable pipeline milestones."""

    def update(self, message: str) -> None:
        """Record that the pipeline entered a new stage."""
        ...

    def complete(self) -> None:
        """Record that the pipeline finished successfully."""
        ...

    def error(self, message: str) -> None:
        """Record that the pipeline failed with ``message``."""
        ...


class NullProgressSink:
    """Discard every milestone."""

    def update(self, message: str) -> None:
        """Ignore ``message``."""
        del message

    def complete(self) -> None:
        """Do nothing."""

    def error(self, message: str) -> None:
        """Ignore ``message``."""
        del message


class LoggingProgressSink:
    """Emit milestones as femtologging records."""

    def __init__(self, name: str = "ghevents.progress") -> None:
        """Log through the femtologging logger called ``name``."""
        self._logger = get_logger(name)

    def update(self, message: str) -> None:
        """Log ``message`` at INFO."""
        log_info(self._logger, "%s", message)

    def complete(self) -> None:
        """Log the completion milestone."""
        log_info(self._logger, "Completed successfully")

    def error(self, message: str) -> None:
        """Log ``message`` at ERROR."""
        log_error(self._logger, "Error: %s", message)


def report_progress(sink: ProgressSink, message: str) -> None:
    """Forward ``message`` to ``sink``, logging instead of raising on failure."""
    try:
        sink.update(message)
    except Exception as exc:  # noqa: BLE001 - progress output must not abort exports
        log_warning(logger, "progress sink failed for %r: %s", message, exc)


def report_complete(sink: ProgressSink) -> None:
    """Tell ``sink`` the export finished; sink failures are only logged."""
    try:
        sink.complete()
    except Exception as exc:  # noqa: BLE001 - progress output must not abort exports
        log_warning(logger, "progress sink failed on completion: %s", exc)


def report_error(sink: ProgressSink, message: str) -> None:
    """Tell ``sink`` the export failed with ``message``; never raises."""
    try:
        sink.error(message)
    except Exception as exc:  # noqa: BLE001 - progress output must not abort exports
        log_warning(logger, "progress sink failed for error %r: %s", message, exc)
