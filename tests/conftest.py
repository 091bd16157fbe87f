"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from tests.helpers.progress import RecordingLogger, RecordingProgressSink


@pytest.fixture
def recording_sink() -> RecordingProgressSink:
    """Return a progress sink that remembers every milestone."""
    return RecordingProgressSink()


@pytest.fixture
def progress_warnings(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    """Capture the warnings logged when a progress sink fails."""
    logger = RecordingLogger()
    monkeypatch.setattr("ghevents.progress.logger", logger)
    return logger
