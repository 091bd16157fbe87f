"""Render events as XML and write size-bounded parts."""

from __future__ import annotations

from .errors import ExportWriteError
from .filesystem_sink import XmlFileSink
from .splitter import (
    event_blocks,
    part_paths,
    split_blocks,
    split_document,
    split_rendered,
)
from .xml import escape_xml, render, render_document, render_event, render_event_blocks

__all__ = [
    "ExportWriteError",
    "XmlFileSink",
    "escape_xml",
    "event_blocks",
    "part_paths",
    "render",
    "render_document",
    "render_event",
    "render_event_blocks",
    "split_blocks",
    "split_document",
    "split_rendered",
]
