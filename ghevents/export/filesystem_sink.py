"""Write rendered parts to the local filesystem.

Parts are written one after another. A failure stops the remaining writes;
parts already on disk are left in place.

Usage
-----
>>> import asyncio
>>> from pathlib import Path
>>> from ghevents.export.splitter import split_document
>>> sink = XmlFileSink()
>>> parts = split_document(document, max_length=500_000)
>>> paths = asyncio.run(sink.write_parts(parts, Path("ghevents.xml")))

"""

from __future__ import annotations

import asyncio
import typing as typ

from ghevents.logging import get_logger, log_info

from .errors import ExportWriteError
from .splitter import part_paths

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = get_logger(__name__)


class XmlFileSink:
    """Write document parts as UTF-8 files named after the requested output."""

    async def write_parts(
        self, parts: cabc.Sequence[str], output: Path
    ) -> list[Path]:
        """Write each part and return the paths written, in part order.

        Parameters
        ----------
        parts
            Complete documents produced by the splitter.
        output
            Requested output path. A single part is written here; several
            parts receive ``_<n>`` suffixes before the extension.

        Raises
        ------
        ExportWriteError
            If a directory or file cannot be written.

        """
        paths = part_paths(output, len(parts))
        written: list[Path] = []
        for path, content in zip(paths, parts, strict=True):
            try:
                await asyncio.to_thread(
                    path.parent.mkdir, parents=True, exist_ok=True
                )
                await asyncio.to_thread(path.write_text, content, "utf-8")
            except OSError as exc:
                raise ExportWriteError.write_failed(path, exc) from exc
            log_info(logger, "wrote %s (%d characters)", path, len(content))
            written.append(path)
        return written
