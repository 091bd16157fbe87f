"""Split a rendered event document into size-bounded, standalone parts.

Parts are built from whole event blocks, never from fragments of one. Every
part repeats the XML declaration and the root element, so each one parses on
its own. A part that would exceed ``max_length`` is closed before the next
block is added, except when it holds no block yet: an event larger than the
limit gets a part to itself rather than being dropped or truncated.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .xml import ROOT_CLOSE, ROOT_OPEN, XML_DECLARATION, render_document

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_PART_HEADER = f"{XML_DECLARATION}\n{ROOT_OPEN}\n"
# Declaration, root open and root close plus the newlines joining them.
_PART_OVERHEAD = len(_PART_HEADER) + len(ROOT_CLOSE)
_BLOCK_START = "  <"


def _ensure_positive(max_length: int) -> None:
    if max_length < 1:
        msg = f"max_length must be positive, got: {max_length}"
        raise ValueError(msg)


def event_blocks(document: str) -> list[str]:
    """Recover the event blocks of a document produced by ``render``.

    A block starts at each line indented by exactly two spaces that opens an
    element. Field text is escaped, so ``<`` never starts a line inside one.
    """
    lines = document.split("\n")
    body = [
        line
        for line in lines
        if line not in {XML_DECLARATION, ROOT_OPEN, ROOT_CLOSE}
    ]
    blocks: list[list[str]] = []
    for line in body:
        starts_block = line.startswith(_BLOCK_START) and not line.startswith("  </")
        if starts_block or not blocks:
            blocks.append([line])
        else:
            blocks[-1].append(line)
    return ["\n".join(block) for block in blocks if any(block)]


def split_blocks(blocks: cabc.Sequence[str], max_length: int) -> list[str]:
    """Pack ``blocks`` greedily into documents of at most ``max_length``.

    Parameters
    ----------
    blocks
        Rendered event elements in output order.
    max_length
        Upper bound on the characters in each part. Parts holding a single
        oversized block are the only ones allowed to exceed it.

    Returns
    -------
    list[str]
        At least one part, each a complete XML document. With no blocks the
        single part is an empty root element.

    """
    _ensure_positive(max_length)
    parts: list[str] = []
    current: list[str] = []
    current_length = _PART_OVERHEAD
    for block in blocks:
        block_length = len(block) + 1
        if current and current_length + block_length > max_length:
            parts.append(render_document(current))
            current = []
            current_length = _PART_OVERHEAD
        current.append(block)
        current_length += block_length
    parts.append(render_document(current))
    return parts


def split_rendered(blocks: cabc.Sequence[str], max_length: int) -> list[str]:
    """Return the document for ``blocks`` as one part, or split it if too long."""
    _ensure_positive(max_length)
    document = render_document(blocks)
    if len(document) <= max_length:
        return [document]
    return split_blocks(blocks, max_length)


def split_document(document: str, max_length: int) -> list[str]:
    """Split ``document`` into standalone parts of at most ``max_length``.

    A document that already fits is returned unchanged as the only part.
    """
    _ensure_positive(max_length)
    if len(document) <= max_length:
        return [document]
    return split_blocks(event_blocks(document), max_length)


def part_paths(output: Path, count: int) -> list[Path]:
    """Return the file name for each of ``count`` parts.

    One part keeps ``output``; several become ``<stem>_1<suffix>``,
    ``<stem>_2<suffix>`` and so on beside it.

    Examples
    --------
    >>> [p.name for p in part_paths(Path("out/events.xml"), 2)]
    ['events_1.xml', 'events_2.xml']

    """
    if count <= 1:
        return [output]
    return [
        output.with_name(f"{output.stem}_{index}{output.suffix}")
        for index in range(1, count + 1)
    ]
