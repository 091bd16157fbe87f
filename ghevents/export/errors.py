"""Export errors."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class ExportWriteError(RuntimeError):
    """Raised when a rendered part cannot be written to disk."""

    def __init__(self, message: str, *, path: Path) -> None:
        """Store the message and the path that failed."""
        self.path = path
        super().__init__(message)

    @classmethod
    def write_failed(cls, path: Path, exc: OSError) -> ExportWriteError:
        """Return an error for an ``OSError`` raised while writing ``path``."""
        reason = exc.strerror or str(exc)
        return cls(f"Failed to write {path}: {reason}", path=path)
