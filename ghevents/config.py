"""Export configuration and option validation.

Usage
-----
Build a configuration from raw option values:

>>> config = ExportConfig.from_options(since="2024-01-01", until="2024-02-01")
>>> config.validate()
>>> config.visibility
'public'

"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
from pathlib import Path

from ghevents.common.time import parse_timestamp, utcnow
from ghevents.events.ordering import SortOrder
from ghevents.github.visibility import Visibility

DEFAULT_OUTPUT = Path("./ghevents.xml")
DEFAULT_WINDOW = dt.timedelta(days=14)
DEFAULT_MAX_LENGTH = 500_000


class ExportConfigError(ValueError):
    """Raised when export options are invalid."""

    @classmethod
    def invalid_date(cls, option: str, raw: str) -> ExportConfigError:
        """Return an error for a date option that does not parse."""
        return cls(
            f"Invalid {option} date format {raw!r}. "
            "Use ISO8601 format (e.g., 2023-01-01T00:00:00Z)"
        )

    @classmethod
    def invalid_choice(
        cls, option: str, choices: tuple[str, ...]
    ) -> ExportConfigError:
        """Return an error for an option outside its allowed values."""
        return cls(f"{option} must be one of: {', '.join(choices)}")


def _parse_option_date(
    option: str, raw: str | None, default: dt.datetime
) -> dt.datetime:
    if raw is None or not raw.strip():
        return default
    try:
        return parse_timestamp(raw)
    except ValueError as exc:
        raise ExportConfigError.invalid_date(option, raw) from exc


@dc.dataclass(frozen=True, slots=True)
class ExportConfig:
    """Options for a single export run.

    Attributes
    ----------
    since
        Start of the activity window (inclusive, aware UTC).
    until
        End of the activity window (inclusive, aware UTC).
    output
        Requested output path; split exports add ``_<n>`` suffixes.
    visibility
        ``public``, ``private`` or ``all`` repositories.
    max_length
        Maximum characters per written file.
    order
        ``asc`` for oldest first, ``desc`` for newest first.
    username
        Login to export; ``None`` means the token's owner.

    """

    since: dt.datetime
    until: dt.datetime
    output: Path = DEFAULT_OUTPUT
    visibility: str = Visibility.PUBLIC.value
    max_length: int = DEFAULT_MAX_LENGTH
    order: str = SortOrder.ASC.value
    username: str | None = None

    @classmethod
    def from_options(  # noqa: PLR0913 - mirrors the CLI options
        cls,
        *,
        since: str | None = None,
        until: str | None = None,
        output: Path | str = DEFAULT_OUTPUT,
        visibility: str = Visibility.PUBLIC.value,
        max_length: int = DEFAULT_MAX_LENGTH,
        order: str = SortOrder.ASC.value,
        username: str | None = None,
        now: dt.datetime | None = None,
    ) -> ExportConfig:
        """Parse raw option values, applying the default two-week window.

        Raises
        ------
        ExportConfigError
            If ``since`` or ``until`` is not an ISO 8601 timestamp.

        """
        reference = now or utcnow()
        return cls(
            since=_parse_option_date("--since", since, reference - DEFAULT_WINDOW),
            until=_parse_option_date("--until", until, reference),
            output=Path(output),
            visibility=visibility.strip().lower(),
            max_length=max_length,
            order=order.strip().lower(),
            username=username.strip() if username and username.strip() else None,
        )

    def validate(self) -> None:
        """Check option combinations the pipeline relies on.

        Raises
        ------
        ExportConfigError
            If the window is empty or reversed, or an option is out of range.

        """
        if self.since >= self.until:
            msg = "--since date must be before --until date"
            raise ExportConfigError(msg)
        visibilities = tuple(member.value for member in Visibility)
        if self.visibility not in visibilities:
            raise ExportConfigError.invalid_choice("--visibility", visibilities)
        if self.max_length <= 0:
            msg = "--max-length must be a positive number"
            raise ExportConfigError(msg)
        orders = tuple(member.value for member in SortOrder)
        if self.order not in orders:
            raise ExportConfigError.invalid_choice("--order", orders)
