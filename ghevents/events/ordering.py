"""Chronological ordering of activity events."""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from .models import Event


class SortOrder(enum.StrEnum):
    """Direction events are listed in."""

    ASC = "asc"
    DESC = "desc"


def _event_sort_key(event: Event) -> dt.datetime:
    return event.occurred_at


def sort_events(
    events: cabc.Iterable[Event], order: SortOrder | str = SortOrder.ASC
) -> list[Event]:
    """Return ``events`` ordered by their parsed ``created_at`` timestamp.

    The sort is stable in both directions: events sharing a timestamp keep
    their relative input order.
    """
    direction = SortOrder(order)
    return sorted(
        events,
        key=_event_sort_key,
        reverse=direction is SortOrder.DESC,
    )
