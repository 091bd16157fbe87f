"""Repository visibility filtering for raw search nodes."""

from __future__ import annotations

import enum


class Visibility(enum.StrEnum):
    """Repository visibility an export is restricted to."""

    PUBLIC = "public"
    PRIVATE = "private"
    ALL = "all"


# GitHub reports repository visibility as an upper-case enum value.
_REQUIRED_REPOSITORY_VISIBILITY: dict[str, str] = {
    Visibility.PUBLIC: "PUBLIC",
    Visibility.PRIVATE: "PRIVATE",
}


def admit(repo_visibility: str | None, target: Visibility | str) -> bool:
    """Return whether a node from a repository with ``repo_visibility`` is kept.

    ``all`` admits every node, ``public`` and ``private`` admit only nodes
    whose repository reports exactly ``PUBLIC`` or ``PRIVATE``. Any other
    ``target`` admits nothing.

    Examples
    --------
    >>> admit("PUBLIC", "public")
    True
    >>> admit("PRIVATE", "public")
    False
    >>> admit(None, "bogus")
    False

    """
    if target == Visibility.ALL:
        return True
    required = _REQUIRED_REPOSITORY_VISIBILITY.get(str(target))
    if required is None:
        return False
    return repo_visibility == required
