"""Resolve the GitHub token an export runs with."""

from __future__ import annotations

import shutil
import subprocess
import typing as typ

from ghevents.logging import get_logger, log_debug

from .errors import GitHubConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = get_logger(__name__)

TOKEN_ENV_VAR = "GITHUB_TOKEN"
_GH_TIMEOUT_S = 10.0


def _token_from_gh_cli() -> str | None:
    """Return ``gh auth token`` output, or ``None`` when gh cannot supply one."""
    gh = shutil.which("gh")
    if gh is None:
        return None
    try:
        result = subprocess.run(  # noqa: S603 - fixed argv
            [gh, "auth", "token"],
            capture_output=True,
            text=True,
            check=True,
            timeout=_GH_TIMEOUT_S,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        log_debug(logger, "gh auth token failed: %s", exc)
        return None
    return result.stdout.strip() or None


def resolve_token(
    explicit: str | None = None,
    *,
    environ: cabc.Mapping[str, str] | None = None,
    gh_lookup: cabc.Callable[[], str | None] = _token_from_gh_cli,
) -> str:
    """Return the first available token.

    Lookup order is ``explicit``, then ``GITHUB_TOKEN`` in ``environ``, then
    the GitHub CLI.

    Raises
    ------
    GitHubConfigError
        If no source yields a non-empty token.

    """
    if explicit and explicit.strip():
        return explicit.strip()

    env_token = (environ or {}).get(TOKEN_ENV_VAR, "").strip()
    if env_token:
        return env_token

    gh_token = gh_lookup()
    if gh_token:
        return gh_token

    raise GitHubConfigError.missing_token()
