"""Errors raised while talking to the GitHub GraphQL API."""

from __future__ import annotations


class GitHubAPIError(RuntimeError):
    """Raised when GitHub returns an error response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Store the message and the HTTP status code, when there is one."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int) -> GitHubAPIError:
        """Return an error for a non-2xx HTTP response."""
        return cls(f"GitHub GraphQL HTTP {status_code}", status_code=status_code)

    @classmethod
    def graphql_errors(cls, errors: object) -> GitHubAPIError:
        """Return an error for a response carrying a GraphQL ``errors`` list."""
        messages = _error_messages(errors)
        return cls(f"GitHub GraphQL errors: {messages}")

    @classmethod
    def transport(cls, exc: Exception) -> GitHubAPIError:
        """Return an error for a request that never produced a response."""
        return cls(f"GitHub GraphQL request failed: {exc}")


def _error_messages(errors: object) -> str:
    if not isinstance(errors, list):
        return str(errors)
    messages = [
        str(error.get("message", error)) if isinstance(error, dict) else str(error)
        for error in errors
    ]
    return "; ".join(messages)


class GitHubResponseShapeError(RuntimeError):
    """Raised when a GraphQL response does not have the expected shape."""

    @classmethod
    def missing(cls, field: str) -> GitHubResponseShapeError:
        """Return an error for a missing response field."""
        return cls(f"GitHub GraphQL response missing expected field: {field}")

    @classmethod
    def invalid(cls, field: str, detail: str) -> GitHubResponseShapeError:
        """Return an error for a field whose value has the wrong type."""
        return cls(f"GitHub GraphQL response has invalid {field}: {detail}")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def missing_token(cls) -> GitHubConfigError:
        """Return an error when no token could be resolved."""
        return cls(
            "No GitHub token found. Provide --github-token, set GITHUB_TOKEN, "
            "or authenticate with the gh CLI"
        )

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when the supplied token is blank."""
        return cls("GitHub token must be non-empty")
