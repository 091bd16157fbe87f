"""XML renderer for activity events.

Renders an ordered event list as a ``<GitHubEvents>`` document with one child
element ("block") per event::

    <?xml version="1.0" encoding="UTF-8"?>
    <GitHubEvents>
      <Issue createdAt="2024-05-01T09:00:00Z" number="12" state="OPEN">
        ...
      </Issue>
    </GitHubEvents>

Each variant has its own template. Absent text renders as an empty element,
absent numbers as ``0``, and event types without a template render nothing.

Usage
-----
>>> from ghevents.events import Issue
>>> from ghevents.export.xml import render
>>> text = render([Issue(created_at="2024-05-01T09:00:00Z", title="Bug")], "asc")

"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from xml.sax.saxutils import escape

from ghevents.events.models import (
    Commit,
    Discussion,
    DiscussionComment,
    Event,
    Issue,
    IssueComment,
    PullRequest,
    PullRequestReview,
)
from ghevents.events.ordering import SortOrder, sort_events

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
ROOT_OPEN = "<GitHubEvents>"
ROOT_CLOSE = "</GitHubEvents>"

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str | None) -> str:
    """Escape ``& < > " '`` in ``value``; ``None`` becomes ``""``."""
    if not value:
        return ""
    return escape(value, _QUOTE_ENTITIES)


def _element(indent: int, tag: str, value: str | None) -> str:
    return f"{' ' * indent}<{tag}>{escape_xml(value)}</{tag}>"


def _number(indent: int, tag: str, value: int | None) -> str:
    return f"{' ' * indent}<{tag}>{value or 0}</{tag}>"


def _open_tag(tag: str, attributes: cabc.Sequence[tuple[str, object]]) -> str:
    rendered = "".join(
        f' {name}="{escape_xml(str(value))}"' for name, value in attributes
    )
    return f"  <{tag}{rendered}>"


def _render_repository(lines: list[str], event: Event) -> None:
    repository = event.repository
    lines.append("    <Repository>")
    lines.append(_element(6, "Name", repository.name if repository else None))
    lines.append(_element(6, "Owner", repository.owner if repository else None))
    lines.append(_element(6, "Url", repository.url if repository else None))
    lines.append("    </Repository>")


def _render_author(lines: list[str], event: Event) -> None:
    author = event.author
    lines.append("    <Author>")
    lines.append(_element(6, "Login", author.login if author else None))
    lines.append(_element(6, "Url", author.url if author else None))
    lines.append("    </Author>")


def _render_issue(event: Issue) -> list[str]:
    lines = [
        _open_tag(
            "Issue",
            [
                ("createdAt", event.created_at),
                ("number", event.number or 0),
                ("state", event.state or ""),
            ],
        ),
        _element(4, "Title", event.title),
        _element(4, "Body", event.body),
        _element(4, "Url", event.url),
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("    <Labels>")
    lines.extend(
        f'      <Label name="{escape_xml(label.name)}" '
        f'color="{escape_xml(label.color)}" />'
        for label in event.labels
    )
    lines.append("    </Labels>")
    lines.append("  </Issue>")
    return lines


def _render_issue_comment(event: IssueComment) -> list[str]:
    issue = event.issue
    lines = [
        _open_tag("IssueComment", [("createdAt", event.created_at)]),
        _element(4, "Body", event.body),
        _element(4, "Url", event.url),
        "    <Issue>",
        _number(6, "Number", issue.number if issue else None),
        _element(6, "Title", issue.title if issue else None),
        _element(6, "Url", issue.url if issue else None),
        "    </Issue>",
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("  </IssueComment>")
    return lines


def _render_discussion(event: Discussion) -> list[str]:
    category = event.category
    lines = [
        _open_tag("Discussion", [("createdAt", event.created_at)]),
        _element(4, "Title", event.title),
        _element(4, "Body", event.body),
        _element(4, "Url", event.url),
        "    <Category>",
        _element(6, "Name", category.name if category else None),
        "    </Category>",
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("  </Discussion>")
    return lines


def _render_discussion_comment(event: DiscussionComment) -> list[str]:
    discussion = event.discussion
    lines = [
        _open_tag("DiscussionComment", [("createdAt", event.created_at)]),
        _element(4, "Body", event.body),
        _element(4, "Url", event.url),
        "    <Discussion>",
        _element(6, "Title", discussion.title if discussion else None),
        _element(6, "Url", discussion.url if discussion else None),
        "    </Discussion>",
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("  </DiscussionComment>")
    return lines


def _render_pull_request(event: PullRequest) -> list[str]:
    lines = [
        _open_tag(
            "PullRequest",
            [
                ("createdAt", event.created_at),
                ("number", event.number or 0),
                ("state", event.state or ""),
            ],
        ),
        _element(4, "Title", event.title),
        _element(4, "Body", event.body),
        _element(4, "Url", event.url),
        _element(4, "BaseRef", event.base_ref),
        _element(4, "HeadRef", event.head_ref),
        _number(4, "ChangedFiles", event.changed_files),
        _number(4, "Additions", event.additions),
        _number(4, "Deletions", event.deletions),
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("  </PullRequest>")
    return lines


def _render_pull_request_review(event: PullRequestReview) -> list[str]:
    pull_request = event.pull_request
    lines = [
        _open_tag(
            "PullRequestReview",
            [("createdAt", event.created_at), ("state", event.state or "")],
        ),
        _element(4, "Body", event.body),
        _element(4, "Url", event.url),
        "    <PullRequest>",
        _number(6, "Number", pull_request.number if pull_request else None),
        _element(6, "Title", pull_request.title if pull_request else None),
        _element(6, "Url", pull_request.url if pull_request else None),
        "    </PullRequest>",
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("  </PullRequestReview>")
    return lines


def _render_commit(event: Commit) -> list[str]:
    lines = [
        _open_tag(
            "Commit", [("createdAt", event.created_at), ("sha", event.sha or "")]
        ),
        _element(4, "Message", event.message),
        _element(4, "Url", event.url),
        _number(4, "Additions", event.additions),
        _number(4, "Deletions", event.deletions),
        _number(4, "ChangedFiles", event.changed_files),
    ]
    _render_repository(lines, event)
    _render_author(lines, event)
    lines.append("  </Commit>")
    return lines


_RENDERERS: dict[type[Event], cabc.Callable[[typ.Any], list[str]]] = {
    Issue: _render_issue,
    IssueComment: _render_issue_comment,
    Discussion: _render_discussion,
    DiscussionComment: _render_discussion_comment,
    PullRequest: _render_pull_request,
    PullRequestReview: _render_pull_request_review,
    Commit: _render_commit,
}


def render_event(event: Event) -> str:
    """Render one event as an XML block, or ``""`` for unknown event types."""
    renderer = _RENDERERS.get(type(event))
    if renderer is None:
        return ""
    return "\n".join(renderer(event))


def render_event_blocks(
    events: cabc.Iterable[Event], order: SortOrder | str = SortOrder.ASC
) -> list[str]:
    """Sort ``events`` and render each known event as one block."""
    blocks = (render_event(event) for event in sort_events(events, order))
    return [block for block in blocks if block]


def render_document(blocks: cabc.Sequence[str]) -> str:
    """Wrap pre-rendered blocks in the XML declaration and root element."""
    return "\n".join([XML_DECLARATION, ROOT_OPEN, *blocks, ROOT_CLOSE])


def render(events: cabc.Iterable[Event], order: SortOrder | str = SortOrder.ASC) -> str:
    """Render ``events`` as a complete ``<GitHubEvents>`` document.

    Parameters
    ----------
    events
        Events in any order; they are sorted by ``created_at`` before
        rendering.
    order
        ``"asc"`` for oldest first, ``"desc"`` for newest first.

    Returns
    -------
    str
        The XML document without a trailing newline.

    """
    return render_document(render_event_blocks(events, order))
