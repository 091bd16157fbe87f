"""GraphQL documents for the five activity searches.

Each search document takes the same variables: ``$searchQuery`` (the GitHub
search string built in Python), ``$first`` (page size) and ``$after`` (the
pagination cursor). Sub-record connections (comments, reviews) request a
single page of 100 per parent; there is no inner pagination.
"""

from __future__ import annotations

VIEWER_QUERY = """
query {
  viewer {
    login
    url
  }
}
"""

_REPOSITORY_FIELDS = """
        repository {
          name
          owner { login }
          url
          visibility
        }
"""

ISSUES_QUERY = (
    """
query($searchQuery: String!, $first: Int!, $after: String) {
  search(query: $searchQuery, type: ISSUE, first: $first, after: $after) {
    pageInfo {
      hasNextPage
      endCursor
    }
    nodes {
      ... on Issue {
        number
        title
        body
        url
        state
        createdAt
        labels(first: 10) {
          nodes {
            name
            color
          }
        }
        author {
          login
          url
        }
"""
    + _REPOSITORY_FIELDS
    + """
      }
    }
  }
}
"""
)

ISSUE_COMMENTS_QUERY = (
    """
query($searchQuery: String!, $first: Int!, $after: String) {
  search(query: $searchQuery, type: ISSUE, first: $first, after: $after) {
    pageInfo {
      hasNextPage
      endCursor
    }
    nodes {
      ... on Issue {
        number
        title
        url
        comments(first: 100) {
          nodes {
            body
            url
            createdAt
            author {
              login
              url
            }
          }
        }
"""
    + _REPOSITORY_FIELDS
    + """
      }
    }
  }
}
"""
)

PULL_REQUESTS_QUERY = (
    """
query($searchQuery: String!, $first: Int!, $after: String) {
  search(query: $searchQuery, type: ISSUE, first: $first, after: $after) {
    pageInfo {
      hasNextPage
      endCursor
    }
    nodes {
      ... on PullRequest {
        number
        title
        body
        url
        state
        createdAt
        baseRefName
        headRefName
        changedFiles
        additions
        deletions
        author {
          login
          url
        }
"""
    + _REPOSITORY_FIELDS
    + """
      }
    }
  }
}
"""
)

PULL_REQUEST_REVIEWS_QUERY = (
    """
query($searchQuery: String!, $first: Int!, $after: String) {
  search(query: $searchQuery, type: ISSUE, first: $first, after: $after) {
    pageInfo {
      hasNextPage
      endCursor
    }
    nodes {
      ... on PullRequest {
        number
        title
        url
        reviews(first: 100) {
          nodes {
            state
            body
            url
            createdAt
            author {
              login
              url
            }
          }
        }
"""
    + _REPOSITORY_FIELDS
    + """
      }
    }
  }
}
"""
)

COMMITS_QUERY = (
    """
query($searchQuery: String!, $first: Int!, $after: String) {
  search(query: $searchQuery, type: COMMIT, first: $first, after: $after) {
    pageInfo {
      hasNextPage
      endCursor
    }
    nodes {
      ... on Commit {
        oid
        message
        url
        additions
        deletions
        changedFiles
        committedDate
        author {
          user {
            login
            url
          }
        }
"""
    + _REPOSITORY_FIELDS
    + """
      }
    }
  }
}
"""
)


def issues_search(username: str, since: str, until: str) -> str:
    """Return the search string for issues opened by ``username``."""
    return f"author:{username} is:issue created:{since}..{until}"


def issue_comments_search(username: str, since: str, until: str) -> str:
    """Return the search string for issues ``username`` commented on."""
    return f"commenter:{username} is:issue created:{since}..{until}"


def pull_requests_search(username: str, since: str, until: str) -> str:
    """Return the search string for pull requests opened by ``username``."""
    return f"author:{username} is:pr created:{since}..{until}"


def pull_request_reviews_search(username: str, since: str, until: str) -> str:
    """Return the search string for pull requests ``username`` reviewed."""
    return f"reviewed-by:{username} is:pr created:{since}..{until}"


def commits_search(username: str, since: str, until: str) -> str:
    """Return the search string for commits authored by ``username``."""
    return f"author:{username} author-date:{since}..{until}"
