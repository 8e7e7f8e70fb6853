from __future__ import annotations
from .config import SEARCH_PAGE_SIZE
from .core import (
    CommitRecord,
    RemoteClient,
    RepositoryRecord,
    RepoType,
    SearchResult,
)
from .diagnostics import DiagnosticSink, default_sink
from .guard import handle_errors
from .util import log


def is_truncated(result: SearchResult) -> bool:
    """
    Returns true if a search hit the page size limit and reports more matches
    than it returned
    """
    return (
        result.total_count > SEARCH_PAGE_SIZE
        and len(result.items) == SEARCH_PAGE_SIZE
    )


def all_org_repos(
    org: str, client: RemoteClient, type: RepoType | str = RepoType.ALL
) -> list[RepositoryRecord]:
    type = RepoType(type)
    log.debug("Listing %s repositories of %s", type.value, org)
    return client.list_org_repositories(org, type)


def org_repos_for_topic(
    org: str, client: RemoteClient, topic: str, sink: DiagnosticSink | None = None
) -> list[RepositoryRecord]:
    # Only the first page of search results is retrieved.  If more than one
    # page of repos has the topic, a warning is emitted and the rest are
    # silently left out.
    sink = default_sink(sink)
    sink.emit(f"Retrieving list of {org} repos with topic {topic} ...")
    result = client.search_repositories(f"user:{org} topic:{topic}")
    sink.emit(f"{len(result.items)} repos found")
    if is_truncated(result):
        sink.emit(
            "Warning! There may be additional matching repos that weren't retrieved!"
        )
    return result.items


def org_repos(
    org: str,
    client: RemoteClient,
    topic: str | None = None,
    type: RepoType | str = RepoType.ALL,
    sink: DiagnosticSink | None = None,
) -> list[RepositoryRecord]:
    if not topic:
        return handle_errors(client, lambda: all_org_repos(org, client, type), sink)
    else:
        return handle_errors(
            client, lambda: org_repos_for_topic(org, client, topic, sink), sink
        )


def first_commit(full_name: str, client: RemoteClient) -> CommitRecord | None:
    """Returns the oldest commit in a repository, or `None` if it has none"""
    # A commit search may not have ``repo:`` as its only criterion, hence the
    # ``merge:false``.
    result = client.search_commits(
        f"repo:{full_name} merge:false", sort="author-date", order="asc", per_page=1
    )
    return result.items[0] if result.items else None
