"""
Predicates for post-filtering repositories.

Each filter takes a repository and the client it was retrieved with and
returns whether the repository should be kept.  Filters are combined with
`all_of()`.
"""

from __future__ import annotations
from collections.abc import Iterable
from typing import Protocol
from .config import CODEOWNERS_PATH
from .core import NotFound, RemoteClient, RepositoryRecord
from .util import log


class RepoFilter(Protocol):
    def __call__(self, repo: RepositoryRecord, client: RemoteClient) -> bool:
        ...


def has_codeowners(repo: RepositoryRecord, client: RemoteClient) -> bool:
    try:
        client.get_file_contents(repo.full_name, CODEOWNERS_PATH)
    except NotFound:
        log.debug("%s has no %s", repo.full_name, CODEOWNERS_PATH)
        return False
    else:
        return True


FILTERS: dict[str, RepoFilter] = {
    "codeowners": has_codeowners,
}


def all_of(*filters: RepoFilter) -> RepoFilter:
    """
    Combine filters with logical AND.  They are evaluated left to right and
    evaluation stops at the first one that rejects the repository.
    """

    def combined(repo: RepositoryRecord, client: RemoteClient) -> bool:
        return all(f(repo, client) for f in filters)

    return combined


def filter_repos(
    repos: Iterable[RepositoryRecord],
    client: RemoteClient,
    filters: Iterable[RepoFilter],
) -> list[RepositoryRecord]:
    keep = all_of(*filters)
    return [repo for repo in repos if keep(repo, client)]
