from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class RemoteError(Exception):
    """Base class for failures reported by a `RemoteClient`"""


class RateLimitExceeded(RemoteError):
    pass


class NotFound(RemoteError):
    pass


class RepoType(str, Enum):
    """Values accepted by the ``type`` filter when listing an org's repos"""

    ALL = "all"
    PUBLIC = "public"
    PRIVATE = "private"
    FORKS = "forks"
    SOURCES = "sources"
    MEMBER = "member"


class Owner(BaseModel, frozen=True):
    login: str


class RepositoryRecord(BaseModel, frozen=True):
    full_name: str
    name: str
    owner: Owner


class GitActor(BaseModel, frozen=True):
    name: str
    date: datetime


class CommitDetails(BaseModel, frozen=True):
    message: str
    author: GitActor


class CommitRecord(BaseModel, frozen=True):
    sha: str
    html_url: str
    commit: CommitDetails


class SearchResult(BaseModel, Generic[T]):
    total_count: int
    items: list[T]


class RateLimitInfo(BaseModel):
    limit: int
    remaining: int
    reset: datetime
    used: int | None = None


class RemoteClient(ABC):
    """
    The operations on the hosting provider that repository discovery and
    subscription management rely on.

    Pagination is not symmetric between operations, and implementations must
    honor the two flags below:

    - `list_org_repositories()` returns *every* matching repository.  Whether
      the provider's pagination actually delivers all pages is the
      implementation's responsibility and has not been verified for every
      provider API.
    - `search_repositories()` returns only the first page of results;
      callers detect truncation by comparing ``total_count`` with the number
      of items.
    """

    ORG_LISTING_COMPLETE: ClassVar[bool] = True
    SEARCH_SINGLE_PAGE: ClassVar[bool] = True

    @abstractmethod
    def search_repositories(self, query: str) -> SearchResult[RepositoryRecord]:
        ...

    @abstractmethod
    def search_commits(
        self, query: str, sort: str, order: str, per_page: int
    ) -> SearchResult[CommitRecord]:
        ...

    @abstractmethod
    def list_org_repositories(
        self, org: str, type: RepoType = RepoType.ALL
    ) -> list[RepositoryRecord]:
        ...

    @abstractmethod
    def list_subscriptions(self) -> list[RepositoryRecord]:
        ...

    @abstractmethod
    def set_subscription(self, full_name: str, subscribed: bool) -> None:
        """Raises `NotFound` if the repository does not exist"""
        ...

    @abstractmethod
    def delete_subscription(self, full_name: str) -> None:
        ...

    @abstractmethod
    def get_file_contents(self, full_name: str, path: str) -> Any:
        """Raises `NotFound` if there is no file at ``path``"""
        ...

    @abstractmethod
    def get_rate_limit(self) -> RateLimitInfo:
        ...
