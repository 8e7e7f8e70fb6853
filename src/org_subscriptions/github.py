from __future__ import annotations
from typing import Any
from ghreq import Client, PrettyHTTPError, RetryConfig
from .config import SEARCH_PAGE_SIZE
from .core import (
    CommitRecord,
    NotFound,
    RateLimitExceeded,
    RateLimitInfo,
    RemoteClient,
    RepositoryRecord,
    RepoType,
    SearchResult,
)
from .util import USER_AGENT, is_rate_limited, log


class GitHubClient(Client, RemoteClient):
    def __init__(self, token: str, **kwargs: Any) -> None:
        super().__init__(
            token=token,
            user_agent=USER_AGENT,
            # Retrying is left to whoever invokes us
            retry_config=RetryConfig(retries=0),
            **kwargs,
        )

    def request(self, method: str, path: str, *args: Any, **kwargs: Any) -> Any:
        log.debug("%s %s", method, path)
        try:
            return super().request(method, path, *args, **kwargs)
        except PrettyHTTPError as e:
            if e.response is None:
                raise
            elif e.response.status_code == 404:
                raise NotFound(f"{method} {path}: not found") from e
            elif is_rate_limited(e.response):
                raise RateLimitExceeded(f"{method} {path}: rate limit exceeded") from e
            else:
                raise

    def search_repositories(self, query: str) -> SearchResult[RepositoryRecord]:
        data = self.get(
            "/search/repositories",
            params={"q": query, "per_page": str(SEARCH_PAGE_SIZE)},
        )
        return SearchResult[RepositoryRecord].model_validate(data)

    def search_commits(
        self, query: str, sort: str, order: str, per_page: int
    ) -> SearchResult[CommitRecord]:
        data = self.get(
            "/search/commits",
            params={"q": query, "sort": sort, "order": order, "per_page": str(per_page)},
        )
        return SearchResult[CommitRecord].model_validate(data)

    def list_org_repositories(
        self, org: str, type: RepoType = RepoType.ALL
    ) -> list[RepositoryRecord]:
        return [
            RepositoryRecord.model_validate(data)
            for data in self.paginate(
                f"/orgs/{org}/repos",
                params={"type": type.value, "per_page": str(SEARCH_PAGE_SIZE)},
            )
        ]

    def list_subscriptions(self) -> list[RepositoryRecord]:
        return [
            RepositoryRecord.model_validate(data)
            for data in self.paginate(
                "/user/subscriptions", params={"per_page": str(SEARCH_PAGE_SIZE)}
            )
        ]

    def set_subscription(self, full_name: str, subscribed: bool) -> None:
        self.put(f"/repos/{full_name}/subscription", json={"subscribed": subscribed})

    def delete_subscription(self, full_name: str) -> None:
        self.delete(f"/repos/{full_name}/subscription")

    def get_file_contents(self, full_name: str, path: str) -> Any:
        return self.get(f"/repos/{full_name}/contents/{path}")

    def get_rate_limit(self) -> RateLimitInfo:
        return RateLimitInfo.model_validate(self.get("/rate_limit")["rate"])
