"""Tests for the GitHub REST API binding"""

from datetime import datetime, timezone
from unittest.mock import patch
from ghreq import Client, PrettyHTTPError
import pytest
import requests
from org_subscriptions.core import (
    CommitRecord,
    NotFound,
    RateLimitExceeded,
    RemoteClient,
    RepositoryRecord,
    RepoType,
)
from org_subscriptions.github import GitHubClient


def make_error(status: int, body: str = "", **headers: str) -> PrettyHTTPError:
    r = requests.Response()
    r.status_code = status
    r._content = body.encode("utf-8")
    r.headers.update(headers)
    return PrettyHTTPError(f"{status} error", response=r)


def repo_data(full_name: str) -> dict:
    owner, _, name = full_name.partition("/")
    return {
        "id": 1,
        "full_name": full_name,
        "name": name,
        "owner": {"login": owner, "id": 2},
        "html_url": f"https://github.com/{full_name}",
    }


@pytest.fixture
def gh() -> GitHubClient:
    return GitHubClient(token="test")


def test_flags() -> None:
    assert GitHubClient.ORG_LISTING_COMPLETE
    assert GitHubClient.SEARCH_SINGLE_PAGE
    assert issubclass(GitHubClient, RemoteClient)


class TestErrorTranslation:
    def test_not_found(self, gh):
        err = make_error(404, '{"message": "Not Found"}')
        with patch.object(Client, "request", side_effect=err):
            with pytest.raises(NotFound) as excinfo:
                gh.request("GET", "/repos/acme/a/contents/.github/CODEOWNERS")
        assert excinfo.value.__cause__ is err

    @pytest.mark.parametrize(
        "status,body,headers",
        [
            (403, '{"message": "API rate limit exceeded"}', {}),
            (403, "{}", {"x-ratelimit-remaining": "0"}),
            (429, '{"message": "You have exceeded a secondary rate limit"}', {}),
        ],
    )
    def test_rate_limited(self, gh, status, body, headers):
        err = make_error(status, body, **headers)
        with patch.object(Client, "request", side_effect=err):
            with pytest.raises(RateLimitExceeded):
                gh.request("GET", "/search/repositories")

    def test_other_errors_unchanged(self, gh):
        err = make_error(403, '{"message": "Resource not accessible by integration"}')
        with patch.object(Client, "request", side_effect=err):
            with pytest.raises(PrettyHTTPError) as excinfo:
                gh.request("PUT", "/repos/acme/a/subscription")
        assert excinfo.value is err


class TestOperations:
    def test_search_repositories(self, gh):
        data = {
            "total_count": 250,
            "incomplete_results": False,
            "items": [repo_data("acme/a"), repo_data("acme/b")],
        }
        with patch.object(gh, "get", return_value=data) as m:
            result = gh.search_repositories("user:acme topic:docs")
        m.assert_called_once_with(
            "/search/repositories",
            params={"q": "user:acme topic:docs", "per_page": "100"},
        )
        assert result.total_count == 250
        assert [r.full_name for r in result.items] == ["acme/a", "acme/b"]

    def test_list_org_repositories(self, gh):
        with patch.object(
            gh, "paginate", return_value=iter([repo_data("acme/a")])
        ) as m:
            repos = gh.list_org_repositories("acme", RepoType.PUBLIC)
        m.assert_called_once_with(
            "/orgs/acme/repos", params={"type": "public", "per_page": "100"}
        )
        assert repos == [
            RepositoryRecord.model_validate(
                {"full_name": "acme/a", "name": "a", "owner": {"login": "acme"}}
            )
        ]

    def test_set_subscription(self, gh):
        with patch.object(gh, "put") as m:
            gh.set_subscription("acme/a", subscribed=True)
        m.assert_called_once_with(
            "/repos/acme/a/subscription", json={"subscribed": True}
        )

    def test_search_commits(self, gh):
        data = {
            "total_count": 12,
            "incomplete_results": False,
            "items": [
                {
                    "sha": "abc123",
                    "html_url": "https://github.com/acme/a/commit/abc123",
                    "commit": {
                        "message": "Initial commit",
                        "author": {
                            "name": "J. Doe",
                            "email": "jdoe@example.com",
                            "date": "2020-01-01T00:00:00Z",
                        },
                    },
                    "repository": repo_data("acme/a"),
                }
            ],
        }
        with patch.object(gh, "get", return_value=data) as m:
            result = gh.search_commits(
                "repo:acme/a merge:false", sort="author-date", order="asc", per_page=1
            )
        m.assert_called_once_with(
            "/search/commits",
            params={
                "q": "repo:acme/a merge:false",
                "sort": "author-date",
                "order": "asc",
                "per_page": "1",
            },
        )
        assert result.total_count == 12
        assert len(result.items) == 1
        commit = result.items[0]
        assert isinstance(commit, CommitRecord)
        assert commit.sha == "abc123"
        assert commit.commit.author.name == "J. Doe"
        assert commit.commit.author.date == datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_list_subscriptions(self, gh):
        with patch.object(
            gh,
            "paginate",
            return_value=iter([repo_data("acme/a"), repo_data("globex/b")]),
        ) as m:
            repos = gh.list_subscriptions()
        m.assert_called_once_with("/user/subscriptions", params={"per_page": "100"})
        assert [r.full_name for r in repos] == ["acme/a", "globex/b"]
        assert repos[1].owner.login == "globex"

    def test_get_file_contents(self, gh):
        data = {"type": "file", "name": "CODEOWNERS", "path": ".github/CODEOWNERS"}
        with patch.object(gh, "get", return_value=data) as m:
            assert gh.get_file_contents("acme/a", ".github/CODEOWNERS") == data
        m.assert_called_once_with("/repos/acme/a/contents/.github/CODEOWNERS")

    def test_delete_subscription(self, gh):
        with patch.object(gh, "delete") as m:
            gh.delete_subscription("acme/a")
        m.assert_called_once_with("/repos/acme/a/subscription")

    def test_get_rate_limit(self, gh):
        data = {
            "resources": {},
            "rate": {"limit": 5000, "remaining": 0, "reset": 1760000000, "used": 5000},
        }
        with patch.object(gh, "get", return_value=data):
            rate = gh.get_rate_limit()
        assert rate.limit == 5000
        assert rate.remaining == 0
        assert int(rate.reset.timestamp()) == 1760000000
