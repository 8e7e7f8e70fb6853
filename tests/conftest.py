from __future__ import annotations
from unittest.mock import Mock
import pytest
from org_subscriptions.core import RemoteClient, RepositoryRecord, SearchResult
from org_subscriptions.diagnostics import BufferSink


def make_repo(full_name: str) -> RepositoryRecord:
    owner, _, name = full_name.partition("/")
    return RepositoryRecord.model_validate(
        {"full_name": full_name, "name": name, "owner": {"login": owner}}
    )


def make_search_result(total_count: int, n_items: int, org: str = "acme") -> SearchResult:
    return SearchResult[RepositoryRecord](
        total_count=total_count,
        items=[make_repo(f"{org}/repo{i}") for i in range(n_items)],
    )


@pytest.fixture
def client() -> Mock:
    return Mock(spec=RemoteClient)


@pytest.fixture
def sink() -> BufferSink:
    return BufferSink()
