from __future__ import annotations
from collections.abc import Sequence
from .core import RemoteClient, RepositoryRecord
from .diagnostics import DiagnosticSink, default_sink
from .guard import handle_errors
from .ownership import owned_by

DONE_MARKER = "\N{THUMBS UP SIGN}"


def subscribed_repos(
    org: str, client: RemoteClient, sink: DiagnosticSink | None = None
) -> list[RepositoryRecord]:
    return handle_errors(
        client,
        lambda: [repo for repo in client.list_subscriptions() if owned_by(repo, org)],
        sink,
    )


def subscribe_all(
    repo_names: Sequence[str],
    org: str,
    client: RemoteClient,
    sink: DiagnosticSink | None = None,
) -> None:
    """
    Subscribe to each of the named repositories of ``org`` in turn.  The first
    failure is propagated and the remaining repositories are not attempted.
    """
    sink = default_sink(sink)
    sink.emit(f"Subscribing to {len(repo_names)} repos:")
    for name in repo_names:
        sink.emit(f"{name} ...")
        client.set_subscription(f"{org}/{name}", subscribed=True)
        sink.emit(f"{name} {DONE_MARKER}")


def unsubscribe_all(
    repo_names: Sequence[str],
    org: str,
    client: RemoteClient,
    sink: DiagnosticSink | None = None,
) -> None:
    sink = default_sink(sink)
    sink.emit(f"Unsubscribing from {len(repo_names)} repos:")
    for name in repo_names:
        sink.emit(f"{name} ...")
        client.delete_subscription(f"{org}/{name}")
        sink.emit(f"{name} {DONE_MARKER}")
