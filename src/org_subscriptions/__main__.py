from __future__ import annotations
from collections.abc import Iterator
from contextlib import contextmanager
import logging
import sys
import click
from click_loglevel import LogLevel
from .config import ConfigError, Settings, load_settings
from .core import RemoteError, RepoType
from .diagnostics import ConsoleSink
from .filters import FILTERS, filter_repos
from .finder import first_commit, org_repos
from .github import GitHubClient
from .ownership import printable_name
from .subscriptions import subscribe_all, subscribed_repos, unsubscribe_all
from .util import read_repo_names


@contextmanager
def session() -> Iterator[tuple[Settings, GitHubClient]]:
    try:
        settings = load_settings()
    except ConfigError as e:
        raise click.UsageError(str(e))
    try:
        with GitHubClient(settings.token) as client:
            yield (settings, client)
    except RemoteError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option(
    "-l",
    "--log-level",
    type=LogLevel(),
    default=logging.WARNING,
    help="Set logging level  [default: WARNING]",
)
def main(log_level: int) -> None:
    """Find and subscribe to the repositories of a GitHub organization"""
    logging.basicConfig(
        format="%(asctime)s [%(levelname)-8s] %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        level=log_level,
    )


@main.command()
@click.argument("topic")
def subscribe(topic: str) -> None:
    """
    Subscribe to the organization's repositories with the given topic.

    If TOPIC is "-", the names of the repositories are instead read from
    standard input, one per line.
    """
    if not topic:
        raise click.UsageError(
            "The topic must be either a topic or - to read a list of repos from stdin."
        )
    repo_names: list[str] | None
    if topic == "-":
        repo_names = read_repo_names(sys.stdin)
        if not repo_names:
            raise click.UsageError(
                "If the topic is - you must supply a list of repos via stdin."
            )
    else:
        repo_names = None
    sink = ConsoleSink()
    with session() as (settings, client):
        if repo_names is None:
            repo_names = [
                repo.name
                for repo in org_repos(settings.org, client, topic=topic, sink=sink)
            ]
        if not repo_names:
            click.echo("No repos, nothing to do.", err=True)
            return
        subscribe_all(repo_names, settings.org, client, sink)


@main.command()
def unsubscribe() -> None:
    """Unsubscribe from the repositories named on standard input"""
    repo_names = read_repo_names(sys.stdin)
    if not repo_names:
        click.echo("No repos, nothing to do.", err=True)
        return
    with session() as (settings, client):
        unsubscribe_all(repo_names, settings.org, client, ConsoleSink())


@main.command()
def subscribed() -> None:
    """List the organization's repositories that you are subscribed to"""
    with session() as (settings, client):
        for repo in subscribed_repos(settings.org, client, ConsoleSink()):
            click.echo(printable_name(repo, settings.org))


@main.command()
@click.option("-t", "--topic", help="Only list repositories with this topic")
@click.option(
    "--type",
    "repo_type",
    type=click.Choice([t.value for t in RepoType]),
    default=RepoType.ALL.value,
    show_default=True,
    help="Which of the organization's repositories to list",
)
@click.option(
    "-f",
    "--filter",
    "filter_names",
    type=click.Choice(list(FILTERS)),
    multiple=True,
    help="Only list repositories passing this filter.  Can be given multiple times.",
)
def repos(topic: str | None, repo_type: str, filter_names: tuple[str, ...]) -> None:
    """List the organization's repositories"""
    sink = ConsoleSink()
    with session() as (settings, client):
        found = org_repos(
            settings.org, client, topic=topic, type=RepoType(repo_type), sink=sink
        )
        found = filter_repos(found, client, [FILTERS[name] for name in filter_names])
        for repo in found:
            click.echo(printable_name(repo, settings.org))


@main.command("first-commit")
@click.argument("repo")
def first_commit_cmd(repo: str) -> None:
    """
    Show the oldest commit in a repository.

    REPO is resolved against the organization unless it contains a slash.
    """
    with session() as (settings, client):
        full_name = repo if "/" in repo else f"{settings.org}/{repo}"
        commit = first_commit(full_name, client)
        if commit is None:
            click.echo(f"No commits found in {full_name}", err=True)
        else:
            click.echo(f"{commit.sha} {commit.commit.author.date} {commit.html_url}")


if __name__ == "__main__":
    main()
