from __future__ import annotations
from .core import RepositoryRecord


def owned_by(repo: RepositoryRecord, org: str) -> bool:
    """
    Returns true if ``org`` is the owner of ``repo``.  The comparison is
    case-insensitive, but neither operand is stripped, so leading or trailing
    whitespace in the org name yields a false negative.
    """
    return repo.owner.login.casefold() == org.casefold()


def printable_name(repo: RepositoryRecord, org: str) -> str:
    # Repos in ``org`` are shown by their short name, all others by their
    # fully-qualified name.
    return repo.name if owned_by(repo, org) else repo.full_name
