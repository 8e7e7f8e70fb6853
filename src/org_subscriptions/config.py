from __future__ import annotations
import os
from ghtoken import GHTokenNotFound, get_ghtoken
from pydantic import BaseModel

# Maximum number of items GitHub returns in one page of search results
SEARCH_PAGE_SIZE = 100

CODEOWNERS_PATH = ".github/CODEOWNERS"

# Environment variable naming the organization to operate on
ORG_ENV_VAR = "GITHUB_ORG"


class ConfigError(Exception):
    pass


class Settings(BaseModel):
    org: str
    token: str


def load_settings() -> Settings:
    # The org name is deliberately left unstripped; see `ownership.owned_by()`
    org = os.environ.get(ORG_ENV_VAR, "")
    if not org:
        raise ConfigError(f"${ORG_ENV_VAR} must be set to the name of an organization")
    try:
        token = get_ghtoken()
    except GHTokenNotFound as e:
        raise ConfigError(f"GitHub token not found: {e}") from e
    return Settings(org=org, token=token)
