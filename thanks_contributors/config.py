"""
Configuration for a changelog run.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger("thanks-contributors.config")

# Both spellings used by the Renovate bot
DEFAULT_EXCLUDES: Tuple[str, ...] = ("renovate[bot]", "renovate-bot")
DEFAULT_OWNER = "gatsbyjs"
DEFAULT_REPO = "gatsby"
TOKEN_ENV_VAR = "GITHUB_ACCESS_TOKEN"


@dataclass
class ChangelogConfig:
    """Options that control which contributors are listed and how links are built."""
    owner: str = DEFAULT_OWNER
    repo: str = DEFAULT_REPO
    include_org_members: bool = False
    excludes: Tuple[str, ...] = field(default=DEFAULT_EXCLUDES)
    host: str = "github.com"


def load_token(token: Optional[str] = None, env_file: Optional[str] = None) -> str:
    """
    Resolve the GitHub access token.

    An explicit token wins; otherwise ``GITHUB_ACCESS_TOKEN`` is read after
    loading ``.env`` (or ``env_file``) into the environment.

    Raises:
        ConfigurationError: If no token is available
    """
    if token:
        return token

    loaded = load_dotenv(env_file) if env_file else load_dotenv()
    logger.debug(".env loaded: %s", loaded)

    token = os.environ.get(TOKEN_ENV_VAR)
    if not token:
        raise ConfigurationError(f"{TOKEN_ENV_VAR} env var not set")
    return token
