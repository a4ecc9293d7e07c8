"""
GitHub data fetching module.

This module handles all GitHub API interactions for fetching the commits of
a range and the members of an organization using PyGithub.
"""

import logging
from typing import List, Optional

from .errors import CommitRangeError, ThanksContributorsError, classify_github_error
from .models import PlatformAuthor, RawCommit

# External libs
try:
    from github import Auth, Commit, Github, Repository
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("thanks-contributors.fetcher")


def to_raw_commit(c: Commit.Commit) -> RawCommit:
    """Map a PyGithub commit to a RawCommit."""
    git_commit = c.commit
    platform_author = None
    if c.author is not None:
        platform_author = PlatformAuthor(login=c.author.login, profile_url=c.author.html_url)

    author_name = git_commit.author.name if git_commit.author and git_commit.author.name else ""

    return RawCommit(
        message=git_commit.message or "",
        commit_author_name=author_name,
        platform_author=platform_author,
    )


class GitHubFetcher:
    """
    Fetch commit ranges and organization members from GitHub using PyGithub.

    Every failure is translated into a ThanksContributorsError subclass,
    chained to the original PyGithub or requests exception.

    Args:
        token: Personal access token.
        timeout: Request timeout in seconds.
        per_page: Page size used for paginated endpoints.
    """

    def __init__(self, token: str, timeout: int = 15, per_page: int = 100,
                 client: Optional[Github] = None) -> None:
        if client is not None:
            self._g = client
            return
        try:
            self._g = Github(auth=Auth.Token(token), timeout=timeout, per_page=per_page)
            logger.debug("GitHub client initialized (timeout=%ds, per_page=%d)", timeout, per_page)
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise classify_github_error(e) from e

    def _get_repo(self, owner: str, repo_name: str) -> Repository.Repository:
        return self._g.get_repo(f"{owner}/{repo_name}")

    def fetch_commits(self, owner: str, repo_name: str, base: str, head: str) -> List[RawCommit]:
        """
        Fetch the commits between base and head with the compare API.

        The compare API returns at most 250 commits; use
        ``fetch_commits_by_date`` for larger ranges.

        Raises:
            ThanksContributorsError: If the range cannot be fetched
        """
        logger.info("Comparing %s...%s in %s/%s", base, head, owner, repo_name)
        try:
            comparison = self._get_repo(owner, repo_name).compare(base, head)
            result = [to_raw_commit(c) for c in comparison.commits]
        except Exception as e:
            logger.error("Failed to compare %s...%s for %s/%s: %s", base, head, owner, repo_name, e)
            raise classify_github_error(e) from e

        logger.info("Fetched %d commits from %s/%s", len(result), owner, repo_name)
        return result

    def fetch_commits_by_date(self, owner: str, repo_name: str, base: str, head: str) -> List[RawCommit]:
        """
        Fetch the commits authored between the dates of base and head.

        Dates of the boundary commits are not always exact, so the result
        can differ slightly from ``fetch_commits``.

        Raises:
            CommitRangeError: If the date of base or head cannot be resolved
            ThanksContributorsError: If the commits cannot be fetched
        """
        try:
            repo = self._get_repo(owner, repo_name)
            since = self._commit_date(repo, base)
            until = self._commit_date(repo, head)
            if since is None or until is None:
                raise CommitRangeError(
                    f"Couldn't get the date of {base if since is None else head} "
                    f"in {owner}/{repo_name}"
                )

            logger.info("Listing commits of %s/%s from %s to %s", owner, repo_name, since, until)
            result = [to_raw_commit(c) for c in repo.get_commits(since=since, until=until)]
        except ThanksContributorsError:
            raise
        except Exception as e:
            logger.error("Failed to list commits for %s/%s: %s", owner, repo_name, e)
            raise classify_github_error(e) from e

        logger.info("Fetched %d commits from %s/%s", len(result), owner, repo_name)
        return result

    @staticmethod
    def _commit_date(repo: Repository.Repository, ref: str):
        git_commit = repo.get_commit(ref).commit
        if git_commit.author is None:
            return None
        return git_commit.author.date

    def fetch_org_members(self, owner: str) -> List[str]:
        """
        Fetch the logins of all members of an organization.

        Raises:
            ThanksContributorsError: If the member list cannot be fetched
        """
        try:
            members = [m.login for m in self._g.get_organization(owner).get_members()]
        except Exception as e:
            logger.error("Failed to fetch members of %s: %s", owner, e)
            raise classify_github_error(e) from e

        logger.info("Fetched %d members of %s", len(members), owner)
        return members
