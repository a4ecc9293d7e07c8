"""
Commit-to-changelog pipeline.

Ties the parser, the contributor filter, the grouper and the generator
together. Everything here works on data that has already been fetched.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .config import ChangelogConfig
from .errors import EmptyCommitRangeError
from .generator import ChangelogGenerator
from .grouper import ContributorFilter, group_by_author
from .models import Entry, RawCommit
from .parser import EntryBuilder

logger = logging.getLogger("thanks-contributors.pipeline")


def collect_entries(commits: Iterable[RawCommit], org_members: Iterable[str],
                    config: ChangelogConfig) -> List[Entry]:
    """
    Build entries for the commits and drop those from excluded authors.

    Args:
        commits: Commits of the range, in API order
        org_members: Logins of the organization's members
        config: Run configuration (excludes and include flag)

    Returns:
        Surviving entries in commit order
    """
    entries = [EntryBuilder.build(c) for c in commits]
    contributor_filter = ContributorFilter(
        include_all=config.include_org_members,
        excludes=config.excludes,
        org_members=org_members,
    )
    kept = contributor_filter.apply(entries)
    logger.debug("Kept %d of %d entries", len(kept), len(entries))
    return kept


def build_changelog(commits: Sequence[RawCommit], org_members: Iterable[str],
                    config: ChangelogConfig, base: Optional[str] = None,
                    head: Optional[str] = None) -> str:
    """
    Turn the commits of a range into the markdown changelog.

    Raises:
        EmptyCommitRangeError: If ``commits`` is empty
    """
    if not commits:
        raise EmptyCommitRangeError(base, head)

    entries = collect_entries(commits, org_members, config)
    grouped = group_by_author(entries)
    logger.info("Rendering %d entries from %d contributors", len(entries), len(grouped))

    generator = ChangelogGenerator(config.owner, config.repo, host=config.host)
    return generator.generate_markdown(grouped)
