"""
thanks-contributors - Generate a markdown list of the contributors between two commits.
"""

from .models import Entry, ParsedSummary, PlatformAuthor, RawCommit
from .parser import CommitParser, EntryBuilder
from .grouper import ContributorFilter, group_by_author, keep
from .generator import ChangelogGenerator, get_pr_link, render
from .config import ChangelogConfig, DEFAULT_EXCLUDES
from .pipeline import build_changelog, collect_entries

__all__ = [
    'Entry',
    'ParsedSummary',
    'PlatformAuthor',
    'RawCommit',
    'CommitParser',
    'EntryBuilder',
    'ContributorFilter',
    'group_by_author',
    'keep',
    'ChangelogGenerator',
    'get_pr_link',
    'render',
    'ChangelogConfig',
    'DEFAULT_EXCLUDES',
    'build_changelog',
    'collect_entries',
]
