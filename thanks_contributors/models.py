"""
Data models for the contributor changelog.

This module contains the shared data structures used across all modules.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlatformAuthor:
    """Verified GitHub account attached to a commit."""
    login: str
    profile_url: str


@dataclass(frozen=True)
class RawCommit:
    """A single commit as returned by the GitHub API."""
    message: str
    commit_author_name: str
    platform_author: Optional[PlatformAuthor] = None


@dataclass(frozen=True)
class ParsedSummary:
    """Cleaned first line of a commit message and its pull request number."""
    message: Optional[str] = None
    pr_number: Optional[str] = None


@dataclass(frozen=True)
class Entry:
    """One contribution, ready for filtering, grouping and rendering."""
    author: str
    author_url: Optional[str] = None
    message: Optional[str] = None
    pr_number: Optional[str] = None
