"""
Pytest configuration and fixtures
"""
from typing import List, Optional

import pytest

from thanks_contributors.models import Entry, PlatformAuthor, RawCommit


def make_commit(message: str, name: str, login: Optional[str] = None) -> RawCommit:
    """Build a RawCommit, linked to a GitHub account when ``login`` is given."""
    platform_author = PlatformAuthor(login, f"{login}-url") if login else None
    return RawCommit(message=message, commit_author_name=name, platform_author=platform_author)


@pytest.fixture
def raw_commits() -> List[RawCommit]:
    """Six commits: two by author-a, one each by author-b..author-e."""
    return [
        make_commit("fix(scope): Message (#1)", "Author A", "author-a"),
        make_commit("fix(scope): Message (#2)\n\nLonger body", "Author A", "author-a"),
        make_commit("fix(scope): Message (#3)", "Author B", "author-b"),
        make_commit("fix(scope): Message (#4)", "author-c"),
        make_commit("chore: Internal (#5)", "Author D", "author-d"),
        make_commit("chore(deps): update (#6)", "Author E", "author-e"),
    ]


@pytest.fixture
def entry_a1() -> Entry:
    return Entry("author-a", "author-a-url", "fix(scope): Message", "1")


@pytest.fixture
def entry_a2() -> Entry:
    return Entry("author-a", "author-a-url", "fix(scope): Message", "2")


@pytest.fixture
def entry_b() -> Entry:
    return Entry("author-b", "author-b-url", "fix(scope): Message", "3")
