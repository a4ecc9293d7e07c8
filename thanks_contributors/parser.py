"""
Commit parsing module.

This module turns raw commit messages into one-line change descriptions with
an optional pull request number, and builds the normalized entries that the
rest of the pipeline filters, groups and renders.
"""

import re

from .models import Entry, ParsedSummary, RawCommit


class CommitParser:
    """
    Parse the first line of a commit message into (message, pr_number).

    GitHub squash merges end the summary with ``(#<number>)``. The greedy
    prefix makes the last marker win, so a backport such as
    ``fix: Message (#123) (#456)`` keeps ``(#123)`` in the message and
    reports ``456`` as the pull request.
    """

    PR_RE = re.compile(r"^(?P<msg>.*)\(#(?P<pr>[0-9]+)\)")

    @staticmethod
    def first_line(message: str) -> str:
        """Return the text up to the first line break."""
        return message.split("\n", 1)[0]

    @staticmethod
    def parse(line: str) -> ParsedSummary:
        """
        Parse a single commit summary line.

        Returns:
            ParsedSummary with both fields set, or both None when the line
            carries no pull request marker.
        """
        m = CommitParser.PR_RE.match(line)
        if not m:
            return ParsedSummary()
        return ParsedSummary(
            message=m.group("msg").rstrip(),
            pr_number=m.group("pr"),
        )


class EntryBuilder:
    """Convert fetched commits into entries."""

    @staticmethod
    def build(raw: RawCommit) -> Entry:
        """
        Build an Entry from a RawCommit.

        The verified GitHub login is preferred over the commit metadata name
        since only the former has a profile link.
        """
        summary = CommitParser.parse(CommitParser.first_line(raw.message))

        if raw.platform_author is not None:
            author = raw.platform_author.login
            author_url = raw.platform_author.profile_url
        else:
            author = raw.commit_author_name
            author_url = None

        return Entry(
            author=author,
            author_url=author_url,
            message=summary.message,
            pr_number=summary.pr_number,
        )
