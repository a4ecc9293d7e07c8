"""
Changelog Generation Module

This module contains the ChangelogGenerator class responsible for rendering
grouped contributor entries as a markdown list.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from .models import Entry

NO_MESSAGE = "No message could be generated"


def get_pr_link(entry: Entry, owner: str, repo: str, host: str = "github.com") -> str:
    """
    Build the markdown link to an entry's pull request.

    Returns:
        ``[PR #n](https://host/owner/repo/pull/n)`` or an empty string when
        the entry has no pull request number.
    """
    if not entry.pr_number:
        return ""
    number = entry.pr_number
    return f"[PR #{number}](https://{host}/{owner}/{repo}/pull/{number})"


def author_heading(name: str, author_url: Optional[str] = None) -> str:
    """Link the author name to its profile when a URL is known."""
    return f"[{name}]({author_url})" if author_url else name


def _with_link(text: str, link: str) -> str:
    return f"{text} {link}" if link else text


class ChangelogGenerator:
    """
    Compose the contributor changelog from grouped entries.

    Authors with a single entry get a one-line item, authors with several
    entries get a heading followed by an indented item per entry.

    Args:
        owner: Repository owner used in pull request links
        repo: Repository name used in pull request links
        host: Host used in pull request links
    """

    def __init__(self, owner: str, repo: str, host: str = "github.com") -> None:
        self.owner = owner
        self.repo = repo
        self.host = host

    def generate_markdown(self, grouped: Mapping[str, Sequence[Entry]]) -> str:
        """
        Build the markdown document.

        Args:
            grouped: Mapping of author -> that author's entries

        Returns:
            Markdown list, one block per author in alphabetical order
        """
        lines: List[str] = []

        for name in sorted(grouped):
            entries = grouped[name]
            if not entries:
                continue
            heading = author_heading(name, entries[0].author_url)

            if len(entries) == 1:
                lines.append(self._format_single(heading, entries[0]))
            else:
                lines.extend(self._format_multiple(heading, entries))

        return "".join(lines)

    def _pr_link(self, entry: Entry) -> str:
        return get_pr_link(entry, self.owner, self.repo, self.host)

    def _format_single(self, heading: str, entry: Entry) -> str:
        message = entry.message if entry.message else NO_MESSAGE
        return f"- {heading}: {_with_link(message, self._pr_link(entry))}\n"

    def _format_multiple(self, heading: str, entries: Sequence[Entry]) -> List[str]:
        # Entries without a parsed message have nothing to show under the heading
        lines = [f"- {heading}\n"]
        for entry in entries:
            if not entry.message:
                continue
            lines.append(f"  - {_with_link(entry.message, self._pr_link(entry))}\n")
        return lines


def render(grouped: Dict[str, List[Entry]], owner: str, repo: str) -> str:
    """Render grouped entries for github.com/owner/repo."""
    return ChangelogGenerator(owner, repo).generate_markdown(grouped)
