"""
Contributor filtering and grouping module.

Entries are dropped when their author is an excluded account or a member of
the organization, then grouped per author for rendering.
"""

import collections
from typing import Dict, Iterable, List

from .models import Entry


class ContributorFilter:
    """
    Decide which entries make it into the changelog.

    Args:
        include_all: Keep every entry, ignoring excludes and org members.
        excludes: Author names that are always dropped (e.g. bots).
        org_members: Logins of the organization's members.
    """

    def __init__(self, include_all: bool = False, excludes: Iterable[str] = (),
                 org_members: Iterable[str] = ()) -> None:
        self.include_all = include_all
        self._blocked = set(excludes) | set(org_members)

    def keep(self, entry: Entry) -> bool:
        """Return True if the entry's author is not blocked."""
        if self.include_all:
            return True
        return entry.author not in self._blocked

    def apply(self, entries: Iterable[Entry]) -> List[Entry]:
        """Return the entries that are kept, in their original order."""
        return [e for e in entries if self.keep(e)]


def keep(entry: Entry, include_all: bool, excludes: Iterable[str], org_members: Iterable[str]) -> bool:
    """Functional form of ContributorFilter.keep."""
    return ContributorFilter(include_all, excludes, org_members).keep(entry)


def group_by_author(entries: Iterable[Entry]) -> Dict[str, List[Entry]]:
    """
    Group entries by author.

    Args:
        entries: Entries in commit order

    Returns:
        Dictionary mapping author -> entries of that author, in input order.
        Key order is not meaningful; the generator sorts authors itself.
    """
    groups: Dict[str, List[Entry]] = collections.defaultdict(list)

    for entry in entries:
        groups[entry.author].append(entry)

    return dict(groups)
