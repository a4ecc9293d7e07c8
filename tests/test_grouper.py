"""
Tests for contributor filtering and grouping.
"""

from collections import Counter

import pytest

from thanks_contributors.grouper import ContributorFilter, group_by_author, keep
from thanks_contributors.models import Entry


def test_group_by_author(entry_a1, entry_a2, entry_b):
    grouped = group_by_author([entry_a1, entry_b, entry_a2])

    assert grouped == {"author-a": [entry_a1, entry_a2], "author-b": [entry_b]}


def test_group_by_author_empty_input():
    assert group_by_author([]) == {}


def test_group_by_author_keeps_every_entry():
    entries = [Entry(name, message=str(i), pr_number=str(i))
               for i, name in enumerate(["c", "a", "b", "a", "c", "c"])]
    entries.append(Entry("a", message="0", pr_number="0"))

    grouped = group_by_author(entries)

    flattened = [e for group in grouped.values() for e in group]
    assert Counter(flattened) == Counter(entries)
    assert [e.message for e in grouped["c"]] == ["0", "4", "5"]


class TestContributorFilter:

    @pytest.mark.parametrize("author,expected", [
        ("renovate[bot]", False),
        ("member", False),
        ("outsider", True),
        ("Member", True),
        ("renovate", True),
    ])
    def test_keep(self, author, expected):
        f = ContributorFilter(excludes={"renovate[bot]"}, org_members=["member"])

        assert f.keep(Entry(author)) is expected

    def test_include_all_ignores_excludes_and_members(self):
        f = ContributorFilter(include_all=True, excludes={"bot"}, org_members={"member"})

        assert f.keep(Entry("bot"))
        assert f.keep(Entry("member"))

    def test_apply_preserves_order(self):
        entries = [Entry("x"), Entry("bot"), Entry("y"), Entry("member")]
        f = ContributorFilter(excludes=["bot"], org_members=["member"])

        assert f.apply(entries) == [Entry("x"), Entry("y")]

    def test_keep_function(self):
        assert keep(Entry("a"), False, {"b"}, {"c"})
        assert not keep(Entry("c"), False, {"b"}, {"c"})
        assert keep(Entry("c"), True, {"b"}, {"c"})


def test_package_exports_keep_and_render():
    import thanks_contributors

    assert thanks_contributors.keep is keep
    assert "keep" in thanks_contributors.__all__
    assert "render" in thanks_contributors.__all__
