#!/usr/bin/env python3
"""
Main driver script for thanks-contributors.

Lists everyone who authored a commit between two refs, excluding bots and
organization members, and writes a markdown list of their contributions
into the output folder.

Usage (example):
    thanks-contributors gatsby@4.0.0 gatsby@4.1.0 gatsbyjs gatsby
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_EXCLUDES, DEFAULT_OWNER, DEFAULT_REPO, ChangelogConfig, load_token
from .errors import ThanksContributorsError
from .fetcher import GitHubFetcher
from .output import write_changelog
from .pipeline import build_changelog

logger = logging.getLogger("thanks-contributors")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thanks-contributors",
        description=(
            "Get the list of commits between base...head (equivalent to git log base..head), "
            "parse their authors and create a markdown list of each contributor and their "
            "contribution. By default the members of the owner organization are excluded. "
            "Saves the result into the output folder."
        ),
    )
    parser.add_argument("base", help="Base commit ref (e.g. a tag or SHA)")
    parser.add_argument("head", help="Head commit ref")
    parser.add_argument("owner", nargs="?", default=DEFAULT_OWNER,
                        help=f"Repository owner / organization (default: {DEFAULT_OWNER})")
    parser.add_argument("repo", nargs="?", default=DEFAULT_REPO,
                        help=f"Repository name (default: {DEFAULT_REPO})")
    parser.add_argument("--include", "-i", action="store_true",
                        help="Include organization members in the list")
    parser.add_argument("--excludes", "-e", nargs="*", default=list(DEFAULT_EXCLUDES),
                        help="Author names to exclude; pass -e alone to exclude nobody "
                             "(default: %(default)s)")
    parser.add_argument("--list-commits-api", "-l", action="store_true",
                        help="Use the 'list commits' API instead of the 'compare' API "
                             "(needed for ranges of more than 250 commits)")
    parser.add_argument("--token", "-t", required=False,
                        help="GitHub token (default: GITHUB_ACCESS_TOKEN from the environment or .env)")
    parser.add_argument("--output-dir", "-o", default="output", help="Output directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> str:
    """
    Fetch, transform and write the changelog.

    Returns:
        Path of the written file
    """
    config = ChangelogConfig(
        owner=args.owner,
        repo=args.repo,
        include_org_members=args.include,
        excludes=tuple(args.excludes),
    )
    token = load_token(args.token)

    logger.info("Generating contributor list for %s/%s (%s...%s)", config.owner, config.repo,
                args.base, args.head)
    fetcher = GitHubFetcher(token=token)

    if args.list_commits_api:
        commits = fetcher.fetch_commits_by_date(config.owner, config.repo, args.base, args.head)
    else:
        commits = fetcher.fetch_commits(config.owner, config.repo, args.base, args.head)

    members: List[str] = []
    if commits and not config.include_org_members:
        members = fetcher.fetch_org_members(config.owner)

    text = build_changelog(commits, members, config, base=args.base, head=args.head)
    return str(write_changelog(text, args.output_dir))


def main(argv: Optional[List[str]] = None) -> None:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        path = run(args)
        print(f"Successfully created {path}")
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except ThanksContributorsError as e:
        logger.error("%s", e)
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
