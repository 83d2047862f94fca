"""Command line entry point: profile a GitHub user."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from .analyzer import Weekday, analyze_commit_activity, analyze_languages, top_starred_repos
from .api import fetch_user_profile, fetch_user_repos
from .report import generate_markdown_report, open_markdown_report

TOP_REPO_COUNT = 3

log = logging.getLogger(__name__)


@contextmanager
def _log_output(verbose: bool) -> Iterator[None]:
    """Send the package's log to stderr when verbose, drop it otherwise."""
    logger = logging.getLogger(__package__ or "gitstalker")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    handler: logging.Handler = logging.StreamHandler() if verbose else logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S"))
    logger.handlers = [handler]
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        yield
    finally:
        logger.setLevel(saved[0])
        logger.propagate = saved[1]
        logger.handlers = saved[2]


def build_parser() -> argparse.ArgumentParser:
    """The argument parser of the command."""
    parser = argparse.ArgumentParser(
        prog="git-stalker", description="GitHub developer profiler"
    )
    parser.add_argument("username", help="GitHub user to profile")
    parser.add_argument(
        "-m", "--md", action="store_true", help="Generate markdown report"
    )
    parser.add_argument(
        "-o", "--open", action="store_true", help="Open markdown report after generation"
    )
    parser.add_argument(
        "-l", "--log", action="store_true", help="Enable detailed logging output"
    )
    return parser


def run(username: str, markdown: bool, open_report: bool, verbose: bool) -> None:
    """Profile a user and print the results, optionally saving a report."""
    with _log_output(verbose):
        log.info("🔍 Profiling GitHub user: %s", username)

        profile = fetch_user_profile(username)
        repos = fetch_user_repos(username)

        print("\n👤 Name:", profile.name)
        print("📝 Bio:", profile.bio)
        if not repos:
            log.info("❌ No repositories found or an error occurred.")
            return
        print(f"Public Repos: {len(repos)}")

        languages = analyze_languages(repos)
        print("\n💻 Language Usage:")
        for lang, count in languages.items():
            print(f"• {lang:<15} : {count} repos")

        activity = analyze_commit_activity(username, repos)
        print("\nTotal Commits: ", activity.total)
        print("\n⏰ Commits by Hour:")
        for hour in range(24):
            print(f"• {hour:02d}:00 – {activity.by_hour[hour]} commits")

        print("\n📅 Commits by Day:")
        for day in Weekday:
            print(f"• {str(day):<9} – {activity.by_day[day]} commits")

        print(f"\n🧠 Developer Archetype: {activity.archetype}")

        top_repos = top_starred_repos(repos, TOP_REPO_COUNT)
        print("\n🏆 Top Starred Repositories:")
        for repo in top_repos:
            print(f"• {repo.name} – ⭐ {repo.stargazers_count} stars")

        if markdown:
            try:
                generate_markdown_report(
                    username, profile.name, profile.bio, languages, activity, top_repos
                )
            except OSError as exc:
                log.warning("⚠️ Failed to generate markdown report: %s", exc)
            else:
                if open_report:
                    open_markdown_report(username)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with the given arguments."""
    args = build_parser().parse_args(argv)
    run(args.username, args.md, args.open, args.log)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())