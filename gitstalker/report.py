"""Markdown profile reports: badge, rendering, saving and opening."""

from __future__ import annotations

import contextlib
import logging
import subprocess
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path

from .analyzer import CommitActivity, Weekday
from .api import Repo

BADGE_URL = "https://img.shields.io/badge/Archetype-{label}-blueviolet"
PROFILE_URL = "https://github.com/{username}"

_BADGE_LABELS = (
    ("Night Owl", "Night%20Owl"),
    ("Weekend Hacker", "Weekend%20Hacker"),
    ("9-to-5", "9to5%20Coder"),
    ("Chaos", "Chaos%20Coder"),
)
_DEFAULT_BADGE_LABEL = "Developer"

log = logging.getLogger(__name__)


def generate_badge_snippet(archetype: str) -> str:
    """A markdown image of a shields.io badge naming the archetype."""
    label = next(
        (label for marker, label in _BADGE_LABELS if marker in archetype),
        _DEFAULT_BADGE_LABEL,
    )
    return f"![Dev Archetype: {archetype}]({BADGE_URL.format(label=label)})"


def report_filename(username: str) -> str:
    """The file name a user's report is saved under."""
    return f"{username}_report.md"


def render_markdown_report(
    username: str,
    name: str,
    bio: str,
    languages: Mapping[str, int],
    activity: CommitActivity,
    top_repos: Iterable[Repo],
) -> str:
    """Render a developer profile as markdown text."""
    profile_url = PROFILE_URL.format(username=username)
    lines = [
        f"# GitHub Profile: [{username}]({profile_url})",
        "",
        generate_badge_snippet(activity.archetype),
        "",
        f"**Name**: {name}",
        "",
        f"**Bio**: {bio}",
        "",
        f"**Developer Archetype**: {activity.archetype}",
        "",
        f"**Total Commits Analyzed**: {activity.total}",
        "",
        "## 💻 Language Usage",
    ]
    lines.extend(f"- **{lang}**: {count} repos" for lang, count in languages.items())

    lines += ["", "## ⏰ Commits by Hour"]
    lines.extend(
        f"- {hour:02d}:00 → {activity.by_hour.get(hour, 0)} commits" for hour in range(24)
    )

    lines += ["", "## 📅 Commits by Day"]
    lines.extend(f"- {day} → {activity.by_day.get(day, 0)} commits" for day in Weekday)

    lines += ["", "## 🏆 Top Starred Repositories"]
    repo_lines = [
        f"- [{repo.name}]({profile_url}/{repo.name}) — ⭐ {repo.stargazers_count} stars"
        for repo in top_repos
    ]
    lines.extend(repo_lines or ["- No public repos with stars found."])

    return "\n".join(lines) + "\n"


def generate_markdown_report(
    username: str,
    name: str,
    bio: str,
    languages: Mapping[str, int],
    activity: CommitActivity,
    top_repos: Iterable[Repo],
) -> Path:
    """Render the report and save it in the current directory.

    Returns the path written; raises OSError when the file cannot be written.
    """
    text = render_markdown_report(username, name, bio, languages, activity, top_repos)
    path = Path(report_filename(username))
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to write markdown report: {exc}") from exc
    print("📄 Markdown report saved as:", path)
    return path


def _fallback_command(filename: str) -> list[str]:
    if sys.platform == "darwin":
        return ["open", filename]
    if sys.platform.startswith("win"):
        return ["cmd", "/c", "start", filename]
    return ["xdg-open", filename]


def open_markdown_report(username: str) -> None:
    """Open a saved report in VS Code, or with the system's default opener."""
    filename = report_filename(username)
    try:
        subprocess.Popen(["code", filename])
    except OSError:
        log.warning("⚠️ Could not open in VS Code. Falling back to default opener...")
        with contextlib.suppress(OSError):
            subprocess.Popen(_fallback_command(filename))
        return
    print("💡 Tip: Press Ctrl+Shift+V in VS Code to open preview side-by-side.")