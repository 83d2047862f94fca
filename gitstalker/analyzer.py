"""Statistics over a user's repositories and commit times."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from itertools import chain

from .api import Repo, fetch_commit_timestamps

NIGHT_OWL = "🌙 Night Owl"
WEEKEND_HACKER = "🧪 Weekend Hacker"
NINE_TO_FIVE_CODER = "\U0001f9d1\u200d\U0001f4bc 9-to-5 Coder"
CHAOS_CODER = "🌀 Chaos Coder"


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_datetime(cls, moment: datetime) -> Weekday:
        """The weekday of a moment in its own time zone."""
        return cls((moment.weekday() + 1) % 7)

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class CommitActivity:
    """Commit counts by hour of day and by weekday, with the derived archetype."""

    by_hour: Counter[int] = field(default_factory=Counter)
    by_day: Counter[Weekday] = field(default_factory=Counter)
    total: int = 0
    archetype: str = CHAOS_CODER


def get_archetype(hour_counts: Mapping[int, int], day_counts: Mapping[int, int]) -> str:
    """Classify a developer by when most of their commits happen."""
    night = sum(count for hour, count in hour_counts.items() if hour >= 20 or hour <= 3)
    workday = sum(count for hour, count in hour_counts.items() if 9 <= hour <= 17)
    weekend = sum(
        count for day, count in day_counts.items() if day in (Weekday.SATURDAY, Weekday.SUNDAY)
    )

    if night > workday and night > weekend:
        return NIGHT_OWL
    if weekend > night and weekend > workday:
        return WEEKEND_HACKER
    if workday > night and workday > weekend:
        return NINE_TO_FIVE_CODER
    return CHAOS_CODER


def count_commit_times(timestamps: Iterable[datetime]) -> CommitActivity:
    """Tally commit times by hour and weekday and classify the result."""
    activity = CommitActivity()
    for moment in timestamps:
        activity.by_hour[moment.hour] += 1
        activity.by_day[Weekday.from_datetime(moment)] += 1
        activity.total += 1
    activity.archetype = get_archetype(activity.by_hour, activity.by_day)
    return activity


def analyze_commit_activity(username: str, repos: Iterable[Repo]) -> CommitActivity:
    """Fetch the recent commits of every repository and tally them."""
    timestamps = chain.from_iterable(
        fetch_commit_timestamps(username, repo.name) for repo in repos
    )
    return count_commit_times(timestamps)


def analyze_languages(repos: Iterable[Repo]) -> Counter[str]:
    """Count repositories per primary language, skipping those without one."""
    return Counter(repo.language for repo in repos if repo.language)


def top_starred_repos(repos: Iterable[Repo], limit: int) -> list[Repo]:
    """The at most ``limit`` repositories with the most stars, most first."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    ranked = sorted(repos, key=lambda repo: repo.stargazers_count, reverse=True)
    return ranked[:limit]