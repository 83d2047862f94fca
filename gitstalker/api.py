"""Access to the GitHub REST API: user profiles, repositories and commit times."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from http.client import HTTPException
from typing import Any
from urllib.error import HTTPError
from urllib.request import Request, urlopen

API_ROOT = "https://api.github.com"
NOT_AVAILABLE = "N/A"
COMMITS_PER_PAGE = 30
REPOS_PER_PAGE = 100

# A commit without an author date is counted at the zero instant.
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_NETWORK_ERRORS = (OSError, HTTPException)

log = logging.getLogger(__name__)


class _StatusError(Exception):
    """The API answered with a status other than 200 OK."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f"{status} {reason}".strip())
        self.status = status
        self.reason = reason


@dataclass(frozen=True)
class Repo:
    """A public repository of a user."""

    name: str
    language: str = ""
    stargazers_count: int = 0

    @classmethod
    def from_json(cls, data: Any) -> Repo:
        """Build a repository from one entry of the repositories listing."""
        if not isinstance(data, dict):
            raise TypeError(f"repository entry must be an object, not {type(data).__name__}")
        return cls(
            name=data.get("name") or "",
            language=data.get("language") or "",
            stargazers_count=int(data.get("stargazers_count") or 0),
        )


@dataclass(frozen=True)
class UserProfile:
    """Display name and bio of a user, "N/A" where unknown."""

    name: str = NOT_AVAILABLE
    bio: str = NOT_AVAILABLE


def _headers() -> dict[str, str]:
    return {
        "Authorization": "Bearer " + os.environ.get("GITHUB_TOKEN", ""),
        "Accept": "application/vnd.github+json",
    }


def _get_json(url: str) -> Any:
    """GET a URL and decode its JSON body; raise _StatusError unless 200."""
    request = Request(url, headers=_headers(), method="GET")
    try:
        with urlopen(request) as response:
            if response.status != 200:
                raise _StatusError(response.status, getattr(response, "reason", "") or "")
            body = response.read()
    except HTTPError as exc:
        raise _StatusError(exc.code, str(exc.reason or "")) from exc
    return json.loads(body)


def _parse_commit_date(entry: Any) -> datetime:
    if not isinstance(entry, dict):
        raise TypeError("commit entry must be an object")
    commit = entry.get("commit") or {}
    author = commit.get("author") or {}
    raw = author.get("date")
    if raw is None:
        return _ZERO_TIME
    if not isinstance(raw, str):
        raise ValueError(f"commit date must be a string, not {raw!r}")
    text = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        raise ValueError(f"commit date has no time zone: {raw!r}")
    return moment


def fetch_commit_timestamps(username: str, repo_name: str) -> list[datetime]:
    """Return the author dates of the latest commits of a user's repository.

    Failures are logged and give an empty list.
    """
    url = f"{API_ROOT}/repos/{username}/{repo_name}/commits?per_page={COMMITS_PER_PAGE}"
    try:
        payload = _get_json(url)
    except _StatusError as exc:
        log.warning("⚠️  Skipping %s/%s (status: %d)", username, repo_name, exc.status)
        return []
    except _NETWORK_ERRORS as exc:
        log.error("❌ Failed to fetch commits for %s/%s: %s", username, repo_name, exc)
        return []
    except ValueError as exc:
        log.error("❌ Failed to parse commits for %s/%s: %s", username, repo_name, exc)
        return []

    try:
        if not isinstance(payload, list):
            raise ValueError("commit listing must be an array")
        return [_parse_commit_date(entry) for entry in payload]
    except (ValueError, TypeError) as exc:
        log.error("❌ Failed to parse commits for %s/%s: %s", username, repo_name, exc)
        return []


def fetch_user_profile(username: str) -> UserProfile:
    """Return the name and bio of a user; both "N/A" when unavailable."""
    url = f"{API_ROOT}/users/{username}"
    try:
        payload = _get_json(url)
    except (_StatusError, *_NETWORK_ERRORS) as exc:
        print("❌ Failed to fetch user profile:", exc)
        return UserProfile()
    except ValueError:
        return UserProfile()

    if not isinstance(payload, dict):
        return UserProfile()
    name = payload.get("name")
    bio = payload.get("bio")
    return UserProfile(
        name=name if isinstance(name, str) and name else NOT_AVAILABLE,
        bio=bio if isinstance(bio, str) and bio else NOT_AVAILABLE,
    )


def fetch_user_repos(username: str) -> list[Repo]:
    """Return the public repositories of a user; failures give an empty list."""
    url = f"{API_ROOT}/users/{username}/repos?per_page={REPOS_PER_PAGE}"
    try:
        payload = _get_json(url)
    except _StatusError as exc:
        log.error("Error: GitHub API returned %s", exc)
        return []
    except _NETWORK_ERRORS as exc:
        log.error("API call error: %s", exc)
        return []
    except ValueError as exc:
        log.error("JSON decode error: %s", exc)
        return []

    try:
        if not isinstance(payload, list):
            raise ValueError("repository listing must be an array")
        return [Repo.from_json(entry) for entry in payload]
    except (ValueError, TypeError) as exc:
        log.error("JSON decode error: %s", exc)
        return []