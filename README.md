# gitstalker

A small command-line profiler for GitHub users. Given a username it fetches
the public profile and repositories, then prints:

- name and bio (`N/A` where unknown)
- how many repositories use each primary language
- the total number of commits analysed
- commits broken down by hour of day and by weekday
- a developer archetype (Night Owl, Weekend Hacker, 9-to-5 Coder or Chaos Coder)
- the three most-starred repositories

Optionally it writes everything to a Markdown report, with an archetype badge,
and opens it in an editor.

## Installation

```
pip install .
```

No third-party libraries are needed; requests go through the standard library.

## Usage

```
git-stalker USERNAME [-m] [-o] [-l]
```

| Option       | Meaning                                                  |
|--------------|----------------------------------------------------------|
| `-m, --md`   | Write `USERNAME_report.md` in the current directory      |
| `-o, --open` | Open the report after writing it (only together with `-m`) |
| `-l, --log`  | Show detailed progress and error logging on stderr       |

Every request carries the value of the `GITHUB_TOKEN` environment variable as
a bearer token, which raises the API rate limit:

```
export GITHUB_TOKEN=token
git-stalker octocat --md --open
```

Opening the report tries the `code` command first and otherwise falls back
to the system's default opener (`open`, `cmd /c start` or `xdg-open`).

## Limits

- Only the first page of repositories is read, up to 100 per user.
- Only the most recent 30 commits of each repository are analysed, by author
  date in the commit's own time zone.
- Repositories whose commit list cannot be fetched or parsed are skipped.
- If no repositories are found, only the name and bio are printed.

## Library use

The pieces are also usable from Python:

```python
from gitstalker.api import fetch_user_repos
from gitstalker.analyzer import analyze_languages, top_starred_repos

repos = fetch_user_repos("octocat")
print(analyze_languages(repos))
print(top_starred_repos(repos, 3))
```

- `gitstalker.api` — `fetch_user_profile` (returns a `UserProfile`),
  `fetch_user_repos` (a list of `Repo`) and `fetch_commit_timestamps`
  (a list of `datetime`). Failures are logged and give empty results rather
  than raising.
- `gitstalker.analyzer` — `count_commit_times` and `analyze_commit_activity`
  build a `CommitActivity` (counts by hour and by `Weekday`, the total and the
  archetype); `get_archetype` classifies hour and weekday counts directly.
- `gitstalker.report` — `render_markdown_report` builds the report text
  without writing a file, `generate_markdown_report` saves it and returns its
  path, `generate_badge_snippet` gives the badge image markup and
  `open_markdown_report` opens a saved report.