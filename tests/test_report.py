from datetime import datetime, timezone
from unittest import mock

import pytest

from gitstalker.analyzer import (
    CHAOS_CODER,
    NIGHT_OWL,
    NINE_TO_FIVE_CODER,
    WEEKEND_HACKER,
    CommitActivity,
    Weekday,
    count_commit_times,
)
from gitstalker.api import Repo
from gitstalker.report import (
    generate_badge_snippet,
    generate_markdown_report,
    open_markdown_report,
    render_markdown_report,
    report_filename,
)


def _activity() -> CommitActivity:
    return count_commit_times(
        [
            datetime(2024, 1, 6, 22, 15, tzinfo=timezone.utc),
            datetime(2024, 1, 3, 23, 5, tzinfo=timezone.utc),
        ]
    )


def _render(top_repos=()):
    return render_markdown_report(
        "octo", "Octo Cat", "Builds things", {"Go": 2, "Python": 1}, _activity(), list(top_repos)
    )


@pytest.mark.parametrize(
    "archetype, label",
    [
        (NIGHT_OWL, "Night%20Owl"),
        (WEEKEND_HACKER, "Weekend%20Hacker"),
        (NINE_TO_FIVE_CODER, "9to5%20Coder"),
        (CHAOS_CODER, "Chaos%20Coder"),
        ("Mystery", "Developer"),
    ],
)
def test_badge_snippet(archetype, label):
    expected = (
        f"![Dev Archetype: {archetype}]"
        f"(https://img.shields.io/badge/Archetype-{label}-blueviolet)"
    )
    assert generate_badge_snippet(archetype) == expected


def test_report_filename():
    assert report_filename("octo") == "octo_report.md"


def test_render_header_and_badge():
    text = _render()
    lines = text.splitlines()
    assert lines[0] == "# GitHub Profile: [octo](https://github.com/octo)"
    assert lines[2] == generate_badge_snippet(NIGHT_OWL)
    assert "**Name**: Octo Cat" in lines
    assert "**Bio**: Builds things" in lines
    assert f"**Developer Archetype**: {NIGHT_OWL}" in lines
    assert "**Total Commits Analyzed**: 2" in lines


def test_render_languages_keep_order():
    lines = _render().splitlines()
    start = lines.index("## 💻 Language Usage")
    assert lines[start + 1 : start + 3] == ["- **Go**: 2 repos", "- **Python**: 1 repos"]


def test_render_hour_and_day_sections_match_activity():
    activity = _activity()
    lines = _render().splitlines()
    hour_lines = [line for line in lines if ":00 → " in line]
    assert len(hour_lines) == 24
    assert hour_lines[0].startswith("- 00:00 → ")
    for hour, line in enumerate(hour_lines):
        assert line == f"- {hour:02d}:00 → {activity.by_hour[hour]} commits"

    start = lines.index("## 📅 Commits by Day")
    day_lines = lines[start + 1 : start + 8]
    assert [line.split(" → ")[0] for line in day_lines] == [f"- {day}" for day in Weekday]
    assert sum(int(line.split(" → ")[1].split()[0]) for line in day_lines) == activity.total


def test_render_without_repos():
    assert _render().endswith("## 🏆 Top Starred Repositories\n- No public repos with stars found.\n")


def test_render_with_repos():
    text = _render([Repo("alpha", "Go", 5)])
    assert text.endswith("- [alpha](https://github.com/octo/alpha) — ⭐ 5 stars\n")
    assert "No public repos" not in text


def test_generate_writes_rendered_text(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    repos = [Repo("alpha", "Go", 5)]
    path = generate_markdown_report(
        "octo", "Octo Cat", "Builds things", {"Go": 2, "Python": 1}, _activity(), repos
    )
    assert path.name == "octo_report.md"
    assert (tmp_path / "octo_report.md").read_text(encoding="utf-8") == _render(repos)
    assert "📄 Markdown report saved as: octo_report.md" in capsys.readouterr().out


def test_generate_fails_when_target_is_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "octo_report.md").mkdir()
    with pytest.raises(OSError, match="failed to write markdown report"):
        generate_markdown_report("octo", "N/A", "N/A", {}, CommitActivity(), [])


def test_open_uses_vs_code(capsys):
    with mock.patch("gitstalker.report.subprocess.Popen") as popen:
        open_markdown_report("octo")
    popen.assert_called_once_with(["code", "octo_report.md"])
    assert "Ctrl+Shift+V" in capsys.readouterr().out


@pytest.mark.parametrize(
    "platform, command",
    [
        ("linux", ["xdg-open", "octo_report.md"]),
        ("darwin", ["open", "octo_report.md"]),
        ("win32", ["cmd", "/c", "start", "octo_report.md"]),
    ],
)
def test_open_falls_back_to_system_opener(platform, command, capsys):
    with mock.patch("gitstalker.report.subprocess.Popen") as popen, mock.patch(
        "sys.platform", platform
    ):
        popen.side_effect = [FileNotFoundError("code"), mock.MagicMock()]
        open_markdown_report("octo")
    assert popen.call_args_list[1] == mock.call(command)
    assert "Ctrl+Shift+V" not in capsys.readouterr().out


def test_open_ignores_failing_fallback():
    with mock.patch("gitstalker.report.subprocess.Popen") as popen:
        popen.side_effect = FileNotFoundError("missing")
        assert open_markdown_report("octo") is None
    assert popen.call_count == 2