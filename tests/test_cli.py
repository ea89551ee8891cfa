import io
import subprocess
from pathlib import Path

import pytest

from gitauto import cli


def _git(directory: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=directory, capture_output=True, text=True, check=True
    )
    return result.stdout


def test_main_help(capsys):
    assert cli.main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "git-auto" in out
    assert "delete-merged-branch" in out


def test_main_without_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "Auto git commands" in capsys.readouterr().out


def test_tag_command_no_args(capsys):
    assert cli.main(["tag"]) == 1
    assert "not found argument" in capsys.readouterr().err


def test_tag_flags_parsed():
    args = cli.build_parser().parse_args(["tag", "minor", "-p", "-m", "release"])
    assert args.args == ["minor"]
    assert args.push is True
    assert args.message == "release"


def test_delete_alias_parsed():
    args = cli.build_parser().parse_args(["mergedd"])
    assert args.command == "mergedd"


def test_version_command(monkeypatch, capsys):
    monkeypatch.setattr(cli, "VERSION", "1.0.0")
    monkeypatch.setattr(cli, "COMMIT", "abc123")
    monkeypatch.setattr(cli, "BUILD_DATE", "2023-01-01")

    assert cli.main(["version"]) == 0
    out = capsys.readouterr().out
    assert "Version: 1.0.0" in out
    assert "Commit: abc123" in out
    assert "Build Date: 2023-01-01" in out


def test_print_version_defaults():
    buf = io.StringIO()
    cli.print_version(buf)
    assert buf.getvalue() == "Version: dev\nCommit: none\nBuild Date: unknown\n"


def test_delete_merged_branch_command_integration(tmp_path, monkeypatch):
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.name", "tester")
    _git(repo, "config", "user.email", "tester@example.com")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "README.md").write_text("hello")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "init")

    default_branch = _git(repo, "branch", "--show-current").strip()
    _git(repo, "checkout", "-b", "feature")
    (repo / "feature.txt").write_text("a")
    _git(repo, "add", "feature.txt")
    _git(repo, "commit", "-m", "feature")
    _git(repo, "checkout", default_branch)
    _git(repo, "merge", "feature")

    monkeypatch.chdir(repo)
    assert cli.main(["delete-merged-branch"]) == 0
    assert _git(repo, "branch", "--list", "feature") == ""


@pytest.mark.parametrize("command", ["bogus", "--nope"])
def test_unknown_arguments_fail(command, capsys):
    assert cli.main([command]) == 2
    assert "usage" in capsys.readouterr().err