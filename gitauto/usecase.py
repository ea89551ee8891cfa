"""Git helper operations: tag version bumps and merged-branch cleanup."""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path

VERSION_MAJOR = "major"
VERSION_MINOR = "minor"
VERSION_PATCH = "patch"
BUMP_TARGETS = frozenset({VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH})

_VERSION_RE = re.compile(r"\d+\.\d+\.\d+", re.ASCII)
_PROTECTED_RE = re.compile(r"^\*|main|master|development|staging|production")


class GitError(Exception):
    """A git command failed; the message is what git wrote to stderr."""


def has_version_prefix(tag: str) -> bool:
    """Return True if the tag starts with a ``v``."""
    return tag.startswith("v")


def strip_version_prefix(tag: str) -> str:
    """Remove every ``v`` from the tag."""
    return tag.replace("v", "")


def increment_version(version: str, target: str) -> str:
    """Bump one part of a ``X.Y.Z`` version; unknown targets leave it unchanged."""
    version = version.replace(" ", "")
    if not _VERSION_RE.fullmatch(version):
        raise ValueError("does not match version")
    major, minor, patch = (int(part) for part in version.split("."))
    if target == VERSION_MAJOR:
        major, minor, patch = major + 1, 0, 0
    elif target == VERSION_MINOR:
        minor, patch = minor + 1, 0
    elif target == VERSION_PATCH:
        patch += 1
    else:
        return version
    return f"{major}.{minor}.{patch}"


def tag_version_up(tag: str, target: str) -> str:
    """Bump a tag's version, keeping a leading ``v`` if it had one."""
    version = increment_version(strip_version_prefix(tag), target)
    return "v" + version if has_version_prefix(tag) else version


def parse_merged_branches(output: str) -> list[str]:
    """Pick deletable branch names out of ``git branch --merged`` output."""
    branches = []
    for line in output.split("\n"):
        branch = line.replace(" ", "")
        if not branch or _PROTECTED_RE.search(branch):
            continue
        branches.append(branch)
    return branches


class GitUsecase:
    """Runs git commands in a working directory (the current one by default)."""

    def __init__(self, cwd: str | os.PathLike[str] | None = None) -> None:
        self.cwd = cwd

    def _run(self, *args: str) -> str:
        directory = Path(self.cwd) if self.cwd is not None else Path.cwd()
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=directory,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise GitError(str(exc)) from exc
        if result.returncode != 0:
            raise GitError(result.stderr)
        return result.stdout

    def version_up(self, target: str, tag_msg: str = "", is_push: bool = False) -> str:
        """Create (and optionally push) a tag; return the tag name."""
        if target in BUMP_TARGETS:
            version = tag_version_up(self.current_tag(), target)
        else:
            version = target
        self.set_tag(version, tag_msg)
        if is_push:
            self.push_tag(version)
        return version

    def delete_merged_branches(self) -> list[str]:
        """Delete every merged, unprotected branch; return their names."""
        branches = self.merged_branches()
        for branch in branches:
            self.delete_branch(branch)
        return branches

    def current_tag(self) -> str:
        """Return the most recent reachable tag (newlines turned into spaces)."""
        return self._run("describe", "--tags", "--abbrev=0").replace("\n", " ")

    def merged_branches(self) -> list[str]:
        """Return merged branches that may be deleted."""
        return parse_merged_branches(self._run("branch", "--merged"))

    def set_tag(self, tag: str, msg: str = "") -> None:
        """Create a tag, annotated when a message is given."""
        if msg:
            self._run("tag", "-am", msg, tag)
        else:
            self._run("tag", tag)

    def push_tag(self, tag: str) -> None:
        """Push a tag to ``origin``."""
        self._run("push", "origin", tag)

    def delete_branch(self, branch: str) -> None:
        """Force-delete a local branch."""
        self._run("branch", "-D", branch)