"""Command-line entry point for git-auto."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from gitauto.usecase import GitError, GitUsecase

VERSION = "dev"
COMMIT = "none"
BUILD_DATE = "unknown"


class _UsageError(Exception):
    pass


def build_parser() -> argparse.ArgumentParser:
    """Build the git-auto argument parser with its subcommands."""
    parser = argparse.ArgumentParser(prog="git-auto", description="Auto git commands")
    sub = parser.add_subparsers(dest="command")

    tag = sub.add_parser(
        "tag",
        usage="git-auto tag [<version>] [major|minor|patch]",
        help="Auto increment tag version",
    )
    tag.add_argument("args", nargs="*")
    tag.add_argument("-p", "--push", action="store_true", help="push")
    tag.add_argument("-m", "--message", default="", help="message")

    sub.add_parser(
        "delete-merged-branch", aliases=["mergedd"], help="Delete merged branch"
    )
    sub.add_parser(
        "version",
        help="Print the version information",
        description="Print the version, commit, and build date information for the CLI",
    )
    return parser


def print_version(out: TextIO) -> None:
    """Write version, commit and build date to ``out``."""
    out.write(f"Version: {VERSION}\n")
    out.write(f"Commit: {COMMIT}\n")
    out.write(f"Build Date: {BUILD_DATE}\n")


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.command == "tag":
        if not args.args:
            raise _UsageError("not found argument")
        GitUsecase().version_up(args.args[0], args.message, args.push)
    elif args.command in ("delete-merged-branch", "mergedd"):
        GitUsecase().delete_merged_branches()
    elif args.command == "version":
        print_version(sys.stdout)
    else:
        parser.print_help(sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """Run git-auto; return the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    try:
        _run(parser, args)
    except (GitError, ValueError, _UsageError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())