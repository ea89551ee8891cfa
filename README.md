# gitauto

A small command-line helper for two everyday git chores:

- creating the next semantic-version tag from the latest one, and
- deleting local branches that are already merged.

Every command runs `git` in the current working directory, so run it from
inside the repository you want to work on. `git` must be on your `PATH`.

## Installation

```
pip install .
```

This installs the `git-auto` command. Run without a subcommand, it prints
its help.

## Bumping a version tag

```
git-auto tag patch        # v1.2.3 -> v1.2.4
git-auto tag minor        # v1.2.3 -> v1.3.0
git-auto tag major        # v1.2.3 -> v2.0.0
git-auto tag v3.0.0       # create this exact tag
```

For `major`, `minor` and `patch` the latest tag comes from
`git describe --tags --abbrev=0`. Once every `v` is removed from it, it must
look like `X.Y.Z`; otherwise the command fails with `does not match version`.
If the old tag started with `v`, the new one does too. Any other argument is
used as the tag name itself. Only the first argument is used; with none, the
command fails with `not found argument`.

Options:

- `-m, --message TEXT` creates an annotated tag with this message
  (`git tag -am TEXT <tag>`) instead of a lightweight tag.
- `-p, --push` pushes the new tag to `origin` afterwards.

```
git-auto tag minor -m "Release with new features" -p
```

## Deleting merged branches

```
git-auto delete-merged-branch
git-auto mergedd              # short alias
```

Runs `git branch --merged` and force-deletes (`git branch -D`) every branch it
lists, except the current branch and any branch whose name contains `main`,
`master`, `development`, `staging` or `production`.

## Version information

```
git-auto version
```

Prints three lines: `Version: ...`, `Commit: ...` and `Build Date: ...`.

## Errors and exit codes

`git-auto` exits with 0 on success. When a git command fails, the tag is not
a valid version, or `tag` gets no argument, it prints `Error: <message>` to
standard error and exits with 1. Invalid command-line usage exits with
argparse's usual code 2.

## Using it from Python

```python
from gitauto.usecase import (
    GitError,
    GitUsecase,
    increment_version,
    parse_merged_branches,
    tag_version_up,
)

increment_version("1.1.1", "minor")   # "1.2.0"
tag_version_up("v1.1.1", "patch")     # "v1.1.2"
parse_merged_branches("* main\n  feature\n")  # ["feature"]

git = GitUsecase(".")                 # or GitUsecase() for the current directory
new_tag = git.version_up("patch", "", False)
deleted = git.delete_merged_branches()   # names of the deleted branches
```

`GitUsecase` also offers `current_tag()`, `merged_branches()`,
`set_tag(tag, msg)`, `push_tag(tag)` and `delete_branch(branch)`, each running
the matching git command. A failing `git` command raises `GitError`, whose
message is git's error output; a tag that is not a valid version raises
`ValueError`.