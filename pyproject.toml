[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitauto"
version = "0.1.0"
description = "Automate routine git chores: bump version tags and clean up merged branches"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "tag", "semver", "version", "branch", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
git-auto = "gitauto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitauto"]

[tool.pytest.ini_options]
addopts = "-ra"
