[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitstalker"
version = "0.1.0"
description = "Profile a GitHub developer: languages, commit rhythm, archetype and top repositories"
requires-python = ">=3.10"
dependencies = []
keywords = ["github", "profile", "commits", "developer", "analytics", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
git-stalker = "gitstalker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitstalker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
