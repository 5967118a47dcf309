[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketledger"
version = "0.1.0"
description = "Small terminal tools: a personal budget ledger with accounts, and a lending library manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["budget", "ledger", "library", "terminal", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocketledger-budget = "pocketledger.budget:main"
pocketledger-library = "pocketledger.library:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
