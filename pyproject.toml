[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviekit"
version = "0.1.0"
description = "Support utilities for a movie player front-end: time-limited file reading on a background thread, process reaping, settings lookup, buffered logging and value holders."
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "movies", "logging", "file-reading", "configuration", "process"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moviekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
