[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdccfetch"
version = "0.1.0"
description = "Building blocks for fetching files offered by XDCC bots: dynamic strings, message parsing, path handling, transfer throttling and MD5 checksums"
requires-python = ">=3.10"
dependencies = []
keywords = ["xdcc", "irc", "dcc", "download", "md5", "checksum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xdccfetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
