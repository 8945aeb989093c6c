[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "yeatplayer"
version = "0.1.0"
description = "Music library and playlist manager backed by SQLite, with JSON window themes and frameless-window geometry handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "player", "playlist", "sqlite", "theme", "qss"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yeatplayer = "yeatplayer.cli:main"

[tool.setuptools.packages.find]
include = ["yeatplayer*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
