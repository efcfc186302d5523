[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kora"
version = "0.3.0"
description = "Terminal audio player interface logic: file browser, podcast browser, display helpers and key bindings"
requires-python = ">=3.10"
keywords = ["audio", "music", "player", "tui", "terminal", "podcast"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kora"]

[tool.pytest.ini_options]
addopts = "-ra"
