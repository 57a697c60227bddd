[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marco"
version = "0.1.0"
description = "Markdown syntax tree nodes, node builders and HTML helpers for escaping, emoji, YouTube embeds and formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "html", "ast", "emoji", "youtube", "pretty-print"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
