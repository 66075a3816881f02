[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memov2"
version = "0.1.0"
description = "Memos and todo lists kept as plain Markdown files, with category folders and Japanese-aware search"
requires-python = ">=3.11"
keywords = ["memo", "todo", "markdown", "notes", "diary", "search", "romaji", "skk"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
memov2 = "memov2.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["memov2"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
