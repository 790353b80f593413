[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concurrutils"
version = "0.1.0"
description = "Concurrency and utility building blocks: active-object threads, events, ring buffers, observers, file streams and tagged loggers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "active-object",
    "job-queue",
    "event",
    "ring-buffer",
    "producer-consumer",
    "observer",
    "logging",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
concurrutils-dir = "concurrutils.directory:main"
concurrutils-audio = "concurrutils.producer_consumer:main"

[tool.hatch.build.targets.wheel]
packages = ["concurrutils"]

[tool.hatch.build.targets.sdist]
include = ["concurrutils", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
