[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftlib"
version = "0.1.0"
description = "Small toolkit of ASCII character, C-style string, integer, file-descriptor output, linked-list and line-reading helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "ascii", "linked list", "get_next_line", "file descriptor", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[tool.hatch.build.targets.wheel]
packages = ["ftlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
