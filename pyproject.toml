[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clishell"
version = "0.1.0"
description = "Building blocks for interactive command shells: argument splitting, typed parsing, history, scheduling, state machines, colours, telnet handling and base64"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "shell", "history", "telnet", "state-machine", "base64", "ansi"]
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
    "Topic :: Terminals :: Telnet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clishell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
