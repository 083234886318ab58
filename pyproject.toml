[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcpbridge"
version = "0.1.0"
description = "One interface for sending and reading messages on Slack channels and GitHub issue threads, with a command line and a REST API"
requires-python = ">=3.10"
keywords = ["slack", "github", "chat", "messaging", "rest", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
mcpcli = "mcpbridge.cli:main"
mcpapi = "mcpbridge.api:main"

[tool.hatch.build.targets.wheel]
packages = ["mcpbridge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
