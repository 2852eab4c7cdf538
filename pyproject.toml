[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketdesk"
version = "0.1.0"
description = "A small interactive desk for registering, prioritising and attending customer tickets"
requires-python = ">=3.10"
dependencies = []
keywords = ["tickets", "queue", "priority", "help desk", "console", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ticketdesk = "ticketdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ticketdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
