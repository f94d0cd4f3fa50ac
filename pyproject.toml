[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedstructs"
version = "1.0.0"
description = "Linked list, stack and queue built on singly linked nodes, with an interactive menu for exploring them"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "stack", "queue", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkedstructs = "linkedstructs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
