[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examdrills"
version = "0.1.0"
description = "Worked solutions to classic programming exam problems: strings, numbers, linked lists, binary trees and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "linked-list", "binary-tree", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["examdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
