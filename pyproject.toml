[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blind75"
version = "0.1.0"
description = "Reference solutions to classic interview problems, with tree, list and union-find helpers and a per-user problem workspace."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "interview", "practice", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blind75"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
