[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "Classic data structures and algorithms: arrays, linked lists, polynomials, stacks, queues, trees, graphs, sorting and searching."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "sorting",
    "searching",
    "graphs",
    "trees",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
