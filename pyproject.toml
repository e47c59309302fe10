[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bilheteria"
version = "0.1.0"
description = "Console ticket office kept in fixed-size binary record files, with on-disk heap sort, id searches, carts and tickets"
requires-python = ">=3.10"
dependencies = []
keywords = ["tickets", "events", "heapsort", "binary-search", "records", "cart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bilheteria = "bilheteria.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bilheteria"]

[tool.pytest.ini_options]
addopts = "-ra"
