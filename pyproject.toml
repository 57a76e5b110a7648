[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carbono"
version = "0.1.1"
description = "A small fluent wrapper around UTC datetimes for calendar arithmetic and inspection."
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "date", "time", "datetime", "utc"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[tool.hatch.build.targets.wheel]
packages = ["carbono"]

[tool.pytest.ini_options]
addopts = "-ra"
