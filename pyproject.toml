[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "axiskit"
version = "0.1.0"
description = "Shard administration helpers: file-backed settings store, game data file readers, INI loader, activity log and account command builders"
requires-python = ">=3.10"
dependencies = []
keywords = ["ultima-online", "shard", "administration", "mul", "settings", "ini"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["axiskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
