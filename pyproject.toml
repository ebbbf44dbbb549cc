[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filetracker"
version = "0.1.0"
description = "Watch a directory and log files that are added, modified, resized or removed"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "monitoring", "directory", "polling", "log"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filetracker = "filetracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filetracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
