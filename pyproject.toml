[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Operating-systems exercises: child processes, worker threads and synchronised marker threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["processes", "threads", "synchronization", "education", "binary-records"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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
oslabs-creator = "oslabs.creator:main"
oslabs-reporter = "oslabs.reporter:main"
oslabs-launcher = "oslabs.launcher:main"
oslabs-arraystats = "oslabs.arraystats:main"
oslabs-markers = "oslabs.markers:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
