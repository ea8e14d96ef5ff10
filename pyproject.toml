[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csopesy"
version = "0.1.0"
description = "An interactive command-line shell emulating a small operating system: processes, screens and an abstract scheduler."
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "scheduler", "process", "console", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csopesy = "csopesy.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["csopesy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
