[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pomotimer"
version = "0.1.0"
description = "Pomodoro interval timer with pluggable interval repositories"
requires-python = ">=3.10"
dependencies = []
keywords = ["pomodoro", "timer", "productivity", "intervals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pomotimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
