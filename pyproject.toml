[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runlog"
version = "0.1.0"
description = "Leveled process logger writing to stdout, a log file and a named pipe, driven by a simple config file"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "fifo", "named pipe", "log levels", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
