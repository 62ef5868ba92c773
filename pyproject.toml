[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statusbar"
version = "0.1.0"
description = "A small status monitor that prints system information on a single line"
requires-python = ">=3.10"
dependencies = []
keywords = ["status", "statusbar", "monitor", "system", "battery", "cpu", "memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
statusbar = "statusbar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["statusbar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
