[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fabresolve"
version = "0.1.0"
description = "Resolve Fab marketplace listing UIDs to Epic catalog download coordinates"
requires-python = ">=3.10"
dependencies = []
keywords = ["fab", "epic", "marketplace", "catalog", "download", "library"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fabresolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
