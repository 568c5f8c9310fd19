[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "velautil"
version = "0.1.0"
description = "Small helpers: lazy singletons, list operations, parallel mapping, string formatting and runtime utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "singleton", "parallel", "collections", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["velautil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
