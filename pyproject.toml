[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoconlite"
version = "0.1.0"
description = "Merging and substitution resolution for HOCON-style configuration trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["hocon", "configuration", "config", "substitution", "merge"]
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
packages = ["hoconlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
