[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcweb"
version = "2.4.0"
description = "Turn JSON schemas into PostgreSQL projection-table DDL, and describe HTTP CORS and security-header policies"
requires-python = ">=3.10"
dependencies = []
keywords = ["json-schema", "postgresql", "projection", "ddl", "cors", "security-headers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rcweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
