[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cultra_mcp"
version = "1.0.0"
description = "Code intelligence building blocks: configuration, stdio message transport, symbol records, parameter parsing and Language Server Protocol types"
requires-python = ">=3.10"
dependencies = []
keywords = ["lsp", "language-server", "json-rpc", "mcp", "code-intelligence", "stdio"]
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
    "Topic :: Software Development",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cultra_mcp"]

[tool.hatch.build.targets.sdist]
include = ["cultra_mcp", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
