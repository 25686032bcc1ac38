[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "authkit"
version = "0.1.0"
description = "Revoked-token stores, RBAC schemas, structured logging, identifiers and length-prefixed socket framing."
requires-python = ">=3.10"
keywords = ["authentication", "rbac", "logging", "snowflake", "framing", "redis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "pyyaml>=6.0",
    "redis>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
authkit-client = "authkit.socket_client:main"
authkit-server = "authkit.socket_server:main"

[tool.hatch.build.targets.wheel]
packages = ["authkit"]

[tool.hatch.build.targets.sdist]
include = ["authkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
ignore_missing_imports = true
