[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhoc-admin"
version = "0.1.0"
description = "Client library for the admin API of a managed connectors service: requests, paging and table rendering of clusters, namespaces, connectors and deployments."
requires-python = ">=3.10"
keywords = ["connectors", "administration", "kubernetes", "rest", "tables"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "httpx",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rhoc_admin"]

[tool.hatch.build.targets.sdist]
include = ["rhoc_admin", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
