[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binance_client"
version = "0.1.0"
description = "Blocking client for the Binance spot REST API: signed account queries, order placement and raw endpoint access"
requires-python = ">=3.10"
keywords = ["binance", "exchange", "trading", "rest", "hmac"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["binance_client"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
