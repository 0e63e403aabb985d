[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderbookdemo"
version = "0.1.0"
description = "A price-time priority limit order book with an interactive terminal front end"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["orderbook", "matching-engine", "trading", "limit-order", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orderbookdemo = "orderbookdemo.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["orderbookdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
