[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expensetracker"
version = "0.1.0"
description = "A command-line expense tracker that keeps expenses in a CSV file"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["expenses", "budget", "csv", "cli", "finance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
expense = "expensetracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["expensetracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
