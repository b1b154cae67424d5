[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtfkit"
version = "0.1.0"
description = "A small framework for writing, running and reporting test cases and suites with shared fixtures"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "test-runner", "fixtures", "test-suite", "command-line"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
