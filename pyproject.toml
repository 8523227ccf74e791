[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhit"
version = "1.0.0"
description = "A report of the hits found in nginx access logs"
requires-python = ">=3.10"
keywords = ["nginx", "log", "access-log", "analysis", "report", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rhit = "rhit.cli.main:main"

[tool.hatch.build.targets.wheel]
packages = ["rhit"]

[tool.pytest.ini_options]
addopts = "-ra"
