[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casamentos"
version = "0.1.0"
description = "Reads wedding-planning spreadsheets and reports each couple's total spending"
requires-python = ">=3.10"
dependencies = []
keywords = ["wedding", "planning", "csv", "report", "budget"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
casamentos = "casamentos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["casamentos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
