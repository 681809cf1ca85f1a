[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hl7stamp"
version = "0.1.0"
description = "Parse, format and convert HL7v2 date, time and timestamp values"
requires-python = ">=3.10"
dependencies = []
keywords = ["hl7", "hl7v2", "healthcare", "timestamp", "datetime", "parsing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hl7stamp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
