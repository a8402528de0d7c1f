[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vetclinic"
version = "1.0.0"
description = "Console record keeping for a small veterinary clinic: owners, patients, treatments, appointments and reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["veterinary", "clinic", "appointments", "records", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vetclinic = "vetclinic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vetclinic"]

[tool.pytest.ini_options]
addopts = "-ra"
