[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pinesim"
version = "0.1.0"
description = "Simulated smartwatch peripherals and RTOS primitives for running embedded logic on a desktop"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulator", "smartwatch", "rtos", "emulation", "drivers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pinesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
