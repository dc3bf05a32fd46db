[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drrsim"
version = "0.1.0"
description = "Building blocks for LTE downlink scheduler simulation: standard tables, COST231 channel, mobile users, packet queues and settings"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "lte",
    "scheduler",
    "deficit round robin",
    "proportional fair",
    "simulation",
    "cost231",
    "radio resource management",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["drrsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
