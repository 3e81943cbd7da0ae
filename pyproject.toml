[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortscope"
version = "0.1.0"
description = "A terminal application that visualises classic sorting algorithms step by step"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["sorting", "algorithms", "visualisation", "terminal", "tui", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sortscope = "sortscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sortscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
