[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shallowflow"
version = "0.1.0"
description = "Edge Riemann solvers and initial-condition scenarios for the shallow water equations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "shallow water",
    "riemann solver",
    "f-wave",
    "augmented riemann",
    "finite volume",
    "tsunami",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shallowflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
