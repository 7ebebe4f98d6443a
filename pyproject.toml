[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "posegraph"
version = "0.1.0"
description = "Build a 2D pose graph from odometry: a node every stretch of travel, odometry edges with information matrices, and display markers for both."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["slam", "pose graph", "odometry", "robotics", "markers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
posegraph = "posegraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["posegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
