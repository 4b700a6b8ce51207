[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nirsviz"
version = "1.0.0"
description = "Building blocks for a NIRS viewer: SNIRF probe layout parsing, layers, an asset registry, vertex buffer layouts and a camera base class."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["nirs", "fnirs", "snirf", "probe", "visualization", "neuroimaging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nirsviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
