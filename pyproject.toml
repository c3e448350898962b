[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flmeters"
version = "0.1.0"
description = "Training meters (averages, counts, edit distance, frame error, MSE, timing) and small coordination utilities."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["meters", "metrics", "edit-distance", "levenshtein", "machine-learning", "training", "lru-cache"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["flmeters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
