[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kgtmath"
version = "0.1.0"
description = "Small dense vector and matrix types of floats with element-wise arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "linear algebra", "math"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kgtmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
