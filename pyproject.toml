[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zxcmath"
version = "0.1.2"
description = "Small linear algebra toolkit: 2D and 3D vectors, quaternions and 3x3, 4x4 and dynamic matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "vector", "matrix", "quaternion", "linear-algebra", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["zxcmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
