[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixmath"
version = "0.1.0"
description = "Q16.16 fixed-point arithmetic, trigonometry and small matrix algebra"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "q16.16", "fix16", "fract32", "matrix", "qr-decomposition", "cholesky", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fixmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
