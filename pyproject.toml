[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apmath"
version = "0.1.0"
description = "Arbitrary precision decimal arithmetic with exact integer helpers, rounded division and FFT multiplication"
requires-python = ">=3.10"
dependencies = []
keywords = ["arbitrary precision", "decimal", "bignum", "fft", "math"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
apmath-primes = "apmath.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["apmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
