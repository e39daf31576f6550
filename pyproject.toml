[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primelab"
version = "0.1.0"
description = "Prime generation and primality tests (GOST, Miller, Pocklington) with small numeric exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "primality", "miller-rabin", "pocklington", "gost", "sieve", "number-theory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
primelab-gost = "primelab.gost:main"
primelab-miller = "primelab.miller:main"
primelab-pocklington = "primelab.pocklington:main"
primelab-chart = "primelab.piecewise:main"
primelab-series = "primelab.series:main"
primelab-game = "primelab.game:main"
primelab-coffee = "primelab.coffee:main"

[tool.hatch.build.targets.wheel]
packages = ["primelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
