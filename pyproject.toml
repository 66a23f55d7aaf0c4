[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numkit"
version = "0.1.0"
description = "Small number-theory, digit, base-conversion and arithmetic helpers with a command-line front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["number theory", "primes", "divisors", "digits", "base conversion", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numkit = "numkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numkit"]

[tool.pytest.ini_options]
addopts = "-ra"
