[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpmath"
version = "0.1.0"
description = "Small number-theory and counting routines for competitive programming problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "number theory",
    "combinatorics",
    "prime factorization",
    "sieve",
    "competitive programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
cpmath = "cpmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
