[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdpcalc"
version = "0.1.0"
description = "A recursive-descent calculator with variables, bitwise operators and a few math functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "recursive-descent", "parser", "expression", "interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rdpcalc = "rdpcalc.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["rdpcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
