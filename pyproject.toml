[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cocktailpro"
version = "1.0.0"
description = "Console simulation of a cocktail mixing machine with dispensers, a scale and a recipe book"
requires-python = ">=3.10"
dependencies = []
keywords = ["cocktail", "simulation", "recipes", "mixing", "dispenser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cocktailpro = "cocktailpro.machine:main"

[tool.setuptools]
packages = ["cocktailpro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
