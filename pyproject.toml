[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandpile-model"
version = "0.1.0"
description = "Abelian sandpile simulator on a growing grid that saves its states as 4-bit BMP images"
requires-python = ">=3.10"
dependencies = []
keywords = ["sandpile", "abelian", "cellular-automaton", "bmp", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
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
sandpile-model = "sandpile_model.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sandpile_model"]

[tool.pytest.ini_options]
addopts = "-ra"
