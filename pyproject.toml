[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ajustepol"
version = "1.0.0"
description = "Least-squares polynomial curve fitting with Gaussian elimination, plus a test-input generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["least squares", "polynomial fitting", "curve fitting", "gaussian elimination", "numerical methods"]
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
ajustepol-v1 = "ajustepol.fit_basic:main"
ajustepol-v2 = "ajustepol.fit_fast:main"
ajustepol-gera-entrada = "ajustepol.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["ajustepol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
