[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stencilbench"
version = "0.1.0"
description = "Stencil benchmark kernels (ADI, convolutions, FDTD, Jacobi, Seidel) with timing and result dumps"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "benchmark",
    "stencil",
    "jacobi",
    "seidel",
    "fdtd",
    "convolution",
    "adi",
    "numerical kernels",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stencilbench = "stencilbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stencilbench"]

[tool.hatch.build.targets.sdist]
include = [
    "stencilbench",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
