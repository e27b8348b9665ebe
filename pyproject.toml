[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalia"
version = "0.1.0"
description = "Escape-time fractals, iterated function systems and the Koch snowflake, computed and rendered to images."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "fractal",
    "mandelbrot",
    "julia",
    "burning-ship",
    "ifs",
    "barnsley-fern",
    "koch-snowflake",
]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractalia = "fractalia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fractalia"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
