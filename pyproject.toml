[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psoswarm"
version = "0.1.0"
description = "Particle swarm optimisation with independent sub-swarms and classic benchmark functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "particle swarm optimization",
    "pso",
    "optimization",
    "metaheuristic",
    "benchmark functions",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
psoswarm = "psoswarm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["psoswarm"]

[tool.pytest.ini_options]
addopts = "-ra"
