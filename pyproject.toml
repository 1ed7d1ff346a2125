[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fancyweb"
version = "0.1.0"
description = "Small canvas toys: Conway's Game of Life, Pong and a prime factorization chart, on a tiny in-memory DOM"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-of-life", "pong", "primes", "canvas", "dom", "animation", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fancyweb = "fancyweb.site:main"
fancyweb-life = "fancyweb.life:main"
fancyweb-pong = "fancyweb.pong_app:main"
fancyweb-primes = "fancyweb.primes_chart:main"

[tool.hatch.build.targets.wheel]
packages = ["fancyweb"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
