[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "escalonador"
version = "0.1.0"
description = "Round Robin CPU scheduling simulator with multiple CPUs, blocking phases and live process insertion"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "round-robin", "operating-systems", "simulation", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
escalonador = "escalonador.cli:main"
escalonador-inserir = "escalonador.inserter:main"

[tool.hatch.build.targets.wheel]
packages = ["escalonador"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
