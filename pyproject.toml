[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scucells"
version = "0.1.0"
description = "A small event-driven digital logic simulator with gates, a full adder, a multiplexer, decoders, latches and registers."
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "simulation", "digital", "gates", "latch", "register", "eda", "delta-cycle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scucells-bench = "scucells.benches:main"

[tool.hatch.build.targets.wheel]
packages = ["scucells"]

[tool.pytest.ini_options]
addopts = "-ra"
