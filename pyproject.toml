[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evosim"
version = "0.1.0"
description = "A small predator-prey evolution simulation with a live pygame view"
requires-python = ">=3.10"
keywords = ["simulation", "evolution", "predator-prey", "agents", "artificial-life"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]
dependencies = [
    "pygame",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
evosim = "evosim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["evosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
