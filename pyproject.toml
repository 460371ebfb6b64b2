[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlprims"
version = "0.1.0"
description = "Small pure-Python building blocks for machine learning: activations, losses, statistics, matrices, optimizers and simple models."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "machine-learning",
    "neural-network",
    "statistics",
    "linear-algebra",
    "optimization",
    "clustering",
    "k-means",
    "k-nearest-neighbors",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mlprims = "mlprims.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mlprims"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
