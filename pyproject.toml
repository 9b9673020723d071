[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "newsroom"
version = "0.1.0"
description = "Threaded news-broadcast pipeline: producers, a dispatcher, co-editors and a screen manager joined by bounded and unbounded queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "producer-consumer",
    "threads",
    "semaphore",
    "bounded-buffer",
    "concurrency",
    "pipeline",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
newsroom = "newsroom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["newsroom"]

[tool.hatch.build.targets.sdist]
include = ["newsroom", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
