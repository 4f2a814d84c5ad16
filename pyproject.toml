[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskworks"
version = "0.1.0"
description = "Concurrency building blocks for a task engine: locks, vectors, concurrent lists and queues, deferred disposal and task status helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "concurrency", "threading", "queue", "rwlock", "disposer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taskworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
