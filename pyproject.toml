[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caesarsplit"
version = "0.1.0"
description = "Caesar shift-by-two file encryption, run sequentially, in two processes or in two threads, with timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["caesar", "cipher", "encryption", "multiprocessing", "threading", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
caesarsplit-sequential = "caesarsplit.sequential:main"
caesarsplit-processes = "caesarsplit.processes:main"
caesarsplit-threads = "caesarsplit.threads:main"

[tool.hatch.build.targets.wheel]
packages = ["caesarsplit"]

[tool.pytest.ini_options]
addopts = "-ra"
