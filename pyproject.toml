[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcpdemos"
version = "0.1.0"
description = "Small programming-exercise demos: stacks, letter-frequency language detection, a timer population counter, a thread-safe bank account and concurrent tasks"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "demos", "stack", "concurrency", "language-detection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
pcpdemos = "pcpdemos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pcpdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
