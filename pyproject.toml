[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promptkit"
version = "0.1.0"
description = "Building blocks for a shell prompt: tool versions, VCS state, clock, Kubernetes context and system information"
requires-python = ">=3.11"
keywords = ["prompt", "shell", "git", "version", "kubernetes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "pyyaml",
    "regex",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["promptkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
ignore_missing_imports = true
