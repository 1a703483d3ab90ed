[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdkswitch"
version = "0.1.0"
description = "Building blocks for an SDK version manager: shell hooks, shims, package linking and plugin helper modules."
requires-python = ">=3.10"
keywords = ["sdk", "version-manager", "shell", "shims", "toolchain"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: System :: Shells",
]
dependencies = [
    "beautifulsoup4",
    "requests",
    "psutil",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["sdkswitch"]

[tool.hatch.build.targets.sdist]
include = ["sdkswitch", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
