[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exadrums"
version = "0.9.0"
description = "Sound bank, mixer, WAV header and configuration utilities for an electronic drum module"
requires-python = ">=3.10"
dependencies = []
keywords = ["drums", "audio", "mixer", "wav", "sound bank", "electronic drums"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exadrums"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
