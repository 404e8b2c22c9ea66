[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "condenser_fx"
version = "0.1.0"
description = "Threshold-gated loop recorder effect: records audio above a threshold into a ring buffer with raised-cosine fades and plays it back mixed with the input"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "effect", "dsp", "gate", "looper", "ring-buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["condenser_fx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
