[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmsound"
version = "0.1.0"
description = "PSG tone synthesis, audio sample decoders, LFO and a simple music score model"
requires-python = ">=3.10"
dependencies = []
keywords = ["psg", "synthesis", "audio", "codec", "mu-law", "a-law", "ima-adpcm", "lfo", "music"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fmsound"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
