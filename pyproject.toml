[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcmtools"
version = "0.1.0"
description = "Small command-line tools for raw 16-bit PCM audio: synthesis, FFT band-pass filtering, downsampling and TCP/UDP streaming"
requires-python = ">=3.10"
dependencies = []
keywords = ["pcm", "audio", "fft", "bandpass", "sine", "streaming", "sockets", "calculator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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

[project.scripts]
pcm-calc = "pcmtools.calc:main"
pcm-angle = "pcmtools.vector:main"
pcm-basics = "pcmtools.basics:main"
pcm-synth = "pcmtools.synth:main"
pcm-datafiles = "pcmtools.datafiles:main"
pcm-bandpass = "pcmtools.fft:main"
pcm-downsample = "pcmtools.downsample:main"
pcm-client = "pcmtools.netclient:main"
pcm-phone = "pcmtools.phone:main"

[tool.hatch.build.targets.wheel]
packages = ["pcmtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
