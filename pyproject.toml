[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "droptube"
version = "0.1.0"
description = "Command-line tool for downloading YouTube videos through yt-dlp"
requires-python = ">=3.10"
keywords = ["youtube", "video", "download", "yt-dlp", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]
dependencies = [
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
drop-tube = "droptube.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["droptube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
