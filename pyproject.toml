[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muffet"
version = "1.0.1"
description = "A small arcade dodging game: keep the heart alive on three lanes while spiders rush across the playfield."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "dodge", "highscores"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
muffet = "muffet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["muffet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
