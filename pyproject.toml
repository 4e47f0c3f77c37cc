[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bullethell"
version = "0.1.0"
description = "A small arcade bullet-hell game: dodge red projectiles, catch green ones to heal."
requires-python = ">=3.10"
keywords = ["game", "arcade", "bullet-hell", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bullethell = "bullethell.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bullethell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
