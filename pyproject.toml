[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mtmkit"
version = "0.1.0"
description = "Run-length encoded character lists, ASCII art encoding, a game player model and small text and number utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["run-length encoding", "rle", "ascii art", "powers of two", "words"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mtmkit-ascii-art = "mtmkit.ascii_art:main"
mtmkit-powers = "mtmkit.powers:main"
mtmkit-words = "mtmkit.words:main"

[tool.hatch.build.targets.wheel]
packages = ["mtmkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
