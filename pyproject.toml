[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thomaslate"
version = "0.1.0"
description = "A two-character split-screen platform game: guide Thomas and Bob to the goal before time runs out."
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "split-screen", "co-op"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
thomaslate = "thomaslate.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["thomaslate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
