[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketapps"
version = "0.1.0"
description = "Small handheld-style apps: Snake rules and app flow, a serial console and virtual-pet mini-games with achievements"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["snake", "game", "serial", "console", "uart", "virtual pet", "mini-games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pocketapps-serialconsole = "pocketapps.serialconsole.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
