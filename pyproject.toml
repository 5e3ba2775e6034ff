[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcml"
version = "0.1.0"
description = "Building blocks of a Minecraft launcher: logging, configuration, download bookkeeping and skin rendering"
requires-python = ">=3.10"
keywords = ["minecraft", "launcher", "skin", "avatar", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mcml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
