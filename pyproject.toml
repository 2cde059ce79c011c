[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "jackbox"
version = "0.1.0"
description = "Animated jack-in-the-box machines (crank, shafts, pulleys, cam, box, spring toys and a music box) drawn on a recording graphics context"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["animation", "machine", "simulation", "pulley", "cam", "jack-in-the-box"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["jackbox*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
