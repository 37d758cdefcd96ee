[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pngtools"
version = "0.1.0"
description = "Small PNG utilities: inspect headers and CRCs, find PNG files, and stack images vertically"
requires-python = ">=3.10"
dependencies = []
keywords = ["png", "crc", "zlib", "image", "concatenate"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pnginfo = "pngtools.pnginfo:main"
findpng = "pngtools.findpng:main"
catpng = "pngtools.catpng:main"
png-demo = "pngtools.demo:main"
ls-names = "pngtools.fsutil:ls_main"
ls-ftype = "pngtools.fsutil:ftype_main"
show-args = "pngtools.fsutil:args_main"

[tool.hatch.build.targets.wheel]
packages = ["pngtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
