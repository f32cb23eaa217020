[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvikit"
version = "0.1.0"
description = "TeX dimensions, glue and boxes, plus reading, writing and interpreting DVI files"
requires-python = ">=3.10"
keywords = ["tex", "dvi", "typesetting", "glue", "boxes"]
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
    "Topic :: Text Processing :: Markup :: LaTeX",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dvikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
