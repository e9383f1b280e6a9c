[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvemath"
version = "0.1.0"
description = "Cubic Bézier, piecewise path and glyph outline geometry for font and vector editing tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bezier",
    "curves",
    "geometry",
    "glyph",
    "font",
    "outline",
    "arc-length",
    "pattern-along-path",
]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Text Processing :: Fonts",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["curvemath"]

[tool.hatch.build.targets.sdist]
include = ["curvemath", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
