[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushin_boxes"
version = "0.14.0"
description = "A box-pushing puzzle game with stock levels, a level editor and saved records"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "sokoban", "boxes", "level-editor", "pygame"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pushin-boxes = "pushin_boxes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pushin_boxes"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
