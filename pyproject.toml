[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessboard_tables"
version = "0.1.0"
description = "Chess board primitives and bitboard lookup tables: rays, steps, lines, magic numbers, bit-extraction slider attacks and Zobrist keys."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic bitboards", "pext", "zobrist", "lookup tables"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chessboard_tables"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
