[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "khuscc"
version = "0.1.0"
description = "A small expression compiler that lowers e(x) definitions and KHUS operations to three-address code and 32-bit x86 assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "three-address code", "assembly", "x86", "nasm", "lexer", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
khuscc = "khuscc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["khuscc"]

[tool.pytest.ini_options]
addopts = "-ra"
