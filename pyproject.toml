[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typednum"
version = "0.3.0"
description = "Numbers fixed to one value, checked when read back from plain data or a compact binary form"
requires-python = ">=3.11"
dependencies = []
keywords = ["typed", "number", "version", "serialization", "bincode", "varint", "zigzag"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "tomli-w"]

[tool.hatch.build.targets.wheel]
packages = ["typednum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
