[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cheatsheet"
version = "0.1.0"
description = "Worked examples of classic array and string techniques: two pointers, sliding window and binary search."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "two-pointers", "sliding-window", "binary-search", "interview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
cheatsheet = "cheatsheet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cheatsheet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
