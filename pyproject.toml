[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazysegtree"
version = "0.1.0"
description = "Segment trees with lazy propagation: range add, point query, range sums, sums of squares and prime division"
requires-python = ">=3.10"
dependencies = []
keywords = ["segment tree", "lazy propagation", "range query", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
prime-divisor = "lazysegtree.prime_divisor:main"

[tool.hatch.build.targets.wheel]
packages = ["lazysegtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
