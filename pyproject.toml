[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamekit"
version = "0.1.0"
description = "Engine-independent building blocks for small games: vector and quaternion math, transforms, UI element trees, resource caches and a virtual screen."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "quaternion", "transform", "ui", "resource-cache", "virtual-screen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gamekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
