[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arithtasks"
version = "1.0.0"
description = "Solutions to a collection of arithmetic and algorithmic exercise problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "arithmetic", "olympiad", "education"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arithtasks = "arithtasks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arithtasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
