[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serverkit"
version = "0.1.0"
description = "Building blocks for API servers: field selectors, error codes, password hashing, JWT tokens and small utilities."
requires-python = ">=3.10"
keywords = [
    "field-selector",
    "jwt",
    "bcrypt",
    "error-codes",
    "api",
    "server",
    "utilities",
]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "bcrypt>=4.0",
    "pyjwt>=2.6",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["serverkit"]

[tool.hatch.build.targets.sdist]
include = [
    "serverkit",
    "tests",
]

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
