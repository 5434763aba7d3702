[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "permenkit"
version = "0.1.0"
description = "Helpers for Indonesian invoicing back ends: validators, SQL input sanitising, rupiah formatting, header checks, CSV export and WSGI middleware"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rupiah",
    "terbilang",
    "validation",
    "sql-sanitizer",
    "csv",
    "wsgi",
    "middleware",
    "cors",
    "security-headers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["permenkit"]

[tool.hatch.build.targets.sdist]
include = ["permenkit", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
