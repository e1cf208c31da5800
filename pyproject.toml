[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagespeed"
version = "0.1.0"
description = "Small JSON API over a SQLite database of users and their pets, showing per-row and batched query patterns"
requires-python = ">=3.10"
dependencies = [
    "werkzeug",
]
keywords = ["http", "json", "api", "sqlite", "n+1", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pagespeed = "pagespeed.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pagespeed"]

[tool.pytest.ini_options]
addopts = "-ra"
