[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobalt"
version = "0.1.0"
description = "Configuration, documents and frontmatter for a static site generator, with a small development file server"
requires-python = ">=3.10"
keywords = ["static-site", "frontmatter", "markdown", "blog", "config"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
]
dependencies = [
    "pyyaml",
    "unidecode",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cobalt-serve = "cobalt.fileserve:main"

[tool.hatch.build.targets.wheel]
packages = ["cobalt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
