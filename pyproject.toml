[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zettelstore"
version = "0.1.0"
description = "Zettel identifiers, metadata parsing, syntax tree, access policies, auth tokens and a small command line for a zettel store"
requires-python = ">=3.10"
keywords = ["zettelkasten", "notes", "metadata", "knowledge-management"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
    "Topic :: Text Processing :: Markup",
]
dependencies = [
    "bcrypt",
    "pyjwt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zettelstore = "zettelstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zettelstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
