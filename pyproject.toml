[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "bikerental"
version = "1.0.0"
description = "Script-driven bike rental system with members, an admin account, bike registration and rentals"
requires-python = ">=3.10"
dependencies = []
keywords = ["bike", "rental", "members", "session", "batch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bikerental = "bikerental.app:main"

[tool.setuptools]
packages = ["bikerental"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
