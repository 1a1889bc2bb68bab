[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlabs"
version = "0.1.0"
description = "Long-number multiplication, theatre tables with key sorting, sparse matrices and stacks as small interactive study programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "data-structures", "sparse-matrix", "csr", "stack", "bignum", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlabs-bignum = "structlabs.bignum_cli:main"
structlabs-theatre = "structlabs.theatre_app:main"
structlabs-sparse = "structlabs.sparse_app:main"
structlabs-stack = "structlabs.stack_app:main"

[tool.hatch.build.targets.wheel]
packages = ["structlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
